"""Protocol cost coefficients for the gas fee engine."""

from dataclasses import asdict, dataclass, fields
from typing import Dict, Mapping

from .errors import InvalidParameter

# Fixed gas-to-VTHO exchange rate; not part of the configurable table.
GAS_PER_VTHO = 100000
MAX_GAS_PRICE_COEF = 255


@dataclass(frozen=True)
class ProtocolConstants:
    """Gas schedule used by every calculation."""

    tx_gas: int = 5000
    clause_gas: int = 16000
    clause_gas_contract_creation: int = 48000
    zero_byte_gas: int = 4
    non_zero_byte_gas: int = 68
    vm_call_gas: int = 15000  # surcharge for contract creation
    base_gas_price: int = 10**13  # wei per gas

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


DEFAULT_CONSTANTS = ProtocolConstants()


def load_constants(overrides: Mapping[str, object]) -> ProtocolConstants:
    """Build a constants table from a partial mapping over the defaults."""

    known = {field.name for field in fields(ProtocolConstants)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise InvalidParameter(f"Unknown constant(s): {', '.join(unknown)}.")

    values = DEFAULT_CONSTANTS.to_dict()
    for name, raw in overrides.items():
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise InvalidParameter(f"{name} must be a number.")
        if isinstance(raw, float):
            if not raw.is_integer():
                raise InvalidParameter(f"{name} must be an integer.")
            raw = int(raw)
        if raw < 0:
            raise InvalidParameter(f"{name} must be non-negative.")
        values[name] = raw

    return ProtocolConstants(**values)
