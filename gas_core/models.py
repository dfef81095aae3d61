"""Domain schemas for the gas fee engine."""

from dataclasses import asdict, dataclass
from typing import Dict, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class TransactionShape:
    """Structured input describing the transaction to price."""

    clause_count: int = 1
    zero_bytes: int = 0
    non_zero_bytes: int = 0
    vm_gas: Number = 0  # caller estimate, excludes the contract-creation surcharge
    gas_price_coef: int = 0  # 0..255
    is_contract_creation: bool = False

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class PriorityTier:
    name: str
    coefficient: int
    display_hint: str

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


PRIORITY_TIERS: Tuple[PriorityTier, ...] = (
    PriorityTier(name="Regular", coefficient=0, display_hint="blue"),
    PriorityTier(name="Medium", coefficient=85, display_hint="green"),
    PriorityTier(name="High", coefficient=255, display_hint="orange"),
)


@dataclass(frozen=True)
class IntrinsicGas:
    tx_gas: int
    clause_gas: int
    data_gas: int
    total: int


@dataclass(frozen=True)
class ExecutionGas:
    user_defined: Number
    contract_call: int
    total: Number


@dataclass(frozen=True)
class PricedCost:
    """Gas unit price at one coefficient and the VTHO amount it yields."""

    base: int
    additional: float
    total: float
    multiplier: float
    vtho_amount: float


@dataclass(frozen=True)
class TierCost:
    name: str
    coefficient: int
    display_hint: str
    vtho_amount: float


@dataclass(frozen=True)
class FeeReport:
    """Deterministic calculation output for a single transaction shape."""

    shape: TransactionShape
    intrinsic_gas: IntrinsicGas
    vm_gas: ExecutionGas
    gas_price: PricedCost
    total_gas: Number
    vtho_amount: float
    tiers: Tuple[TierCost, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "input": self.shape.to_dict(),
            "intrinsic_gas": asdict(self.intrinsic_gas),
            "vm_gas": asdict(self.vm_gas),
            "gas_price": {
                "base": self.gas_price.base,
                "additional": self.gas_price.additional,
                "total": self.gas_price.total,
                "multiplier": self.gas_price.multiplier,
            },
            "total_gas": self.total_gas,
            "vtho_amount": self.vtho_amount,
            "tiers": [asdict(tier) for tier in self.tiers],
        }
