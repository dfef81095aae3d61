"""Pure computation engine for transaction gas and VTHO fees."""

import logging
import math
from typing import Tuple

from .constants import DEFAULT_CONSTANTS, GAS_PER_VTHO, MAX_GAS_PRICE_COEF, ProtocolConstants
from .errors import InvalidParameter
from .models import (
    PRIORITY_TIERS,
    ExecutionGas,
    FeeReport,
    IntrinsicGas,
    Number,
    PricedCost,
    TierCost,
    TransactionShape,
)

logger = logging.getLogger(__name__)


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_shape(shape: TransactionShape) -> None:
    """Reject shapes that would produce nonsensical totals."""

    if not _is_integer(shape.clause_count) or shape.clause_count < 1:
        raise InvalidParameter("clause_count must be an integer >= 1.")
    for name in ("zero_bytes", "non_zero_bytes"):
        value = getattr(shape, name)
        if not _is_integer(value) or value < 0:
            raise InvalidParameter(f"{name} must be a non-negative integer.")
    vm_gas = shape.vm_gas
    if isinstance(vm_gas, bool) or not isinstance(vm_gas, (int, float)):
        raise InvalidParameter("vm_gas must be a number.")
    if (isinstance(vm_gas, float) and not math.isfinite(vm_gas)) or vm_gas < 0:
        raise InvalidParameter("vm_gas must be a finite, non-negative number.")
    if not _is_integer(shape.gas_price_coef) or not 0 <= shape.gas_price_coef <= MAX_GAS_PRICE_COEF:
        raise InvalidParameter(f"gas_price_coef must be an integer between 0 and {MAX_GAS_PRICE_COEF}.")
    if not isinstance(shape.is_contract_creation, bool):
        raise InvalidParameter("is_contract_creation must be a boolean.")


def compute_intrinsic_gas(
    shape: TransactionShape, constants: ProtocolConstants = DEFAULT_CONSTANTS
) -> IntrinsicGas:
    """Base transaction cost plus per-clause and payload byte costs."""

    per_clause = (
        constants.clause_gas_contract_creation
        if shape.is_contract_creation
        else constants.clause_gas
    )
    clause_gas = per_clause * shape.clause_count
    data_gas = (
        shape.zero_bytes * constants.zero_byte_gas
        + shape.non_zero_bytes * constants.non_zero_byte_gas
    )
    return IntrinsicGas(
        tx_gas=constants.tx_gas,
        clause_gas=clause_gas,
        data_gas=data_gas,
        total=constants.tx_gas + clause_gas + data_gas,
    )


def compute_execution_gas(
    shape: TransactionShape, constants: ProtocolConstants = DEFAULT_CONSTANTS
) -> ExecutionGas:
    """Declared VM gas plus the flat contract-creation surcharge."""

    # Applied once per transaction, independent of clause_count.
    contract_call = constants.vm_call_gas if shape.is_contract_creation else 0
    return ExecutionGas(
        user_defined=shape.vm_gas,
        contract_call=contract_call,
        total=shape.vm_gas + contract_call,
    )


def compute_priced_cost(
    total_gas: Number, coefficient: int, constants: ProtocolConstants = DEFAULT_CONSTANTS
) -> PricedCost:
    """Scale the base gas price by ``1 + coefficient / 255`` and convert gas to VTHO."""

    ratio = coefficient / MAX_GAS_PRICE_COEF
    multiplier = 1 + ratio
    try:
        vtho = total_gas / GAS_PER_VTHO
    except OverflowError as exc:
        raise InvalidParameter("Total gas is too large to convert to VTHO.") from exc
    return PricedCost(
        base=constants.base_gas_price,
        additional=constants.base_gas_price * ratio,
        total=constants.base_gas_price * multiplier,
        multiplier=multiplier,
        vtho_amount=vtho * multiplier,
    )


def compute_tier_costs(
    total_gas: Number, constants: ProtocolConstants = DEFAULT_CONSTANTS
) -> Tuple[TierCost, ...]:
    """VTHO amount at each fixed priority tier, in tier order."""

    return tuple(
        TierCost(
            name=tier.name,
            coefficient=tier.coefficient,
            display_hint=tier.display_hint,
            vtho_amount=compute_priced_cost(total_gas, tier.coefficient, constants).vtho_amount,
        )
        for tier in PRIORITY_TIERS
    )


def calculate_fee(
    shape: TransactionShape,
    constants: ProtocolConstants = DEFAULT_CONSTANTS,
    validate: bool = True,
) -> FeeReport:
    """Compute the full gas and VTHO breakdown for one transaction shape."""

    if validate:
        try:
            validate_shape(shape)
        except InvalidParameter as exc:
            logger.warning("Rejected transaction shape: %s", exc)
            raise

    intrinsic = compute_intrinsic_gas(shape, constants)
    execution = compute_execution_gas(shape, constants)
    try:
        total_gas = intrinsic.total + execution.total
    except OverflowError as exc:
        raise InvalidParameter("Total gas is too large to represent.") from exc
    gas_price = compute_priced_cost(total_gas, shape.gas_price_coef, constants)

    logger.debug(
        "Calculated fee: intrinsic=%s vm=%s total=%s coef=%s vtho=%s",
        intrinsic.total,
        execution.total,
        total_gas,
        shape.gas_price_coef,
        gas_price.vtho_amount,
    )

    return FeeReport(
        shape=shape,
        intrinsic_gas=intrinsic,
        vm_gas=execution,
        gas_price=gas_price,
        total_gas=total_gas,
        vtho_amount=gas_price.vtho_amount,
        tiers=compute_tier_costs(total_gas, constants),
    )


calculate_gas = calculate_fee
