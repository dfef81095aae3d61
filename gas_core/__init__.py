from .constants import DEFAULT_CONSTANTS, GAS_PER_VTHO, MAX_GAS_PRICE_COEF, ProtocolConstants, load_constants
from .engine import (
    calculate_fee,
    calculate_gas,
    compute_execution_gas,
    compute_intrinsic_gas,
    compute_priced_cost,
    compute_tier_costs,
    validate_shape,
)
from .errors import InvalidParameter, UnknownProfile
from .models import (
    PRIORITY_TIERS,
    ExecutionGas,
    FeeReport,
    IntrinsicGas,
    PricedCost,
    PriorityTier,
    TierCost,
    TransactionShape,
)
from .profiles import CUSTOM_PROFILE, DATA_PROFILES, DataProfile, apply_profile, list_profiles, lookup_profile

__all__ = [
    "CUSTOM_PROFILE",
    "DATA_PROFILES",
    "DEFAULT_CONSTANTS",
    "GAS_PER_VTHO",
    "MAX_GAS_PRICE_COEF",
    "PRIORITY_TIERS",
    "DataProfile",
    "ExecutionGas",
    "FeeReport",
    "IntrinsicGas",
    "InvalidParameter",
    "PricedCost",
    "PriorityTier",
    "ProtocolConstants",
    "TierCost",
    "TransactionShape",
    "UnknownProfile",
    "apply_profile",
    "calculate_fee",
    "calculate_gas",
    "compute_execution_gas",
    "compute_intrinsic_gas",
    "compute_priced_cost",
    "compute_tier_costs",
    "list_profiles",
    "load_constants",
    "lookup_profile",
    "validate_shape",
]
