"""
Reference Data

Static price tables, workload coefficients and delivery restrictions.
"""

from .prices import (
    MIN_DELIVERY_PRICE,
    OVER_30_KM_PRICE,
    LESS_30_KM_PRICE,
    LESS_10_KM_PRICE,
    LESS_2_KM_PRICE,
    DISTANCE_PRICES,
    LARGE_CARGO_PRICE,
    SMALL_CARGO_PRICE,
    CARGO_SIZE_PRICES,
    FRAGILE_PRICE,
    NOT_FRAGILE_PRICE,
    CARGO_FRAGILITY_PRICES,
)
from .coefficients import (
    VERY_HIGH_WORKLOAD_COEFFICIENT,
    HIGH_WORKLOAD_COEFFICIENT,
    INCREASED_WORKLOAD_COEFFICIENT,
    DEFAULT_COEFFICIENT,
    WORKLOAD_COEFFICIENTS,
)
from .restrictions import FRAGILE_OVER_30_KM_REASON, FORBIDDEN_COMBINATIONS

__all__ = [
    "MIN_DELIVERY_PRICE",
    "OVER_30_KM_PRICE",
    "LESS_30_KM_PRICE",
    "LESS_10_KM_PRICE",
    "LESS_2_KM_PRICE",
    "DISTANCE_PRICES",
    "LARGE_CARGO_PRICE",
    "SMALL_CARGO_PRICE",
    "CARGO_SIZE_PRICES",
    "FRAGILE_PRICE",
    "NOT_FRAGILE_PRICE",
    "CARGO_FRAGILITY_PRICES",
    "VERY_HIGH_WORKLOAD_COEFFICIENT",
    "HIGH_WORKLOAD_COEFFICIENT",
    "INCREASED_WORKLOAD_COEFFICIENT",
    "DEFAULT_COEFFICIENT",
    "WORKLOAD_COEFFICIENTS",
    "FRAGILE_OVER_30_KM_REASON",
    "FORBIDDEN_COMBINATIONS",
]
