"""
Delivery Data

Reference tables for pricing, re-exported for convenience.

Structure:
    - reference/prices.py       : additive price components and the floor
    - reference/coefficients.py : workload surge multipliers
    - reference/restrictions.py : forbidden attribute combinations
"""

from delivery.enums import CargoFragility, CargoSize, Distance, DeliveryServiceWorkload

from .reference.prices import (
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
from .reference.coefficients import (
    VERY_HIGH_WORKLOAD_COEFFICIENT,
    HIGH_WORKLOAD_COEFFICIENT,
    INCREASED_WORKLOAD_COEFFICIENT,
    DEFAULT_COEFFICIENT,
    WORKLOAD_COEFFICIENTS,
)
from .reference.restrictions import FRAGILE_OVER_30_KM_REASON, FORBIDDEN_COMBINATIONS


# =============================================================================
# VALIDATION
# =============================================================================

def validate_reference() -> None:
    """
    Validate reference table integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    tables = [
        ("DISTANCE_PRICES", DISTANCE_PRICES, Distance),
        ("CARGO_SIZE_PRICES", CARGO_SIZE_PRICES, CargoSize),
        ("CARGO_FRAGILITY_PRICES", CARGO_FRAGILITY_PRICES, CargoFragility),
        ("WORKLOAD_COEFFICIENTS", WORKLOAD_COEFFICIENTS, DeliveryServiceWorkload),
    ]

    for table_name, table, enum_cls in tables:
        # Every member must be priced
        for member in enum_cls:
            if member not in table:
                errors.append(f"{table_name}: missing entry for {member.value}")

        # Prices and coefficients are never negative
        for key, value in table.items():
            if value < 0:
                errors.append(f"{table_name}: negative value {value} for {key.value}")

    if WORKLOAD_COEFFICIENTS.get(DeliveryServiceWorkload.REGULAR) != DEFAULT_COEFFICIENT:
        errors.append("WORKLOAD_COEFFICIENTS: regular workload must use DEFAULT_COEFFICIENT")

    if MIN_DELIVERY_PRICE <= 0:
        errors.append(f"MIN_DELIVERY_PRICE must be positive, got {MIN_DELIVERY_PRICE}")

    for distance, fragility in FORBIDDEN_COMBINATIONS:
        if not isinstance(distance, Distance) or not isinstance(fragility, CargoFragility):
            errors.append(
                f"FORBIDDEN_COMBINATIONS: key ({distance!r}, {fragility!r}) "
                f"must be (Distance, CargoFragility)"
            )

    if errors:
        raise ValueError("Reference data errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_reference()

__all__ = [
    "validate_reference",
    # Floor
    "MIN_DELIVERY_PRICE",
    # Distance prices
    "OVER_30_KM_PRICE",
    "LESS_30_KM_PRICE",
    "LESS_10_KM_PRICE",
    "LESS_2_KM_PRICE",
    "DISTANCE_PRICES",
    # Cargo size prices
    "LARGE_CARGO_PRICE",
    "SMALL_CARGO_PRICE",
    "CARGO_SIZE_PRICES",
    # Fragility prices
    "FRAGILE_PRICE",
    "NOT_FRAGILE_PRICE",
    "CARGO_FRAGILITY_PRICES",
    # Workload coefficients
    "VERY_HIGH_WORKLOAD_COEFFICIENT",
    "HIGH_WORKLOAD_COEFFICIENT",
    "INCREASED_WORKLOAD_COEFFICIENT",
    "DEFAULT_COEFFICIENT",
    "WORKLOAD_COEFFICIENTS",
    # Restrictions
    "FRAGILE_OVER_30_KM_REASON",
    "FORBIDDEN_COMBINATIONS",
]
