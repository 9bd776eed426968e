"""
Delivery Cost Calculator

Prices a delivery from four banded shipment attributes:

    cost = max(
        (distance price + size price + fragility price) * workload coefficient,
        MIN_DELIVERY_PRICE
    )

Fragile cargo beyond 30 km is refused outright (DeliveryForbidden) before any
price is looked up.

Two entry points share the same reference tables:
    compute_cost()     - one shipment, plain Python values
    calculate_costs()  - DataFrame in, DataFrame out

REQUIRED INPUT COLUMNS (calculate_costs)
----------------------------------------
    distance            - "over_30km", "less_30km", "less_10km", "less_2km"
    cargo_size          - "large" or "small"
    cargo_fragility     - "fragile" or "not_fragile"
    workload            - "very_high", "high", "increased", "regular", "low"

OUTPUT COLUMNS ADDED
--------------------
    - delivery_forbidden
    - cost_distance, cost_size, cost_fragility, workload_coefficient
    - cost_subtotal, cost_adjusted, uses_min_price, cost_total
    - calculator_version

USAGE
-----
    from delivery.calculate_costs import compute_cost, calculate_costs
    cost = compute_cost("less_10km", "large", "not_fragile", "high")
    result = calculate_costs(df)
"""

from enum import Enum
from typing import Literal

import polars as pl

from .data import (
    MIN_DELIVERY_PRICE,
    DISTANCE_PRICES,
    CARGO_SIZE_PRICES,
    CARGO_FRAGILITY_PRICES,
    DEFAULT_COEFFICIENT,
    WORKLOAD_COEFFICIENTS,
    FORBIDDEN_COMBINATIONS,
)
from .enums import CargoFragility, CargoSize, Distance, DeliveryServiceWorkload
from .exceptions import DeliveryForbidden
from .version import VERSION


REQUIRED_COLUMNS = ["distance", "cargo_size", "cargo_fragility", "workload"]

# Columns nulled out for flagged forbidden shipments
COST_COLUMNS = [
    "cost_distance",
    "cost_size",
    "cost_fragility",
    "workload_coefficient",
    "cost_subtotal",
    "cost_adjusted",
    "uses_min_price",
    "cost_total",
]


# =============================================================================
# SINGLE SHIPMENT
# =============================================================================

def compute_cost(
    distance: Distance | str,
    cargo_size: CargoSize | str,
    cargo_fragility: CargoFragility | str,
    workload: DeliveryServiceWorkload | str,
) -> float:
    """
    Calculate the delivery cost for a single shipment.

    Args:
        distance: Distance band to the destination
        cargo_size: Size of the cargo
        cargo_fragility: Whether the cargo is fragile
        workload: Current workload of the delivery service. Values outside
            the surge workloads are charged at DEFAULT_COEFFICIENT.

    Returns:
        Delivery cost, never below MIN_DELIVERY_PRICE

    Raises:
        DeliveryForbidden: If the distance/fragility combination is refused
        ValueError: If an attribute is missing or not a recognized value
    """
    distance = _coerce(Distance, distance, "distance")
    cargo_fragility = _coerce(CargoFragility, cargo_fragility, "cargo_fragility")

    # Refused routes are reported before the remaining attributes are checked
    reason = FORBIDDEN_COMBINATIONS.get((distance, cargo_fragility))
    if reason is not None:
        raise DeliveryForbidden(reason)

    cargo_size = _coerce(CargoSize, cargo_size, "cargo_size")
    if workload is None:
        raise ValueError("workload is required")

    cost = 0.0
    cost += price_for_distance(distance)
    cost += price_for_size(cargo_size)
    cost += price_for_fragility(cargo_fragility)
    cost *= coefficient_for_workload(workload)

    return max(cost, MIN_DELIVERY_PRICE)


# Matches the naming used by order workflows
calculate_delivery_cost = compute_cost


def price_for_distance(distance: Distance | str) -> float:
    """Price component for the distance band."""
    return DISTANCE_PRICES[_coerce(Distance, distance, "distance")]


def price_for_size(cargo_size: CargoSize | str) -> float:
    """Price component for the cargo size."""
    return CARGO_SIZE_PRICES[_coerce(CargoSize, cargo_size, "cargo_size")]


def price_for_fragility(cargo_fragility: CargoFragility | str) -> float:
    """Price component for fragile handling (zero for non-fragile cargo)."""
    return CARGO_FRAGILITY_PRICES[_coerce(CargoFragility, cargo_fragility, "cargo_fragility")]


def coefficient_for_workload(workload) -> float:
    """
    Surge coefficient for the delivery service workload.

    Only VERY_HIGH, HIGH and INCREASED surge. REGULAR, LOW and anything
    unrecognized resolve to DEFAULT_COEFFICIENT rather than raising.
    """
    try:
        workload = DeliveryServiceWorkload(workload)
    except ValueError:
        return DEFAULT_COEFFICIENT
    return WORKLOAD_COEFFICIENTS.get(workload, DEFAULT_COEFFICIENT)


def _coerce(enum_cls: type[Enum], value, field: str):
    """Convert a member or its string value to the enum member."""
    if value is None:
        raise ValueError(f"{field} is required")
    try:
        return enum_cls(value)
    except ValueError:
        valid = [m.value for m in enum_cls]
        raise ValueError(f"Unrecognized {field}: {value!r}. Valid options: {valid}") from None


# =============================================================================
# BATCH
# =============================================================================

def calculate_costs(
    df: pl.DataFrame,
    on_forbidden: Literal["raise", "flag"] = "raise",
    verbose: bool = False,
) -> pl.DataFrame:
    """
    Calculate delivery costs for a shipment DataFrame.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)
        on_forbidden: What to do with forbidden shipments:
            - "raise": Raise DeliveryForbidden if any row is forbidden
            - "flag": Keep them with delivery_forbidden=True and null costs
        verbose: If True, print a summary of the priced shipments

    Returns:
        DataFrame with component prices, coefficient, totals and version

    Raises:
        DeliveryForbidden: If on_forbidden="raise" and any row is forbidden
        ValueError: If columns are missing, contain nulls or unrecognized values
    """
    if on_forbidden not in ("raise", "flag"):
        raise ValueError(f"on_forbidden must be 'raise' or 'flag', got '{on_forbidden}'")

    _validate_inputs(df)

    # Phase 1: Refuse forbidden combinations before pricing
    df = _flag_forbidden(df)
    if on_forbidden == "raise":
        _raise_forbidden(df)

    # Phase 2: Look up price components and coefficient
    df = _lookup_prices(df)

    # Phase 3: Calculate costs
    df = _calculate_subtotal(df)
    df = _apply_workload(df)
    df = _apply_min_price(df)
    df = _clear_forbidden(df)

    # Phase 4: Stamp version
    df = _stamp_version(df)

    if verbose:
        forbidden = int(df["delivery_forbidden"].sum())
        at_minimum = int(df["uses_min_price"].sum())
        print(
            f"Priced {len(df) - forbidden:,} shipment(s): "
            f"{at_minimum:,} at minimum price, {forbidden:,} forbidden"
        )

    return df


def _validate_inputs(df: pl.DataFrame) -> None:
    """Check required columns exist, have no nulls and hold recognized values."""
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required column(s): {missing}")

    null_counts = df.select(REQUIRED_COLUMNS).null_count().row(0, named=True)
    with_nulls = {c: n for c, n in null_counts.items() if n > 0}
    if with_nulls:
        raise ValueError(f"Null values in required column(s): {with_nulls}")

    # Workload is excluded: unrecognized values use DEFAULT_COEFFICIENT
    strict = [
        ("distance", Distance),
        ("cargo_size", CargoSize),
        ("cargo_fragility", CargoFragility),
    ]
    for column, enum_cls in strict:
        valid = [m.value for m in enum_cls]
        unknown = df.filter(~pl.col(column).is_in(valid))[column].unique().to_list()
        if unknown:
            raise ValueError(
                f"Unrecognized {column} value(s): {sorted(unknown)}. Valid options: {valid}"
            )


def _flag_forbidden(df: pl.DataFrame) -> pl.DataFrame:
    """Flag shipments matching any forbidden distance/fragility combination."""
    expr = pl.lit(False)
    for distance, fragility in FORBIDDEN_COMBINATIONS:
        expr = expr | (
            (pl.col("distance") == distance.value) &
            (pl.col("cargo_fragility") == fragility.value)
        )
    return df.with_columns(expr.alias("delivery_forbidden"))


def _raise_forbidden(df: pl.DataFrame) -> None:
    """Raise DeliveryForbidden naming how many rows hit each restriction."""
    messages = []
    for (distance, fragility), reason in FORBIDDEN_COMBINATIONS.items():
        count = df.filter(
            (pl.col("distance") == distance.value) &
            (pl.col("cargo_fragility") == fragility.value)
        ).height
        if count:
            messages.append(f"{count} shipment(s): {reason}")

    if messages:
        raise DeliveryForbidden(" ".join(messages))


def _by_value(table) -> dict:
    """Re-key a reference table by member value for column replacement."""
    return {member.value: value for member, value in table.items()}


def _lookup_prices(df: pl.DataFrame) -> pl.DataFrame:
    """Add the three price components and the workload coefficient."""
    return df.with_columns([
        pl.col("distance")
        .replace_strict(_by_value(DISTANCE_PRICES), return_dtype=pl.Float64)
        .alias("cost_distance"),

        pl.col("cargo_size")
        .replace_strict(_by_value(CARGO_SIZE_PRICES), return_dtype=pl.Float64)
        .alias("cost_size"),

        pl.col("cargo_fragility")
        .replace_strict(_by_value(CARGO_FRAGILITY_PRICES), return_dtype=pl.Float64)
        .alias("cost_fragility"),

        # Unrecognized workloads fall through to the default coefficient
        pl.col("workload")
        .replace_strict(
            _by_value(WORKLOAD_COEFFICIENTS),
            default=DEFAULT_COEFFICIENT,
            return_dtype=pl.Float64,
        )
        .alias("workload_coefficient"),
    ])


def _calculate_subtotal(df: pl.DataFrame) -> pl.DataFrame:
    """Calculate cost_subtotal as sum of the three price components."""
    return df.with_columns(
        pl.sum_horizontal("cost_distance", "cost_size", "cost_fragility").alias("cost_subtotal")
    )


def _apply_workload(df: pl.DataFrame) -> pl.DataFrame:
    """Multiply subtotal by the workload coefficient."""
    return df.with_columns(
        (pl.col("cost_subtotal") * pl.col("workload_coefficient")).alias("cost_adjusted")
    )


def _apply_min_price(df: pl.DataFrame) -> pl.DataFrame:
    """Raise anything below the floor to MIN_DELIVERY_PRICE."""
    return df.with_columns([
        (pl.col("cost_adjusted") < MIN_DELIVERY_PRICE).alias("uses_min_price"),
        pl.max_horizontal("cost_adjusted", pl.lit(MIN_DELIVERY_PRICE)).alias("cost_total"),
    ])


def _clear_forbidden(df: pl.DataFrame) -> pl.DataFrame:
    """Null out every cost column for forbidden shipments."""
    return df.with_columns([
        pl.when(pl.col("delivery_forbidden"))
        .then(None)
        .otherwise(pl.col(c))
        .alias(c)
        for c in COST_COLUMNS
    ])


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "compute_cost",
    "calculate_delivery_cost",
    "price_for_distance",
    "price_for_size",
    "price_for_fragility",
    "coefficient_for_workload",
    "calculate_costs",
]
