"""
Delivery Prices

Additive price components, one per shipment attribute, and the floor applied
after the workload coefficient.
"""

from types import MappingProxyType

from delivery.enums import CargoFragility, CargoSize, Distance


MIN_DELIVERY_PRICE = 400.00   # Floor, applied last

# =============================================================================
# DISTANCE
# =============================================================================

OVER_30_KM_PRICE = 300.00
LESS_30_KM_PRICE = 200.00
LESS_10_KM_PRICE = 100.00
LESS_2_KM_PRICE = 50.00

DISTANCE_PRICES = MappingProxyType({
    Distance.OVER_30_KM: OVER_30_KM_PRICE,
    Distance.LESS_30_KM: LESS_30_KM_PRICE,
    Distance.LESS_10_KM: LESS_10_KM_PRICE,
    Distance.LESS_2_KM: LESS_2_KM_PRICE,
})

# =============================================================================
# CARGO SIZE
# =============================================================================

LARGE_CARGO_PRICE = 200.00
SMALL_CARGO_PRICE = 100.00

CARGO_SIZE_PRICES = MappingProxyType({
    CargoSize.LARGE: LARGE_CARGO_PRICE,
    CargoSize.SMALL: SMALL_CARGO_PRICE,
})

# =============================================================================
# FRAGILITY
# =============================================================================

FRAGILE_PRICE = 300.00
NOT_FRAGILE_PRICE = 0.00

CARGO_FRAGILITY_PRICES = MappingProxyType({
    CargoFragility.FRAGILE: FRAGILE_PRICE,
    CargoFragility.NOT_FRAGILE: NOT_FRAGILE_PRICE,
})


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
]
