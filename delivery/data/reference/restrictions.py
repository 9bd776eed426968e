"""
Delivery Restrictions

Attribute combinations the delivery service refuses to carry. Checked before
any price is looked up.
"""

from types import MappingProxyType

from delivery.enums import CargoFragility, Distance


FRAGILE_OVER_30_KM_REASON = "Fragile cargo cannot be shipped beyond 30 km."

# (distance, fragility) -> reason shown to the customer
FORBIDDEN_COMBINATIONS = MappingProxyType({
    (Distance.OVER_30_KM, CargoFragility.FRAGILE): FRAGILE_OVER_30_KM_REASON,
})


__all__ = [
    "FRAGILE_OVER_30_KM_REASON",
    "FORBIDDEN_COMBINATIONS",
]
