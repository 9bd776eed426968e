"""
Workload Coefficients

Surge multipliers applied to the summed price while the delivery service is
busy. REGULAR and LOW are listed so the table covers every workload, but any
value missing from the table also resolves to DEFAULT_COEFFICIENT.
"""

from types import MappingProxyType

from delivery.enums import DeliveryServiceWorkload


VERY_HIGH_WORKLOAD_COEFFICIENT = 1.6
HIGH_WORKLOAD_COEFFICIENT = 1.4
INCREASED_WORKLOAD_COEFFICIENT = 1.2
DEFAULT_COEFFICIENT = 1.0     # No surge

WORKLOAD_COEFFICIENTS = MappingProxyType({
    DeliveryServiceWorkload.VERY_HIGH: VERY_HIGH_WORKLOAD_COEFFICIENT,
    DeliveryServiceWorkload.HIGH: HIGH_WORKLOAD_COEFFICIENT,
    DeliveryServiceWorkload.INCREASED: INCREASED_WORKLOAD_COEFFICIENT,
    DeliveryServiceWorkload.REGULAR: DEFAULT_COEFFICIENT,
    DeliveryServiceWorkload.LOW: DEFAULT_COEFFICIENT,
})


__all__ = [
    "VERY_HIGH_WORKLOAD_COEFFICIENT",
    "HIGH_WORKLOAD_COEFFICIENT",
    "INCREASED_WORKLOAD_COEFFICIENT",
    "DEFAULT_COEFFICIENT",
    "WORKLOAD_COEFFICIENTS",
]
