"""
Delivery Cost Module

Expected delivery cost calculator: distance, cargo size and fragility prices,
surged by the delivery service workload and floored at a minimum price.
"""

from .calculate_costs import (
    compute_cost,
    calculate_delivery_cost,
    price_for_distance,
    price_for_size,
    price_for_fragility,
    coefficient_for_workload,
    calculate_costs,
)
from .enums import Distance, CargoSize, CargoFragility, DeliveryServiceWorkload
from .exceptions import DeliveryForbidden
from .version import VERSION

__all__ = [
    "compute_cost",
    "calculate_delivery_cost",
    "price_for_distance",
    "price_for_size",
    "price_for_fragility",
    "coefficient_for_workload",
    "calculate_costs",
    "Distance",
    "CargoSize",
    "CargoFragility",
    "DeliveryServiceWorkload",
    "DeliveryForbidden",
    "VERSION",
]
