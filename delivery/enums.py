"""
Shipment Attributes

Closed sets of values describing a shipment. Every price and coefficient
table in data/reference is keyed by these members.

Members are str-valued, so Distance.LESS_2_KM == "less_2km" and a DataFrame
column of plain strings can be priced without conversion.
"""

from enum import Enum


class Distance(str, Enum):
    """Banded distance to the destination."""
    OVER_30_KM = "over_30km"
    LESS_30_KM = "less_30km"
    LESS_10_KM = "less_10km"
    LESS_2_KM = "less_2km"


class CargoSize(str, Enum):
    LARGE = "large"
    SMALL = "small"


class CargoFragility(str, Enum):
    FRAGILE = "fragile"
    NOT_FRAGILE = "not_fragile"


class DeliveryServiceWorkload(str, Enum):
    """How busy the delivery service currently is."""
    VERY_HIGH = "very_high"
    HIGH = "high"
    INCREASED = "increased"
    REGULAR = "regular"
    LOW = "low"


__all__ = [
    "Distance",
    "CargoSize",
    "CargoFragility",
    "DeliveryServiceWorkload",
]
