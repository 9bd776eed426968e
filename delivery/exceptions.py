"""Errors raised by the delivery cost calculator."""


class DeliveryForbidden(ValueError):
    """
    The shipment cannot be delivered with the requested parameters.

    Raised before any price is computed, so callers can reject the order
    and show `reason` to the customer.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(
            f"Delivery of this cargo with the given parameters is not possible! {reason}"
        )


__all__ = ["DeliveryForbidden"]
