"""Value objects - Immutable objects defined by their attributes."""

from order_core.domain.value_objects.identifiers import (
    CustomerId,
    Identifier,
    OrderId,
    OrderItemId,
    ProductId,
    RestaurantId,
    TrackingId,
)
from order_core.domain.value_objects.money import Money
from order_core.domain.value_objects.street_address import StreetAddress

__all__ = [
    "CustomerId",
    "Identifier",
    "Money",
    "OrderId",
    "OrderItemId",
    "ProductId",
    "RestaurantId",
    "StreetAddress",
    "TrackingId",
]
