"""Domain entities - Objects with identity and lifecycle."""

from order_core.domain.entities.order import Order, OrderStatus
from order_core.domain.entities.order_item import OrderItem
from order_core.domain.entities.product import Product

__all__ = [
    "Order",
    "OrderItem",
    "OrderStatus",
    "Product",
]
