from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from order_core.domain.exceptions import OrderDomainException

if TYPE_CHECKING:
    from order_core.domain.entities.product import Product
    from order_core.domain.value_objects import Money, OrderId, OrderItemId


@dataclass(frozen=True, slots=True)
class OrderItem:
    """Line item owned by exactly one Order.

    Items are created detached (no id, no owning order) with create() and
    are bound once, by the parent order's initialize_order(). Price rules
    are checked by is_price_valid(), not enforced at construction.
    """

    id: OrderItemId | None
    order_id: OrderId | None
    product: Product
    quantity: int
    price: Money
    sub_total: Money

    @classmethod
    def create(
        cls,
        product: Product,
        quantity: int,
        price: Money,
        sub_total: Money,
    ) -> OrderItem:
        """Factory method to create a detached item.

        Args:
            product: The ordered product.
            quantity: Number of units ordered.
            price: Unit price charged.
            sub_total: Line total (expected to equal price * quantity).

        Returns:
            A new OrderItem with no id and no owning order.
        """
        return cls(
            id=None,
            order_id=None,
            product=product,
            quantity=quantity,
            price=price,
            sub_total=sub_total,
        )

    @property
    def is_initialized(self) -> bool:
        return self.id is not None

    def is_price_valid(self) -> bool:
        """Check price > 0, price == product price and price * quantity == sub_total."""
        return (
            self.price.is_greater_than_zero()
            and self.price == self.product.price
            and self.price.multiply(self.quantity) == self.sub_total
        )

    def initialize_order_item(self, order_id: OrderId, item_id: OrderItemId) -> OrderItem:
        """Bind the item to its order and assign its sequential id.

        Returns:
            New OrderItem instance carrying order_id and id.

        Raises:
            OrderDomainException: If the item is already bound.
        """
        if self.id is not None or self.order_id is not None:
            raise OrderDomainException(
                f"Order item {self.id} is already initialized for order {self.order_id}!"
            )

        return replace(self, id=item_id, order_id=order_id)
