"""Order aggregate root with lifecycle state machine behavior.

The Order owns its items exclusively and is the only way to change them.
Every operation checks its preconditions before building the new state, so
a failed call leaves the aggregate exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING

from order_core.domain.exceptions import InvalidOrderPriceError, InvalidOrderStateError
from order_core.domain.value_objects import Money, OrderItemId

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from order_core.domain.entities.order_item import OrderItem
    from order_core.domain.value_objects import (
        CustomerId,
        OrderId,
        RestaurantId,
        StreetAddress,
        TrackingId,
    )


class OrderStatus(Enum):
    """Order lifecycle states. An uninitialized order has no status (None)."""

    PENDING = "pending"
    PAID = "paid"
    APPROVED = "approved"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.APPROVED, OrderStatus.CANCELLED)


@dataclass(frozen=True, slots=True)
class Order:
    """Order aggregate root.

    Order is immutable (frozen dataclass). All state-changing methods
    return a new Order instance.

    State machine:
        - (None) → pending          (initialize_order)
        - pending → paid            (pay)
        - paid → approved           (approve)
        - paid → cancelling         (init_cancel)
        - pending → cancelled       (cancel)
        - cancelling → cancelled    (cancel)
        - approved, cancelled are terminal

    Use create() to build a new, uninitialized order. The constructor is
    meant for rebuilding persisted aggregates and checks that id, tracking
    id, status and item binding are consistent.
    """

    id: OrderId | None
    restaurant_id: RestaurantId
    customer_id: CustomerId
    delivery_address: StreetAddress
    price: Money | None
    items: tuple[OrderItem, ...]
    tracking_id: TrackingId | None
    status: OrderStatus | None
    failure_messages: tuple[str, ...] | None

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        if self.failure_messages is not None and not isinstance(self.failure_messages, tuple):
            object.__setattr__(self, "failure_messages", tuple(self.failure_messages))

        if (self.id is None) != (self.tracking_id is None):
            raise InvalidOrderStateError("Order id and tracking id must be set together!")

        if (self.id is None) != (self.status is None):
            raise InvalidOrderStateError(
                f"Order status {self.status} is inconsistent with order id {self.id}!"
            )

        if self.id is not None:
            for item in self.items:
                if item.order_id != self.id:
                    raise InvalidOrderStateError(
                        f"Order item {item.id} belongs to order {item.order_id}, not {self.id}!"
                    )

    @classmethod
    def create(
        cls,
        restaurant_id: RestaurantId,
        customer_id: CustomerId,
        delivery_address: StreetAddress,
        price: Money | None,
        items: Iterable[OrderItem],
    ) -> Order:
        """Factory method for a new order, before initialization.

        Returns:
            An Order with no id, no tracking id, no status and no
            failure messages.
        """
        return cls(
            id=None,
            restaurant_id=restaurant_id,
            customer_id=customer_id,
            delivery_address=delivery_address,
            price=price,
            items=tuple(items),
            tracking_id=None,
            status=None,
            failure_messages=None,
        )

    @property
    def is_initialized(self) -> bool:
        return self.id is not None

    # -------------------------------------------------------------------------
    # Lifecycle operations
    # -------------------------------------------------------------------------

    def initialize_order(self, order_id: OrderId, tracking_id: TrackingId) -> Order:
        """Assign identifiers, number the items and move to PENDING.

        Identifiers are supplied by the caller so initialization stays
        deterministic.

        Args:
            order_id: Previously unassigned order identifier.
            tracking_id: Previously unassigned tracking identifier.

        Returns:
            New Order instance in PENDING state, items numbered 1..N.

        Raises:
            InvalidOrderStateError: If the order is already initialized.
            OrderDomainException: If an item is already bound to an order.
        """
        self._validate_initial_order()

        items = tuple(
            item.initialize_order_item(order_id, OrderItemId(number))
            for number, item in enumerate(self.items, start=1)
        )

        return replace(
            self,
            id=order_id,
            tracking_id=tracking_id,
            status=OrderStatus.PENDING,
            items=items,
        )

    def validate_order(self) -> Order:
        """Validate a not yet initialized order.

        Checks, in order: initial state, total price, item prices and the
        sum of item subtotals against the total.

        Returns:
            This Order, unchanged.

        Raises:
            InvalidOrderStateError: If the order is already initialized.
            InvalidOrderPriceError: If a price rule is violated.
        """
        self._validate_initial_order()
        self._validate_total_price()
        self._validate_items_price()
        return self

    def pay(self) -> Order:
        """Raises InvalidOrderStateError unless PENDING."""
        if self.status != OrderStatus.PENDING:
            raise InvalidOrderStateError("Order is not in correct state for pay operation!")

        return replace(self, status=OrderStatus.PAID)

    def approve(self) -> Order:
        """Raises InvalidOrderStateError unless PAID."""
        if self.status != OrderStatus.PAID:
            raise InvalidOrderStateError("Order is not in correct state for approve operation!")

        return replace(self, status=OrderStatus.APPROVED)

    def init_cancel(self, failure_messages: Sequence[str] | None) -> Order:
        """Start compensation for a paid order.

        Returns:
            New Order instance in CANCELLING state.

        Raises:
            InvalidOrderStateError: If not in PAID state.
        """
        if self.status != OrderStatus.PAID:
            raise InvalidOrderStateError(
                "Order is not in correct state for initCancel operation!"
            )

        return replace(
            self,
            status=OrderStatus.CANCELLING,
            failure_messages=self._merged_failure_messages(failure_messages),
        )

    def cancel(self, failure_messages: Sequence[str] | None) -> Order:
        """Cancel an unpaid order, or finish cancelling a paid one.

        Returns:
            New Order instance in CANCELLED state.

        Raises:
            InvalidOrderStateError: If not in PENDING or CANCELLING state.
        """
        if self.status not in (OrderStatus.PENDING, OrderStatus.CANCELLING):
            raise InvalidOrderStateError("Order is not in correct state for cancel operation!")

        return replace(
            self,
            status=OrderStatus.CANCELLED,
            failure_messages=self._merged_failure_messages(failure_messages),
        )

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _merged_failure_messages(
        self, failure_messages: Sequence[str] | None
    ) -> tuple[str, ...] | None:
        """Return the failure log after accepting failure_messages.

        Appending to an existing log drops empty messages. A first log is
        adopted as given, empty messages included.
        """
        if self.failure_messages is not None and failure_messages is not None:
            return self.failure_messages + tuple(
                message for message in failure_messages if message
            )
        if self.failure_messages is None:
            return tuple(failure_messages) if failure_messages is not None else None
        return self.failure_messages

    def _validate_initial_order(self) -> None:
        if self.status is not None or self.id is not None:
            raise InvalidOrderStateError("Order is not in correct state for initialization!")

    def _validate_total_price(self) -> None:
        if self.price is None or not self.price.is_greater_than_zero():
            raise InvalidOrderPriceError("Total price must be greater than zero!")

    def _validate_items_price(self) -> None:
        for item in self.items:
            self._validate_item_price(item)

        items_total = reduce(Money.add, (item.sub_total for item in self.items), Money.ZERO)

        if self.price != items_total:
            raise InvalidOrderPriceError(
                f"Total price: {self.price} is not equal to order items total: {items_total}!"
            )

    @staticmethod
    def _validate_item_price(item: OrderItem) -> None:
        if not item.is_price_valid():
            raise InvalidOrderPriceError(
                f"Order item price: {item.price} is not valid for product: {item.product.id}"
            )
