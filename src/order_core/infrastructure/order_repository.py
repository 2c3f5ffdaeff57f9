from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from order_core.application.ports import OrderRepository
from order_core.logging import get_logger

if TYPE_CHECKING:
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import OrderId, TrackingId

logger = get_logger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """In-memory order repository for tests and single-process use.

    Implementation notes:
    - Orders keyed by OrderId; a TrackingId index points at the OrderId
    - Returns deep copies from find_*() and save() to mimic database detachment
    - NOT thread-safe; relies on external LockProvider for serialization
    """

    def __init__(self) -> None:
        self._orders: dict[OrderId, Order] = {}
        self._tracking_index: dict[TrackingId, OrderId] = {}

    def save(self, order: Order) -> Order:
        if order.id is None or order.tracking_id is None:
            raise ValueError("Cannot save an order before it is initialized")

        self._orders[order.id] = copy.deepcopy(order)
        self._tracking_index[order.tracking_id] = order.id
        logger.debug("Saved order %s in status %s", order.id, order.status)
        return copy.deepcopy(order)

    def find_by_tracking_id(self, tracking_id: TrackingId) -> Order | None:
        order_id = self._tracking_index.get(tracking_id)
        if order_id is None:
            return None
        return self.find_by_id(order_id)

    def find_by_id(self, order_id: OrderId) -> Order | None:
        order = self._orders.get(order_id)
        if order is None:
            return None
        return copy.deepcopy(order)
