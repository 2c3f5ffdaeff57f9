from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.domain.entities import Order
    from order_core.domain.value_objects import OrderId, TrackingId


class OrderRepository(ABC):
    """Port for order persistence.

    Contract:
    - find_*() return None if the order does not exist (no exception)
    - save() performs upsert keyed by order id and returns the stored order
    - Only initialized orders (id set) can be saved
    - Implementations are NOT thread-safe; callers must ensure serialization

    Thread safety note:
    Repositories assume the caller has acquired the per-order lock via
    LockProvider before a load-mutate-save sequence.
    """

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist an order (upsert semantics).

        Args:
            order: The initialized order to save.

        Returns:
            The order as stored.

        Raises:
            ValueError: If the order has no id yet.
        """

    @abstractmethod
    def find_by_tracking_id(self, tracking_id: TrackingId) -> Order | None:
        """Retrieve an order by its customer-facing tracking id."""

    @abstractmethod
    def find_by_id(self, order_id: OrderId) -> Order | None:
        """Retrieve an order by its internal id."""
