from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.domain.value_objects import OrderId, TrackingId


class IdGenerator(ABC):
    """Port for order identifier generation.

    Contract:
    - Every call returns an identifier never returned before
    - new_order_id() and new_tracking_id() are independent sequences

    Keeping generation out of the aggregate makes initialize_order()
    deterministic under test.
    """

    @abstractmethod
    def new_order_id(self) -> OrderId:
        """Return a fresh, previously unassigned order id."""
        ...

    @abstractmethod
    def new_tracking_id(self) -> TrackingId:
        """Return a fresh, previously unassigned tracking id."""
        ...
