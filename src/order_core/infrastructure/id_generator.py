from __future__ import annotations

from uuid import UUID

from order_core.application.ports import IdGenerator
from order_core.domain.value_objects import OrderId, TrackingId


class UuidIdGenerator(IdGenerator):
    """Production id generator using random UUIDs (v4)."""

    def new_order_id(self) -> OrderId:
        return OrderId.generate()

    def new_tracking_id(self) -> TrackingId:
        return TrackingId.generate()


class SequentialIdGenerator(IdGenerator):
    """Deterministic id generator for tests.

    Order ids are UUID(int=1), UUID(int=2), ...; tracking ids use a separate
    counter offset by 2**64 so the two never collide.

    Note: This implementation is NOT thread-safe.
    """

    _TRACKING_OFFSET = 2**64

    def __init__(self) -> None:
        self._order_counter = 0
        self._tracking_counter = 0

    def new_order_id(self) -> OrderId:
        self._order_counter += 1
        return OrderId(value=UUID(int=self._order_counter))

    def new_tracking_id(self) -> TrackingId:
        self._tracking_counter += 1
        return TrackingId(value=UUID(int=self._TRACKING_OFFSET + self._tracking_counter))
