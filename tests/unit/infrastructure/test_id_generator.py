"""Tests for IdGenerator implementations."""

from uuid import UUID

from order_core.application.ports import IdGenerator
from order_core.domain.value_objects import OrderId, TrackingId
from order_core.infrastructure.id_generator import SequentialIdGenerator, UuidIdGenerator


class TestUuidIdGenerator:
    def test_implements_id_generator_interface(self) -> None:
        assert isinstance(UuidIdGenerator(), IdGenerator)

    def test_generates_typed_ids(self) -> None:
        generator = UuidIdGenerator()

        assert isinstance(generator.new_order_id(), OrderId)
        assert isinstance(generator.new_tracking_id(), TrackingId)

    def test_ids_are_unique(self) -> None:
        generator = UuidIdGenerator()

        order_ids = {generator.new_order_id() for _ in range(100)}

        assert len(order_ids) == 100


class TestSequentialIdGenerator:
    def test_order_ids_count_from_one(self) -> None:
        generator = SequentialIdGenerator()

        assert generator.new_order_id() == OrderId(UUID(int=1))
        assert generator.new_order_id() == OrderId(UUID(int=2))

    def test_tracking_ids_do_not_collide_with_order_ids(self) -> None:
        generator = SequentialIdGenerator()

        order_values = {generator.new_order_id().value for _ in range(10)}
        tracking_values = {generator.new_tracking_id().value for _ in range(10)}

        assert order_values.isdisjoint(tracking_values)

    def test_separate_generators_are_independent(self) -> None:
        assert SequentialIdGenerator().new_order_id() == SequentialIdGenerator().new_order_id()
