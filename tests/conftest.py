"""Shared pytest fixtures for the test suite."""

from decimal import Decimal
from uuid import uuid4

import pytest

from order_core.domain.entities import Order, OrderItem, Product
from order_core.domain.value_objects import (
    CustomerId,
    Money,
    ProductId,
    RestaurantId,
    StreetAddress,
)
from order_core.infrastructure.id_generator import SequentialIdGenerator
from order_core.infrastructure.lock_provider import InMemoryLockProvider
from order_core.infrastructure.order_repository import InMemoryOrderRepository


@pytest.fixture
def ten() -> Money:
    return Money(Decimal("10.00"))


@pytest.fixture
def product(ten: Money) -> Product:
    """A product priced at 10.00."""
    return Product(id=ProductId.generate(), name="Margherita", price=ten)


@pytest.fixture
def items(product: Product, ten: Money) -> tuple[OrderItem, ...]:
    """10.00 x 1 and 10.00 x 2, subtotals 10.00 and 20.00."""
    return (
        OrderItem.create(product=product, quantity=1, price=ten, sub_total=Money("10.00")),
        OrderItem.create(product=product, quantity=2, price=ten, sub_total=Money("20.00")),
    )


@pytest.fixture
def customer_id() -> CustomerId:
    return CustomerId.generate()


@pytest.fixture
def restaurant_id() -> RestaurantId:
    return RestaurantId.generate()


@pytest.fixture
def delivery_address() -> StreetAddress:
    return StreetAddress(id=uuid4(), street="street_1", postal_code="1000AB", city="Paris")


@pytest.fixture
def new_order(
    customer_id: CustomerId,
    restaurant_id: RestaurantId,
    delivery_address: StreetAddress,
    items: tuple[OrderItem, ...],
) -> Order:
    """An uninitialized order with total 30.00 matching its items."""
    return Order.create(
        restaurant_id=restaurant_id,
        customer_id=customer_id,
        delivery_address=delivery_address,
        price=Money("30.00"),
        items=items,
    )


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    """Deterministic order and tracking ids."""
    return SequentialIdGenerator()


@pytest.fixture
def lock_provider() -> InMemoryLockProvider:
    """An in-memory lock provider for testing."""
    return InMemoryLockProvider()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()
