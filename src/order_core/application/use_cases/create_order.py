from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from order_core.application.results import OrderFailure, OrderSuccess
from order_core.domain.entities import Order
from order_core.domain.exceptions import DomainException
from order_core.logging import get_logger

if TYPE_CHECKING:
    from order_core.application.ports import IdGenerator, LockProvider, OrderRepository
    from order_core.application.results import OrderResult
    from order_core.domain.entities import OrderItem
    from order_core.domain.value_objects import CustomerId, Money, RestaurantId, StreetAddress

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CreateOrderRequest:
    """Input DTO for create order use case."""

    customer_id: CustomerId
    restaurant_id: RestaurantId
    delivery_address: StreetAddress
    price: Money
    items: tuple[OrderItem, ...]


class CreateOrderUseCase:
    """Creates, validates, initializes and stores a new order.

    Validation runs on the uninitialized order, then identifiers are
    generated and assigned. Nothing is saved when a rule is violated.
    """

    def __init__(
        self,
        id_generator: IdGenerator,
        lock_provider: LockProvider,
        order_repository: OrderRepository,
    ) -> None:
        self._id_generator = id_generator
        self._lock_provider = lock_provider
        self._order_repo = order_repository

    def execute(self, request: CreateOrderRequest) -> OrderResult:
        """Execute the create order workflow.

        Returns:
            OrderSuccess with the stored PENDING order, or OrderFailure with
            the violated rule.
        """
        order = Order.create(
            restaurant_id=request.restaurant_id,
            customer_id=request.customer_id,
            delivery_address=request.delivery_address,
            price=request.price,
            items=request.items,
        )

        try:
            order.validate_order()
            order = order.initialize_order(
                self._id_generator.new_order_id(),
                self._id_generator.new_tracking_id(),
            )
        except DomainException as e:
            logger.warning(
                "Rejected order for customer %s: %s", request.customer_id, e
            )
            return OrderFailure(error=e)

        with self._lock_provider.acquire(str(order.id)):
            saved = self._order_repo.save(order)

        logger.info("Order %s created with tracking id %s", saved.id, saved.tracking_id)
        return OrderSuccess(order=saved)
