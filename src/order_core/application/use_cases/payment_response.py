from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.dtos import PaymentStatus
from order_core.application.results import OrderFailure, OrderSuccess
from order_core.domain.exceptions import DomainException, OrderNotFoundError
from order_core.logging import get_logger

if TYPE_CHECKING:
    from order_core.application.dtos import PaymentResponse
    from order_core.application.ports import LockProvider, OrderRepository
    from order_core.application.results import OrderResult
    from order_core.domain.entities import Order

logger = get_logger(__name__)


class PaymentResponseUseCase:
    """Applies a payment outcome to its order.

    Responsibilities:
    - Acquire the per-order lock
    - Load the order by id
    - COMPLETED → pay(); CANCELLED or FAILED → cancel(failure_messages)
    - Save the transitioned order
    """

    def __init__(self, lock_provider: LockProvider, order_repository: OrderRepository) -> None:
        self._lock_provider = lock_provider
        self._order_repo = order_repository

    def execute(self, response: PaymentResponse) -> OrderResult:
        with self._lock_provider.acquire(str(response.order_id)):
            return self._execute_within_lock(response)

    def _execute_within_lock(self, response: PaymentResponse) -> OrderResult:
        order = self._order_repo.find_by_id(response.order_id)
        if order is None:
            logger.warning("Payment response for unknown order %s", response.order_id)
            return OrderFailure(error=OrderNotFoundError(f"Order not found: {response.order_id}"))

        try:
            updated = self._transition(order, response)
        except DomainException as e:
            logger.warning(
                "Payment %s rejected for order %s in status %s: %s",
                response.payment_status.value,
                order.id,
                order.status.value if order.status else None,
                e,
            )
            return OrderFailure(error=e)

        saved = self._order_repo.save(updated)
        logger.info("Order %s is now %s", saved.id, saved.status.value)
        return OrderSuccess(order=saved)

    @staticmethod
    def _transition(order: Order, response: PaymentResponse) -> Order:
        if response.payment_status == PaymentStatus.COMPLETED:
            return order.pay()
        return order.cancel(response.failure_messages)
