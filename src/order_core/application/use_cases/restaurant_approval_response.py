from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.dtos import OrderApprovalStatus
from order_core.application.results import OrderFailure, OrderSuccess
from order_core.domain.exceptions import DomainException, OrderNotFoundError
from order_core.logging import get_logger

if TYPE_CHECKING:
    from order_core.application.dtos import RestaurantApprovalResponse
    from order_core.application.ports import LockProvider, OrderRepository
    from order_core.application.results import OrderResult
    from order_core.domain.entities import Order

logger = get_logger(__name__)


class RestaurantApprovalResponseUseCase:
    """Applies a restaurant approval outcome to its order.

    APPROVED → approve(); REJECTED → init_cancel(failure_messages), which
    leaves a paid order CANCELLING until the payment is compensated.
    """

    def __init__(self, lock_provider: LockProvider, order_repository: OrderRepository) -> None:
        self._lock_provider = lock_provider
        self._order_repo = order_repository

    def execute(self, response: RestaurantApprovalResponse) -> OrderResult:
        with self._lock_provider.acquire(str(response.order_id)):
            order = self._order_repo.find_by_id(response.order_id)
            if order is None:
                logger.warning("Approval response for unknown order %s", response.order_id)
                return OrderFailure(
                    error=OrderNotFoundError(f"Order not found: {response.order_id}")
                )

            try:
                updated = self._transition(order, response)
            except DomainException as e:
                logger.warning(
                    "Approval %s rejected for order %s: %s",
                    response.order_approval_status.value,
                    order.id,
                    e,
                )
                return OrderFailure(error=e)

            saved = self._order_repo.save(updated)

        logger.info("Order %s is now %s", saved.id, saved.status.value)
        return OrderSuccess(order=saved)

    @staticmethod
    def _transition(order: Order, response: RestaurantApprovalResponse) -> Order:
        if response.order_approval_status == OrderApprovalStatus.APPROVED:
            return order.approve()
        return order.init_cancel(response.failure_messages)
