from __future__ import annotations

from typing import TYPE_CHECKING

from order_core.application.results import OrderFailure, OrderSuccess
from order_core.domain.exceptions import OrderNotFoundError

if TYPE_CHECKING:
    from order_core.application.ports import OrderRepository
    from order_core.application.results import OrderResult
    from order_core.domain.value_objects import TrackingId


class TrackOrderUseCase:
    """Looks up an order by its customer-facing tracking id."""

    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repo = order_repository

    def execute(self, tracking_id: TrackingId) -> OrderResult:
        order = self._order_repo.find_by_tracking_id(tracking_id)
        if order is None:
            return OrderFailure(
                error=OrderNotFoundError(f"Could not find order with tracking id: {tracking_id}")
            )
        return OrderSuccess(order=order)
