"""Use cases - one entry point per request or outcome message."""

from order_core.application.use_cases.create_order import CreateOrderRequest, CreateOrderUseCase
from order_core.application.use_cases.payment_response import PaymentResponseUseCase
from order_core.application.use_cases.restaurant_approval_response import (
    RestaurantApprovalResponseUseCase,
)
from order_core.application.use_cases.track_order import TrackOrderUseCase

__all__ = [
    "CreateOrderRequest",
    "CreateOrderUseCase",
    "PaymentResponseUseCase",
    "RestaurantApprovalResponseUseCase",
    "TrackOrderUseCase",
]
