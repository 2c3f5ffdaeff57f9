"""Data Transfer Objects for outcome messages consumed by use cases.

These carry already-parsed data; transport and schema are handled before
they reach the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from order_core.domain.value_objects import CustomerId, Money, OrderId, RestaurantId


class PaymentStatus(Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class OrderApprovalStatus(Enum):
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class PaymentResponse:
    """Outcome of a payment attempt for an order."""

    order_id: OrderId
    payment_id: str
    customer_id: CustomerId
    price: Money
    created_at: datetime
    payment_status: PaymentStatus
    failure_messages: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class RestaurantApprovalResponse:
    """Outcome of the restaurant's approval of an order."""

    order_id: OrderId
    restaurant_id: RestaurantId
    created_at: datetime
    order_approval_status: OrderApprovalStatus
    failure_messages: tuple[str, ...] = field(default_factory=tuple)
