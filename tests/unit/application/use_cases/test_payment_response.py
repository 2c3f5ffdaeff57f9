"""Tests for PaymentResponseUseCase.

Tests cover:
- COMPLETED pays a pending order
- CANCELLED / FAILED cancel a pending or cancelling order with messages
- Out-of-order outcomes come back as OrderFailure and save nothing
- Unknown orders
- Duplicate concurrent outcomes are serialized by the per-order lock
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime

import pytest

from order_core.application.dtos import PaymentResponse, PaymentStatus
from order_core.application.results import OrderFailure, OrderSuccess
from order_core.application.use_cases.payment_response import PaymentResponseUseCase
from order_core.domain.entities import Order, OrderStatus
from order_core.domain.exceptions import InvalidOrderStateError, OrderNotFoundError
from order_core.domain.value_objects import Money, OrderId, TrackingId
from order_core.infrastructure.lock_provider import InMemoryLockProvider
from order_core.infrastructure.order_repository import InMemoryOrderRepository

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def use_case(
    lock_provider: InMemoryLockProvider,
    order_repository: InMemoryOrderRepository,
) -> PaymentResponseUseCase:
    return PaymentResponseUseCase(
        lock_provider=lock_provider,
        order_repository=order_repository,
    )


@pytest.fixture
def pending_order(new_order: Order, order_repository: InMemoryOrderRepository) -> Order:
    order = new_order.initialize_order(OrderId.generate(), TrackingId.generate())
    return order_repository.save(order)


def payment_response(
    order: Order,
    status: PaymentStatus,
    failure_messages: tuple[str, ...] = (),
) -> PaymentResponse:
    return PaymentResponse(
        order_id=order.id,
        payment_id="payment-1",
        customer_id=order.customer_id,
        price=order.price or Money.ZERO,
        created_at=datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC),
        payment_status=status,
        failure_messages=failure_messages,
    )


# =============================================================================
# Payment Completed Tests
# =============================================================================


class TestPaymentCompleted:
    def test_pays_pending_order(
        self,
        use_case: PaymentResponseUseCase,
        order_repository: InMemoryOrderRepository,
        pending_order: Order,
    ) -> None:
        result = use_case.execute(payment_response(pending_order, PaymentStatus.COMPLETED))

        assert isinstance(result, OrderSuccess)
        assert result.order.status == OrderStatus.PAID
        assert order_repository.find_by_id(pending_order.id).status == OrderStatus.PAID

    def test_second_completion_is_failure(
        self,
        use_case: PaymentResponseUseCase,
        pending_order: Order,
    ) -> None:
        use_case.execute(payment_response(pending_order, PaymentStatus.COMPLETED))

        result = use_case.execute(payment_response(pending_order, PaymentStatus.COMPLETED))

        assert isinstance(result, OrderFailure)
        assert isinstance(result.error, InvalidOrderStateError)
        assert result.message == "Order is not in correct state for pay operation!"

    def test_failure_leaves_stored_order_unchanged(
        self,
        use_case: PaymentResponseUseCase,
        order_repository: InMemoryOrderRepository,
        pending_order: Order,
    ) -> None:
        approved = order_repository.save(pending_order.pay().approve())

        use_case.execute(payment_response(pending_order, PaymentStatus.COMPLETED))

        assert order_repository.find_by_id(pending_order.id) == approved


# =============================================================================
# Payment Cancelled / Failed Tests
# =============================================================================


class TestPaymentCancelled:
    @pytest.mark.parametrize("status", [PaymentStatus.CANCELLED, PaymentStatus.FAILED])
    def test_cancels_pending_order(
        self,
        use_case: PaymentResponseUseCase,
        pending_order: Order,
        status: PaymentStatus,
    ) -> None:
        result = use_case.execute(payment_response(pending_order, status, ("payment failed",)))

        assert isinstance(result, OrderSuccess)
        assert result.order.status == OrderStatus.CANCELLED
        assert result.order.failure_messages == ("payment failed",)

    def test_completes_cancellation_of_cancelling_order(
        self,
        use_case: PaymentResponseUseCase,
        order_repository: InMemoryOrderRepository,
        pending_order: Order,
    ) -> None:
        order_repository.save(pending_order.pay().init_cancel(["restaurant rejected"]))

        result = use_case.execute(
            payment_response(pending_order, PaymentStatus.CANCELLED, ("", "refunded"))
        )

        assert isinstance(result, OrderSuccess)
        assert result.order.status == OrderStatus.CANCELLED
        assert result.order.failure_messages == ("restaurant rejected", "refunded")

    def test_cancel_of_paid_order_is_failure(
        self,
        use_case: PaymentResponseUseCase,
        order_repository: InMemoryOrderRepository,
        pending_order: Order,
    ) -> None:
        order_repository.save(pending_order.pay())

        result = use_case.execute(payment_response(pending_order, PaymentStatus.FAILED))

        assert isinstance(result, OrderFailure)
        assert result.message == "Order is not in correct state for cancel operation!"


# =============================================================================
# Unknown Order Tests
# =============================================================================


class TestPaymentUnknownOrder:
    def test_unknown_order_is_failure(
        self,
        use_case: PaymentResponseUseCase,
        new_order: Order,
    ) -> None:
        order = new_order.initialize_order(OrderId.generate(), TrackingId.generate())

        result = use_case.execute(payment_response(order, PaymentStatus.COMPLETED))

        assert isinstance(result, OrderFailure)
        assert isinstance(result.error, OrderNotFoundError)


# =============================================================================
# Concurrency Tests
# =============================================================================


class TestPaymentConcurrency:
    def test_duplicate_completions_pay_once(
        self,
        use_case: PaymentResponseUseCase,
        pending_order: Order,
    ) -> None:
        response = payment_response(pending_order, PaymentStatus.COMPLETED)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: use_case.execute(response), range(8)))

        successes = [r for r in results if isinstance(r, OrderSuccess)]
        failures = [r for r in results if isinstance(r, OrderFailure)]
        assert len(successes) == 1
        assert len(failures) == 7
