"""Domain exceptions for order-core.

Exception hierarchy:
    DomainException (base)
    ├── Order Rule Violations
    │   └── OrderDomainException
    │       ├── InvalidOrderStateError
    │       └── InvalidOrderPriceError
    ├── Not Found Errors
    │   └── OrderNotFoundError
    └── Validation Errors
        ├── InvalidMoneyAmountError
        └── InvalidIdentifierError

A violation means the requested transition is illegitimate, not a transient
fault. Retrying the same call against the same state fails identically.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Order Rule Violations
# =============================================================================


class OrderDomainException(DomainException):
    """Raised when an operation would break an Order or OrderItem rule.

    The message identifies the failed rule and the offending values.
    """


class InvalidOrderStateError(OrderDomainException):
    """Raised when an operation is attempted in the wrong order status.

    Valid transitions:
        - (uninitialized) → pending   (initialize_order)
        - pending → paid              (pay)
        - paid → approved             (approve)
        - paid → cancelling           (init_cancel)
        - pending → cancelled         (cancel)
        - cancelling → cancelled      (cancel)

    approved and cancelled are terminal.
    """


class InvalidOrderPriceError(OrderDomainException):
    """Raised when the order total or an item price is inconsistent.

    Examples:
        - total price missing or not greater than zero
        - item price differs from the product price
        - price * quantity differs from the item subtotal
        - sum of item subtotals differs from the order total
    """


# =============================================================================
# Not Found Errors
# =============================================================================


class OrderNotFoundError(DomainException):
    """Raised when an order cannot be found by id or tracking id."""


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidMoneyAmountError(DomainException):
    """Raised when a Money amount or operand cannot be represented exactly.

    Floats and non-finite decimals are rejected; multiplication accepts
    integer quantities only.
    """


class InvalidIdentifierError(DomainException):
    """Raised when an identifier value fails validation."""
