from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from order_core.domain.exceptions import InvalidMoneyAmountError


@dataclass(frozen=True, slots=True)
class Money:
    """Immutable monetary amount backed by an exact Decimal.

    Arithmetic never rounds, so folding subtotals from Money.ZERO gives the
    same result in any order. Equality compares decimal values, which means
    Money("10.00") == Money("10").

    Floats are rejected: Decimal(0.1) is not 0.1.
    """

    ZERO: ClassVar[Money]

    amount: Decimal

    def __post_init__(self) -> None:
        amount = self.amount

        if isinstance(amount, bool) or isinstance(amount, float):
            raise InvalidMoneyAmountError(
                f"Money amount must be Decimal, int or str, got {type(amount).__name__}"
            )

        if not isinstance(amount, Decimal):
            try:
                amount = Decimal(amount)
            except (InvalidOperation, TypeError, ValueError) as e:
                raise InvalidMoneyAmountError(f"Invalid money amount: {self.amount!r}") from e
            object.__setattr__(self, "amount", amount)

        if not amount.is_finite():
            raise InvalidMoneyAmountError(f"Money amount must be finite, got {amount}")

    def add(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def subtract(self, other: Money) -> Money:
        return Money(self.amount - other.amount)

    def multiply(self, quantity: int) -> Money:
        """Multiply by an integer quantity.

        Raises:
            InvalidMoneyAmountError: If quantity is not an int (bool included).
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise InvalidMoneyAmountError(
                f"Money can only be multiplied by an integer, got {quantity!r}"
            )
        return Money(self.amount * quantity)

    def is_greater_than_zero(self) -> bool:
        return self.amount > 0

    def is_greater_than(self, other: Money) -> bool:
        return self.amount > other.amount

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __str__(self) -> str:
        return str(self.amount)


Money.ZERO = Money(Decimal("0"))
