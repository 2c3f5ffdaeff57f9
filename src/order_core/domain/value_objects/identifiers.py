from __future__ import annotations

from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4

from order_core.domain.exceptions import InvalidIdentifierError


@dataclass(frozen=True, slots=True)
class Identifier:
    """Base value object for UUID identifiers.

    Identifiers compare by wrapped value and by type, so an OrderId never
    equals a TrackingId holding the same UUID.
    """

    value: UUID

    @classmethod
    def generate(cls) -> Self:
        """Generate a new unique identifier."""
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> Self:
        """Parse an identifier from a string representation.

        Args:
            id_str: UUID string (with or without hyphens, any case).

        Raises:
            InvalidIdentifierError: If the string is not a valid UUID.
        """
        try:
            return cls(value=UUID(id_str))
        except (ValueError, AttributeError, TypeError) as e:
            raise InvalidIdentifierError(f"Invalid {cls.__name__}: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class OrderId(Identifier):
    """Internal aggregate identifier of an Order."""


@dataclass(frozen=True, slots=True)
class TrackingId(Identifier):
    """Customer-facing order identifier, stable for the order's lifetime."""


@dataclass(frozen=True, slots=True)
class CustomerId(Identifier):
    pass


@dataclass(frozen=True, slots=True)
class RestaurantId(Identifier):
    pass


@dataclass(frozen=True, slots=True)
class ProductId(Identifier):
    pass


@dataclass(frozen=True, slots=True)
class OrderItemId:
    """Sequential item number within a single order, starting at 1."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 1:
            raise InvalidIdentifierError(
                f"OrderItemId must be a positive integer, got {self.value!r}"
            )

    def __str__(self) -> str:
        return str(self.value)
