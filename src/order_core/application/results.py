"""Result union returned by use cases.

Use cases catch domain violations and hand them back as values, so
callers branch with pattern matching instead of try/except:

    match use_case.execute(request):
        case OrderSuccess(order=order):
            ...
        case OrderFailure(error=error):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from order_core.domain.entities import Order
    from order_core.domain.exceptions import DomainException


@dataclass(frozen=True, slots=True)
class OrderSuccess:
    """The operation completed; order is the aggregate after it."""

    order: Order


@dataclass(frozen=True, slots=True)
class OrderFailure:
    """The operation was rejected by a domain rule; nothing was saved."""

    error: DomainException

    @property
    def message(self) -> str:
        return str(self.error)


OrderResult: TypeAlias = "OrderSuccess | OrderFailure"
