from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from order_core.domain.value_objects import Money, ProductId


@dataclass(frozen=True, slots=True)
class Product:
    """Restaurant product referenced by an order item.

    price is the catalogue price an item's unit price is checked against.
    It is None when the product has not been priced yet.
    """

    id: ProductId
    name: str | None = None
    price: Money | None = None
