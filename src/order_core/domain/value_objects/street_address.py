from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class StreetAddress:
    """Delivery address of an order."""

    id: UUID
    street: str
    postal_code: str
    city: str
