"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory order repository
- Identifier generation: UUID and deterministic sequential generators
- Locking: Per-order lock providers

Infrastructure adapters implement the ports defined in the application layer.
"""

from order_core.infrastructure.id_generator import SequentialIdGenerator, UuidIdGenerator
from order_core.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from order_core.infrastructure.order_repository import InMemoryOrderRepository

__all__ = [
    "InMemoryLockProvider",
    "InMemoryOrderRepository",
    "NoOpLockProvider",
    "SequentialIdGenerator",
    "UuidIdGenerator",
]
