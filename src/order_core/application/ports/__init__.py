"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from order_core.application.ports.id_generator import IdGenerator
from order_core.application.ports.lock_provider import LockProvider
from order_core.application.ports.order_repository import OrderRepository

__all__ = [
    "IdGenerator",
    "LockProvider",
    "OrderRepository",
]
