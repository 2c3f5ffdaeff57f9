from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for per-order locking.

    Contract:
    - acquire() MUST serialize access to the same resource_id
    - acquire() MUST release the lock when the context exits (normal or exception)
    - acquire() MUST be blocking (waits until lock is available)
    - Different resource_ids MAY be acquired concurrently

    This is how at-most-one mutating operation per aggregate is enforced;
    the Order itself does no locking.
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Acquire a lock for the given resource ID.

        Args:
            resource_id: Canonical string identifier for the resource.
                         Must be stable and deterministic (e.g., str(order_id)).

        Yields:
            None. The lock is held for the duration of the context.

        Usage:
            with lock_provider.acquire(str(order_id)):
                # Critical section - load, transition, save
                ...
        """
        ...
