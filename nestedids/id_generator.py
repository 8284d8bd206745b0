"""Counter-backed identifier source shared by nested records."""

from __future__ import annotations

import logging
from threading import Lock

logger = logging.getLogger(__name__)


class IdGenerator:
    """Monotonically increasing identifier source.

    ``allocate_next`` hands out the stored value before incrementing it, so a
    fresh generator yields ``0, 1, 2, ...``.
    """

    __slots__ = ("_lock", "_next")

    def __init__(self, initial: int = 0) -> None:
        self._lock = Lock()
        self._next = int(initial)

    def allocate_next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        logger.debug("Allocated id %d", value)
        return value

    def peek(self) -> int:
        """Return the id the next ``allocate_next`` call will hand out."""
        with self._lock:
            return self._next

    def __repr__(self) -> str:
        return f"{type(self).__name__}(next={self._next})"


# Process-wide counter used when a record is built without an explicit generator.
DEFAULT_GENERATOR = IdGenerator()


__all__ = ["IdGenerator", "DEFAULT_GENERATOR"]
