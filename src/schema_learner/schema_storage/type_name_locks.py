"""Per-type-name serialization of load-merge-save cycles."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class TypeNameLocks:
    """Registry handing out one lock per type name."""

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    @contextmanager
    def hold(self, type_name: str) -> Iterator[None]:
        """Hold the lock for ``type_name`` for the duration of the block."""
        with self._guard:
            lock = self._locks.setdefault(type_name, threading.Lock())
        with lock:
            yield
