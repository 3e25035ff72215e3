"""Thread-safe adapter sharing one store backend between many owners.

A ConcurrentStore guards its backend with a ReadWriteLock. Cloning the
adapter produces another view onto the same lock and backend, so a write
through one clone is immediately visible through every other clone.

Reads (get, scan) take shared access; writes (set, delete) take exclusive
access. No call holds the lock after it returns. In particular scan drains
the backend into a list while holding the read lock and hands back an
iterator over that list, so a caller may write to the store while still
iterating a scan without deadlocking.
"""

import copy
from collections.abc import Iterator
from typing import Self

from log import logger
from models.range import Range
from storage.base import Store
from storage.memory import MemoryStore
from storage.rwlock import ReadWriteLock


def _check_bytes(**fields: bytes) -> None:
    # Reject bad arguments before the write lock, so they cannot poison it
    for name, v in fields.items():
        if not isinstance(v, bytes):
            raise TypeError(f"{name} must be bytes, got {type(v).__name__}")


class ConcurrentStore(Store):
    """Store facade that can be cloned and used from several threads at once.

    Args:
        backend: The store to share. Defaults to a fresh MemoryStore.
        timeout: Seconds to wait for the lock before raising LockError.
            None blocks until the lock is available.

    Raises:
        LockError: From any operation but flush, when the lock is poisoned
            or the timeout expires.
        StoreError: Whatever the backend raises, unchanged.
    """

    def __init__(self, backend: Store | None = None, timeout: float | None = None):
        if backend is None:
            backend = MemoryStore()
        self._kv: ReadWriteLock[Store] = ReadWriteLock(backend, timeout=timeout)

    def clone(self) -> Self:
        """Return another handle onto the same shared backend."""
        return copy.copy(self)

    @property
    def poisoned(self) -> bool:
        return self._kv.poisoned

    def get(self, key: bytes) -> bytes | None:
        with self._kv.read() as kv:
            return kv.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        _check_bytes(key=key, value=value)
        with self._kv.write() as kv:
            kv.set(key, value)

    def delete(self, key: bytes) -> None:
        _check_bytes(key=key)
        with self._kv.write() as kv:
            kv.delete(key)

    def scan(self, key_range: Range | None = None) -> Iterator[tuple[bytes, bytes]]:
        """Snapshot the pairs within key_range and iterate over the snapshot.

        Writes made after scan returns are not reflected in the iterator.
        """
        # The read lock is scoped to this method, so buffer the result.
        with self._kv.read() as kv:
            items = list(kv.scan(key_range))

        logger.debug("Buffered %d pairs from scan over %r", len(items), key_range)
        return iter(items)

    def flush(self) -> None:
        # Nothing to make durable for an in-memory backend
        pass

    def __str__(self) -> str:
        return "concurrent"
