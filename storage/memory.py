"""In-memory ordered key-value backend.

Keys live in a sorted list next to a dict of values, so lookups are O(1) and
scans walk keys in order from a bisected start position. The store is not
thread-safe; share it between threads through ConcurrentStore.
"""

import bisect
from collections.abc import Iterator

from models.range import Range
from storage.base import Store


class MemoryStore(Store):
    """Ordered key-value store held entirely in memory."""

    def __init__(self):
        self._data: dict[bytes, bytes] = {}
        self._keys: list[bytes] = []

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        if not isinstance(key, bytes) or not isinstance(value, bytes):
            raise TypeError(f"Keys and values must be bytes, got {type(key).__name__} and {type(value).__name__}")

        if key not in self._data:
            bisect.insort(self._keys, key)
        self._data[key] = value

    def delete(self, key: bytes) -> None:
        """Remove key. Deleting a missing key is a no-op."""
        if key not in self._data:
            return

        del self._data[key]
        idx = bisect.bisect_left(self._keys, key)
        del self._keys[idx]

    def scan(self, key_range: Range | None = None) -> Iterator[tuple[bytes, bytes]]:
        """Lazily yield pairs within key_range.

        The iterator reads the live key list; mutating the store while it is
        being consumed is undefined.
        """
        if key_range is None:
            key_range = Range.all()

        if key_range.start is None:
            idx = 0
        elif key_range.start_inclusive:
            idx = bisect.bisect_left(self._keys, key_range.start)
        else:
            idx = bisect.bisect_right(self._keys, key_range.start)

        # Every key from idx on satisfies the start bound, stop at the end bound
        while idx < len(self._keys):
            key = self._keys[idx]
            if not key_range.contains(key):
                break
            yield key, self._data[key]
            idx += 1

    def flush(self) -> None:
        pass

    def __len__(self) -> int:
        return len(self._keys)

    def __str__(self) -> str:
        return "memory"
