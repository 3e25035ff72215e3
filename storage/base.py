"""Key-value store interface shared by every backend."""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from models.range import Range


class Store(ABC):
    """A key-value store over byte-string keys and values.

    Backends decide their own policy for deleting a missing key. Errors a
    backend raises should derive from exceptions.StoreError.
    """

    @abstractmethod
    def get(self, key: bytes) -> bytes | None:
        """Return the value stored under key, or None if it is absent."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: bytes, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: bytes) -> None:
        """Remove key from the store."""
        raise NotImplementedError

    @abstractmethod
    def scan(self, key_range: Range | None = None) -> Iterator[tuple[bytes, bytes]]:
        """Iterate over (key, value) pairs within key_range in ascending key order.

        A key_range of None scans every key.
        """
        raise NotImplementedError

    @abstractmethod
    def flush(self) -> None:
        """Make previous writes durable."""
        raise NotImplementedError
