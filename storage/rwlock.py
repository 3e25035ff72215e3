"""Reader/writer lock guarding a single shared value.

Any number of readers, or exactly one writer, may hold the lock. A writer
waiting for the lock blocks new readers so a steady stream of reads cannot
starve writes.

If a write section fails with anything other than a StoreError, the guarded
value may be half-updated. The lock is then poisoned: every later acquisition
raises LockError instead of handing out the suspect value. StoreErrors are the
backend's ordinary results and leave the lock healthy.

The lock is not reentrant. A thread holding it must not acquire it again.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic, TypeVar

from exceptions import LockError, StoreError
from log import logger

T = TypeVar("T")


class ReadWriteLock(Generic[T]):
    """Guards value behind shared read and exclusive write sections.

    Usage:
        lock = ReadWriteLock(MemoryStore())
        with lock.read() as store:
            store.get(b"key")
        with lock.write() as store:
            store.set(b"key", b"value")

    Args:
        value: The object to guard.
        timeout: Seconds to wait for an acquisition before raising LockError.
            None waits forever.
    """

    def __init__(self, value: T, timeout: float | None = None):
        self._value = value
        self._timeout = timeout
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0
        self._poisoned = False

    @property
    def poisoned(self) -> bool:
        """Whether a failed write section has invalidated the guarded value."""
        with self._cond:
            return self._poisoned

    def _check_poisoned(self) -> None:
        if self._poisoned:
            raise LockError("Lock is poisoned: a writer failed while holding it")

    def acquire_read(self) -> None:
        with self._cond:
            self._check_poisoned()
            acquired = self._cond.wait_for(
                lambda: self._poisoned or not (self._writer or self._writers_waiting),
                timeout=self._timeout,
            )
            if not acquired:
                raise LockError(f"Timed out after {self._timeout}s waiting for read access")
            self._check_poisoned()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._check_poisoned()
            self._writers_waiting += 1
            try:
                acquired = self._cond.wait_for(
                    lambda: self._poisoned or not (self._writer or self._readers),
                    timeout=self._timeout,
                )
            finally:
                self._writers_waiting -= 1

            if not acquired:
                # Readers held back by this writer may go ahead now
                self._cond.notify_all()
                raise LockError(f"Timed out after {self._timeout}s waiting for write access")
            self._check_poisoned()
            self._writer = True

    def release_write(self, poison: bool = False) -> None:
        with self._cond:
            self._writer = False
            if poison:
                self._poisoned = True
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[T]:
        """Hold shared access for the duration of the block."""
        self.acquire_read()
        try:
            yield self._value
        finally:
            self.release_read()

    @contextmanager
    def write(self) -> Iterator[T]:
        """Hold exclusive access for the duration of the block."""
        self.acquire_write()
        poison = False
        try:
            yield self._value
        except StoreError:
            raise
        except Exception as e:
            logger.warning("Poisoning lock after %s in write section: %s", type(e).__name__, e)
            poison = True
            raise
        finally:
            self.release_write(poison)
