"""Storage layer: the store interface, its backends and page capacity planning."""

from storage.base import Store
from storage.capacity import (
    compute_efficiency,
    compute_max_order,
    compute_page_size,
    plan_page,
)
from storage.concurrent import ConcurrentStore
from storage.memory import MemoryStore
from storage.rwlock import ReadWriteLock

__all__ = [
    "Store",
    "MemoryStore",
    "ConcurrentStore",
    "ReadWriteLock",
    "compute_max_order",
    "compute_page_size",
    "compute_efficiency",
    "plan_page",
]
