"""Exceptions raised by pagekv stores and the page capacity calculator."""


class StoreError(Exception):
    """Base class for errors raised by a store backend.

    The concurrent adapter passes these through to the caller unchanged.
    """


class KeyNotFound(StoreError):
    pass


class LockError(Exception):
    """The lock guarding a shared backend could not be acquired.

    Raised when the lock is poisoned (a writer failed while holding it) or
    when a bounded acquisition timed out.
    """


class InvalidParameters(ValueError):
    """Page layout inputs that would divide by zero, underflow or never terminate."""
