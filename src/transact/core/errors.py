from __future__ import annotations


class TransactError(Exception):
    """Base class for errors raised by this package."""


class ContextError(TransactError):
    """The execution context is done."""


class Cancelled(ContextError):
    def __init__(self, message: str = "context cancelled") -> None:
        super().__init__(message)


class DeadlineExceeded(ContextError):
    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)


class TxDone(TransactError):
    """Operation attempted on a transaction that was already committed or rolled back."""

    def __init__(self, message: str = "transaction has already been committed or rolled back") -> None:
        super().__init__(message)


class UnsupportedIsolationLevel(TransactError, ValueError):
    def __init__(self, level: object, driver: str) -> None:
        super().__init__(f"{driver} does not support isolation level {level!r}")
        self.level = level
        self.driver = driver
