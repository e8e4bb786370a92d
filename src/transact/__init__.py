"""Run a unit of work inside a database transaction.

``do(db, work)`` begins a transaction on ``db``, calls ``work(tx)`` and
commits when it returns ``None``. A returned exception rolls back and is
returned; a raised exception rolls back and is re-raised unchanged.
``do_context`` does the same with an explicit cancellable context.
"""

from transact.core.context import Context, background, with_cancel, with_deadline, with_timeout
from transact.core.dtos import TxOptions
from transact.core.enums import IsolationLevel
from transact.core.errors import (
    Cancelled,
    ContextError,
    DeadlineExceeded,
    TransactError,
    TxDone,
    UnsupportedIsolationLevel,
)
from transact.core.runner import TransactionRunner, do, do_context

__all__ = [
    "Cancelled",
    "Context",
    "ContextError",
    "DeadlineExceeded",
    "IsolationLevel",
    "TransactError",
    "TransactionRunner",
    "TxDone",
    "TxOptions",
    "UnsupportedIsolationLevel",
    "background",
    "do",
    "do_context",
    "with_cancel",
    "with_deadline",
    "with_timeout",
]
