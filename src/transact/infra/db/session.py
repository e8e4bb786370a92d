from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from transact.core.context import Context, background
from transact.core.dtos import TxOptions
from transact.core.ports import Database
from transact.core.runner import rollback_quietly


@contextmanager
def transaction(
    db: Database, ctx: Context | None = None, options: TxOptions | None = None
) -> Generator[Any]:
    """
    Block-scoped counterpart of ``TransactionRunner``: commits on clean exit,
    rolls back (best-effort) and re-raises on any exception. Begin and commit
    errors propagate as raised.
    """
    tx = db.begin(ctx or background(), options)
    try:
        yield tx
    except BaseException:
        rollback_quietly(tx)
        raise
    tx.commit()
