"""Run a unit of work inside a transaction.

The runner begins a transaction, hands it to the unit of work and then
finalizes it exactly once:

* the unit of work raises: roll back, re-raise the original exception;
* it returns an exception: roll back, return that exception;
* it returns ``None``: commit, return whatever the commit raised (or None).

Rollback failures are discarded on every path so the caller always sees the
original outcome. Nothing is retried.
"""

from __future__ import annotations

import logging

from transact.core.context import Context, background
from transact.core.dtos import TxOptions
from transact.core.ports import Database, Transaction, UnitOfWork

logger = logging.getLogger(__name__)


def rollback_quietly(tx: Transaction) -> None:
    try:
        tx.rollback()
    except Exception as exc:
        logger.debug("rollback failed, discarding: %r", exc)


class TransactionRunner:
    def __init__(self, options: TxOptions | None = None) -> None:
        self._options = options

    @classmethod
    def from_settings(cls, settings) -> TransactionRunner:
        return cls(options=settings.tx_options())

    @property
    def options(self) -> TxOptions | None:
        return self._options

    def run_context(self, ctx: Context, db: Database, work: UnitOfWork) -> BaseException | None:
        try:
            tx = db.begin(ctx, self._options)
        except Exception as exc:
            logger.debug("begin failed: %r", exc)
            return exc

        try:
            result = work(tx)
        except BaseException:
            logger.debug("unit of work raised, rolling back")
            rollback_quietly(tx)
            raise

        if result is not None:
            rollback_quietly(tx)
            if isinstance(result, BaseException):
                logger.debug("unit of work failed, rolled back: %r", result)
                return result
            raise TypeError(
                f"unit of work must return None or an exception, got {type(result).__name__}"
            )

        try:
            tx.commit()
        except Exception as exc:
            logger.debug("commit failed: %r", exc)
            return exc
        logger.debug("committed")
        return None

    def run(self, db: Database, work: UnitOfWork) -> BaseException | None:
        return self.run_context(background(), db, work)


def do_context(
    ctx: Context, db: Database, work: UnitOfWork, options: TxOptions | None = None
) -> BaseException | None:
    return TransactionRunner(options).run_context(ctx, db, work)


def do(db: Database, work: UnitOfWork, options: TxOptions | None = None) -> BaseException | None:
    return TransactionRunner(options).run(db, work)
