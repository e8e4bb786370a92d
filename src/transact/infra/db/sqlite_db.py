from __future__ import annotations

import logging
import math
import sqlite3
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

from transact.core.context import Context
from transact.core.dtos import TxOptions
from transact.core.enums import IsolationLevel
from transact.core.errors import TxDone, UnsupportedIsolationLevel
from transact.infra.db.conn import get_conn

logger = logging.getLogger(__name__)

# SQLite transactions are serializable; IMMEDIATE takes the write lock up front.
_BEGIN_STATEMENTS = {
    IsolationLevel.DEFAULT: "BEGIN",
    IsolationLevel.SERIALIZABLE: "BEGIN IMMEDIATE",
}


class SqliteTransaction:
    """
    A single SQLite transaction on its own connection.

    Every statement first checks the context; once the context is done the
    transaction is rolled back and the context error raised. Committing or
    rolling back closes the connection, after which every call raises TxDone.
    """

    def __init__(self, conn: sqlite3.Connection, ctx: Context):
        self.conn = conn
        self.ctx = ctx
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def _check(self) -> None:
        if self._done:
            raise TxDone()
        err = self.ctx.err()
        if err is not None:
            self._finish("ROLLBACK")
            raise err

    def _finish(self, statement: str) -> None:
        self._done = True
        try:
            self.conn.execute(statement)
        finally:
            self.conn.close()
        logger.debug("%s", statement)

    # Statements
    def execute(self, sql: str, params: Sequence[Any] | None = None) -> sqlite3.Cursor:
        self._check()
        return self.conn.execute(sql, params or [])

    def executemany(self, sql: str, seq_of_params: Iterable[Sequence[Any]]) -> sqlite3.Cursor:
        self._check()
        return self.conn.executemany(sql, seq_of_params)

    def one(self, sql: str, params: Sequence[Any] | None = None) -> sqlite3.Row | None:
        return self.execute(sql, params).fetchone()

    def all(self, sql: str, params: Sequence[Any] | None = None) -> list[sqlite3.Row]:
        return self.execute(sql, params).fetchall()

    def iter(self, sql: str, params: Sequence[Any] | None = None) -> Iterator[sqlite3.Row]:
        return iter(self.execute(sql, params))

    # Finalization
    def commit(self) -> None:
        self._check()
        self._finish("COMMIT")

    def rollback(self) -> None:
        if self._done:
            raise TxDone()
        self._finish("ROLLBACK")


class SqliteDatabase:
    """Begins transactions against a SQLite file, one connection per transaction."""

    driver = "sqlite3"

    def __init__(self, db_path: str | Path, *, busy_timeout: float = 5.0) -> None:
        self.db_path = db_path
        self.busy_timeout = busy_timeout

    @classmethod
    def from_settings(cls, settings) -> SqliteDatabase:
        return cls(settings.db_path, busy_timeout=settings.busy_timeout)

    def _wait_budget(self, ctx: Context) -> float:
        """Busy timeout for this begin, capped by the context deadline."""
        remaining = ctx.remaining()
        if remaining is None or remaining >= self.busy_timeout:
            return self.busy_timeout
        # sqlite3 truncates the timeout to whole milliseconds; round up so the
        # wait always reaches the deadline.
        return math.ceil(remaining * 1000) / 1000 + 0.001

    def begin(self, ctx: Context, options: TxOptions | None = None) -> SqliteTransaction:
        ctx.raise_if_done()
        options = options or TxOptions()
        statement = _BEGIN_STATEMENTS.get(options.isolation_level)
        if statement is None:
            raise UnsupportedIsolationLevel(options.isolation_level, self.driver)

        conn = get_conn(self.db_path, busy_timeout=self._wait_budget(ctx))
        try:
            if options.read_only:
                conn.execute("PRAGMA query_only = ON")
            conn.execute(statement)
        except BaseException as exc:
            conn.close()
            # A lock wait cut short by the deadline surfaces as the context error.
            err = ctx.err() if isinstance(exc, Exception) else None
            if err is not None:
                raise err from exc
            raise
        logger.debug("%s on %s (read_only=%s)", statement, self.db_path, options.read_only)
        return SqliteTransaction(conn, ctx)

    def __repr__(self) -> str:
        return f"SqliteDatabase({str(self.db_path)!r})"
