import os
import sys
import tempfile

import pytest

# Ensure 'src/' is on sys.path so 'transact' imports without an install
_REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
_SRC_PATH = os.path.join(_REPO_ROOT, "src")
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from transact.core.context import background  # noqa: E402
from transact.infra.db.sqlite_db import SqliteDatabase  # noqa: E402


class RecordingTx:
    """Transaction fake that records finalization calls on its database."""

    def __init__(self, db, ctx, options):
        self.db = db
        self.ctx = ctx
        self.options = options

    def commit(self):
        self.db.calls.append("commit")
        if self.db.commit_error is not None:
            raise self.db.commit_error

    def rollback(self):
        self.db.calls.append("rollback")
        if self.db.rollback_error is not None:
            raise self.db.rollback_error


class RecordingDatabase:
    """
    Database fake: records begin/commit/rollback in call order and can be told
    to fail any of them.
    """

    def __init__(self, begin_error=None, commit_error=None, rollback_error=None):
        self.begin_error = begin_error
        self.commit_error = commit_error
        self.rollback_error = rollback_error
        self.calls: list[str] = []
        self.transactions: list[RecordingTx] = []

    def begin(self, ctx, options=None):
        self.calls.append("begin")
        if self.begin_error is not None:
            raise self.begin_error
        tx = RecordingTx(self, ctx, options)
        self.transactions.append(tx)
        return tx


class AnError(Exception):
    """Stand-in failure for tests."""


@pytest.fixture()
def recording_db():
    return RecordingDatabase()


@pytest.fixture()
def make_db():
    return RecordingDatabase


@pytest.fixture()
def an_error():
    return AnError("general error for testing")


# --- SQLite test DB fixtures ---


@pytest.fixture()
def temp_db_path():
    fd, path = tempfile.mkstemp(prefix="transact_", suffix=".db")
    os.close(fd)
    try:
        yield path
    finally:
        for suffix in ("", "-journal", "-wal", "-shm"):
            try:
                os.remove(path + suffix)
            except FileNotFoundError:
                pass


@pytest.fixture()
def sqlite_db(temp_db_path):
    """SqliteDatabase over a temp file with a minimal ledger schema."""
    db = SqliteDatabase(temp_db_path, busy_timeout=1.0)
    tx = db.begin(background())
    tx.execute(
        """
        CREATE TABLE IF NOT EXISTS accounts (
          id INTEGER PRIMARY KEY,
          name TEXT NOT NULL UNIQUE,
          balance INTEGER NOT NULL CHECK (balance >= 0)
        )
        """
    )
    tx.executemany(
        "INSERT INTO accounts(name, balance) VALUES (?, ?)",
        [("alice", 100), ("bob", 50)],
    )
    tx.commit()
    return db
