# filepath: src/transact/infra/db/conn.py
from __future__ import annotations

import sqlite3
from pathlib import Path


def get_conn(db_path: str | Path, *, busy_timeout: float = 5.0) -> sqlite3.Connection:
    """
    Open a sqlite3 connection in autocommit mode so BEGIN/COMMIT/ROLLBACK are
    issued explicitly by the transaction. Rows behave like dicts.
    """
    conn = sqlite3.connect(
        str(db_path),
        timeout=busy_timeout,
        isolation_level=None,
        check_same_thread=False,
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn
