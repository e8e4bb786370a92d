from .conn import get_conn
from .session import transaction
from .sqlite_db import SqliteDatabase, SqliteTransaction

__all__ = ["SqliteDatabase", "SqliteTransaction", "get_conn", "transaction"]
