# src/transact/app/settings.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from transact.core.dtos import TxOptions
from transact.core.enums import IsolationLevel

# Compute project root: repo/ (three levels up from this file: repo/src/transact/app/settings.py)
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_DB = DATA_DIR / "transact.db"


class Settings(BaseSettings):
    """
    Central configuration.

    Sources (highest precedence first):
      1. Environment variables (prefixed with TRANSACT_, e.g. TRANSACT_DB_PATH)
      2. .env file at data/.env
      3. Defaults below
    """

    model_config = SettingsConfigDict(
        env_file=str(DATA_DIR / ".env"),
        env_prefix="TRANSACT_",
        extra="ignore",
    )

    # Database
    db_path: Path = Field(default=DEFAULT_DB, description="SQLite DB path")
    busy_timeout: float = Field(
        default=5.0, ge=0, description="Seconds SQLite waits on a locked database"
    )

    # Transaction options handed to begin()
    isolation_level: IsolationLevel = Field(
        default=IsolationLevel.DEFAULT, description="Isolation level requested at begin"
    )
    read_only: bool = Field(default=False, description="Begin read-only transactions")

    # Logging
    log_level: str = Field(default="WARNING", description="Level used by configure_logging()")

    # --- Validators / normalizers ---
    @field_validator("db_path", mode="before")
    @classmethod
    def _expand_user_and_env(cls, v):
        if isinstance(v, str | Path):
            return Path(str(v)).expanduser()
        return v

    @field_validator("isolation_level", mode="before")
    @classmethod
    def _parse_isolation_level(cls, v):
        return IsolationLevel.from_any(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in logging.getLevelNamesMapping():
                raise ValueError(f"unknown log level {v!r}")
        return v

    # --- Helpers ---
    def ensure_directories(self) -> None:
        """Create the parent dir for the DB (idempotent)."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def tx_options(self) -> TxOptions:
        return TxOptions(isolation_level=self.isolation_level, read_only=self.read_only)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Singleton-style accessor so imports are cheap and consistent system-wide.
    Also ensures directories exist on first access.
    """
    s = Settings()
    s.ensure_directories()
    return s
