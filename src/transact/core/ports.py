from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from transact.core.context import Context
from transact.core.dtos import TxOptions


# Keep databases abstract so any driver can be plugged in
class Transaction(Protocol):
    def commit(self) -> Any: ...
    def rollback(self) -> Any: ...


class Database(Protocol):
    def begin(self, ctx: Context, options: TxOptions | None = None) -> Transaction: ...


# Returns None on success or the failure as an exception instance.
UnitOfWork = Callable[[Any], BaseException | None]
