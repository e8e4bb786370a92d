"""Execution contexts carrying cancellation and an optional deadline.

A context is handed to ``Database.begin`` and, by the adapters in this
package, consulted before every statement. Contexts form a tree: a child is
done as soon as it, or any of its ancestors, is cancelled or past its
deadline. ``background()`` is the root that is never done.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from transact.core.errors import Cancelled, ContextError, DeadlineExceeded


class Context:
    def __init__(self, parent: Context | None = None, deadline: float | None = None) -> None:
        self._parent = parent
        self._cancelled = threading.Event()
        if parent is not None and parent.deadline is not None:
            deadline = parent.deadline if deadline is None else min(deadline, parent.deadline)
        self._deadline = deadline

    @property
    def deadline(self) -> float | None:
        """Deadline as a ``time.monotonic()`` value, or None."""
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    def err(self) -> ContextError | None:
        if self._cancelled.is_set():
            return Cancelled()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceeded()
        if self._parent is not None:
            return self._parent.err()
        return None

    def done(self) -> bool:
        return self.err() is not None

    def raise_if_done(self) -> None:
        err = self.err()
        if err is not None:
            raise err

    def remaining(self) -> float | None:
        """Seconds left before the deadline (never negative), or None."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def __repr__(self) -> str:
        state = "done" if self.done() else "active"
        return f"<{type(self).__name__} {state} deadline={self._deadline!r}>"


class _Background(Context):
    def cancel(self) -> None:
        # The root context cannot be cancelled.
        return None

    def err(self) -> ContextError | None:
        return None

    def __repr__(self) -> str:
        return "<Context background>"


_BACKGROUND = _Background()


def background() -> Context:
    """The default context: no cancellation, no deadline."""
    return _BACKGROUND


def with_cancel(parent: Context) -> tuple[Context, Callable[[], None]]:
    ctx = Context(parent)
    return ctx, ctx.cancel


def with_deadline(parent: Context, when: float) -> tuple[Context, Callable[[], None]]:
    ctx = Context(parent, deadline=when)
    return ctx, ctx.cancel


def with_timeout(parent: Context, seconds: float) -> tuple[Context, Callable[[], None]]:
    return with_deadline(parent, time.monotonic() + seconds)
