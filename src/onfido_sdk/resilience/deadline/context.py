"""Resilience – cancellable request context with an optional deadline.

Every client operation accepts a :class:`Context`. The transport checks it
before each attempt and while waiting between retries; a send already on
the wire is bounded by the per-attempt timeout, not by cancellation.
"""
from __future__ import annotations

import contextlib
import threading
from contextvars import ContextVar, Token
from typing import Iterator

from onfido_sdk.kernel.errors import CancelledError, DeadlineExceededError
from onfido_sdk.resilience.deadline.deadline import Deadline

__all__ = [
    "Context",
    "DeadlineContext",
]


class Context:
    """Cancellation signal plus optional deadline, shareable across threads."""

    def __init__(self, deadline: Deadline | None = None) -> None:
        self._deadline = deadline
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> "Context":
        """A context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "Context":
        return cls(Deadline.after(seconds))

    @property
    def deadline(self) -> Deadline | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def remaining_seconds(self) -> float | None:
        """Seconds left before the deadline, ``None`` without one."""
        if self._deadline is None:
            return None
        return self._deadline.remaining_seconds

    @property
    def done(self) -> bool:
        return self.cancelled or (self._deadline is not None and self._deadline.is_expired)

    def cancel(self) -> None:
        self._cancelled.set()

    def raise_if_done(self) -> None:
        if self._cancelled.is_set():
            raise CancelledError("context cancelled")
        if self._deadline is not None and self._deadline.is_expired:
            raise DeadlineExceededError("context deadline exceeded")

    def sleep(self, seconds: float) -> None:
        """Block for *seconds*, waking early on cancel or deadline."""
        remaining = self.remaining_seconds
        clamped = remaining is not None and remaining <= seconds
        if clamped:
            seconds = remaining  # type: ignore[assignment]
        self._cancelled.wait(max(0.0, seconds))
        if clamped and not self._cancelled.is_set():
            raise DeadlineExceededError("context deadline exceeded")
        self.raise_if_done()


_CONTEXT_VAR: ContextVar[Context | None] = ContextVar("_onfido_context", default=None)


class DeadlineContext:
    """Context-variable wrapper so nested calls inherit a caller's context."""

    @staticmethod
    def set(ctx: Context) -> Token[Context | None]:
        return _CONTEXT_VAR.set(ctx)

    @staticmethod
    def get() -> Context | None:
        return _CONTEXT_VAR.get()

    @staticmethod
    def reset(token: Token[Context | None]) -> None:
        _CONTEXT_VAR.reset(token)

    @staticmethod
    def resolve(ctx: Context | None = None) -> Context:
        """Explicit *ctx*, else the scoped one, else a background context."""
        return ctx or _CONTEXT_VAR.get() or Context.background()

    @staticmethod
    @contextlib.contextmanager
    def scoped(ctx: Context) -> Iterator[Context]:
        token = _CONTEXT_VAR.set(ctx)
        try:
            yield ctx
        finally:
            _CONTEXT_VAR.reset(token)
