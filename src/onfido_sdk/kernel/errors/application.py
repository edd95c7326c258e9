"""Application-level errors raised by the caller's own context."""

from __future__ import annotations

from onfido_sdk.kernel.errors.base import OnfidoError


class CancelledError(OnfidoError):
    """The operation's context was cancelled before it completed."""

    default_type = "cancelled"


class DeadlineExceededError(CancelledError):
    """The operation's context deadline passed."""

    default_type = "deadline_exceeded"


__all__ = ["CancelledError", "DeadlineExceededError"]
