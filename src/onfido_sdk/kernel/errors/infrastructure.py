"""Infrastructure errors – network failures with no usable response."""

from __future__ import annotations

from typing import Any

from onfido_sdk.kernel.errors.base import OnfidoError


class TransportError(OnfidoError):
    """Every attempt failed at the network level (DNS, connect, timeout)."""

    default_type = "transport_error"

    def __init__(
        self,
        message: str,
        *,
        attempts: int = 1,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.attempts = attempts

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["attempts"] = self.attempts
        return base


__all__ = ["TransportError"]
