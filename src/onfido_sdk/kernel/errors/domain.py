"""Domain errors – structured errors returned by the Onfido API."""

from __future__ import annotations

from typing import Any

from onfido_sdk.kernel.errors.base import OnfidoError

UNKNOWN_INTERNAL_ERROR = "unknown internal error"
EMPTY_RESPONSE = "empty_response"


class ApiError(OnfidoError):
    """The API answered with ``{"error": {"type", "message", "fields"}}``.

    ``status_code`` is ``None`` when the error was raised locally, before any
    request was sent.
    """

    default_type = "api_error"

    def __init__(
        self,
        message: str = "",
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.status_code is not None:
            base["status_code"] = self.status_code
        return base

    @classmethod
    def from_envelope(cls, error: dict[str, Any], *, status_code: int | None = None) -> "ApiError":
        """Build the most specific subclass for a decoded ``error`` object."""
        error_type = str(error.get("type") or "")
        fields = error.get("fields")
        error_cls = _BY_TYPE.get(error_type, ApiError)
        return error_cls(
            str(error.get("message") or ""),
            type=error_type,
            fields=fields if isinstance(fields, dict) else None,
            status_code=status_code,
        )


class ValidationError(ApiError):
    """Input rejected, either by the API (422) or locally before dispatch."""

    default_type = "validation_error"

    @classmethod
    def required(cls, name: str) -> "ValidationError":
        return cls(f"{name} is required", fields={name: ["is required"]})


class NotFoundError(ApiError):
    """The requested resource does not exist (or is scheduled for deletion)."""

    default_type = "resource_not_found"


class DecodeError(ApiError):
    """A success or error body could not be decoded."""

    default_type = UNKNOWN_INTERNAL_ERROR


_BY_TYPE: dict[str, type[ApiError]] = {
    ValidationError.default_type: ValidationError,
    NotFoundError.default_type: NotFoundError,
}


__all__ = [
    "ApiError",
    "DecodeError",
    "EMPTY_RESPONSE",
    "NotFoundError",
    "UNKNOWN_INTERNAL_ERROR",
    "ValidationError",
]
