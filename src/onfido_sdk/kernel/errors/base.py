"""Root error class for the onfido-sdk error hierarchy."""

from __future__ import annotations

from typing import Any


class OnfidoError(Exception):
    """Root of the error hierarchy.

    Every error raised by the client carries the same shape as the API's
    own error envelope so callers can match on one set of attributes.

    Args:
        message: Human-readable description.
        type: Machine-readable slug (defaults to the class ``default_type``).
        fields: Per-field validation detail.
        cause: Original exception that triggered this error.
    """

    default_type: str = "onfido_error"

    def __init__(
        self,
        message: str = "",
        *,
        type: str | None = None,  # noqa: A002
        fields: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.type = type if type is not None else self.default_type
        self.fields: dict[str, Any] = dict(fields or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        lines = [f"{type(self).__name__} - Type: {self.type}"]
        if self.message:
            lines.append(f"\tMessage: {self.message}")
        if self.fields:
            lines.append("\tFields:")
            for name, detail in self.fields.items():
                lines.append(f"\t\t{name} - {detail}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self.type!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the API error envelope shape (safe for logging)."""
        payload: dict[str, Any] = {
            "type": self.type,
            "message": self.message,
            "fields": self.fields,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["OnfidoError"]
