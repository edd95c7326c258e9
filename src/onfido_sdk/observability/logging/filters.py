"""Observability – SensitiveFieldsFilter.

Keeps API credentials out of log output. Keys are matched
case-insensitively at any depth, including inside lists of mappings such
as logged header pairs.
"""
from __future__ import annotations

from typing import Any, Mapping

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"authorization", "api_token", "token", "sdk_token", "password"}
)

REDACTED = "[REDACTED]"


class SensitiveFieldsFilter:
    """structlog processor replacing sensitive values with ``[REDACTED]``."""

    REDACTED = REDACTED

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        names = DEFAULT_SENSITIVE_FIELDS if sensitive_fields is None else sensitive_fields
        self._fields = frozenset(name.lower() for name in names)

    def is_sensitive(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._fields

    def redact(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Top-level keys only."""
        return {key: REDACTED if self.is_sensitive(key) else value for key, value in data.items()}

    def redact_deep(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {key: REDACTED if self.is_sensitive(key) else self._walk(value) for key, value in data.items()}

    def _walk(self, value: Any) -> Any:
        if isinstance(value, Mapping):
            return self.redact_deep(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._walk(item) for item in value)
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "REDACTED", "SensitiveFieldsFilter"]
