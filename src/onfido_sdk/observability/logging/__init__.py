"""Observability – structured logging helpers."""
from onfido_sdk.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from onfido_sdk.observability.logging.factory import JsonLoggerFactory
from onfido_sdk.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
