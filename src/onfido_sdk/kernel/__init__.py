"""Kernel – framework-agnostic building blocks shared by every layer."""

from onfido_sdk.kernel.errors import (
    ApiError,
    CancelledError,
    DeadlineExceededError,
    DecodeError,
    NotFoundError,
    OnfidoError,
    TransportError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "CancelledError",
    "DeadlineExceededError",
    "DecodeError",
    "NotFoundError",
    "OnfidoError",
    "TransportError",
    "ValidationError",
]
