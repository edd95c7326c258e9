"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    OnfidoError
    ├── ApiError                (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── DecodeError
    ├── TransportError          (infrastructure.py)
    ├── CancelledError          (application.py)
    │   └── DeadlineExceededError
    └── ConfigError             (onfido_sdk.config.validation)
"""

from onfido_sdk.kernel.errors.application import CancelledError, DeadlineExceededError
from onfido_sdk.kernel.errors.base import OnfidoError
from onfido_sdk.kernel.errors.domain import (
    EMPTY_RESPONSE,
    UNKNOWN_INTERNAL_ERROR,
    ApiError,
    DecodeError,
    NotFoundError,
    ValidationError,
)
from onfido_sdk.kernel.errors.infrastructure import TransportError

__all__ = [
    "ApiError",
    "CancelledError",
    "DeadlineExceededError",
    "DecodeError",
    "EMPTY_RESPONSE",
    "NotFoundError",
    "OnfidoError",
    "TransportError",
    "UNKNOWN_INTERNAL_ERROR",
    "ValidationError",
]
