"""Config settings – Settings base class and ClientSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from onfido_sdk.config.validation import ConfigError, InvalidSettingValueError

REGIONS = ("eu", "us", "ca")
DEFAULT_REGION = "eu"
DEFAULT_TIMEOUT = 30.0
DEFAULT_RETRY_WAIT = 2.0


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ClientSettings(Settings):
    """Everything needed to build a :class:`~onfido_sdk.client.Client`.

    Read from ``ONFIDO_API_TOKEN``, ``ONFIDO_REGION``, ``ONFIDO_RETRIES``,
    ``ONFIDO_RETRY_WAIT``, ``ONFIDO_TIMEOUT`` and ``ONFIDO_USER_AGENT`` by
    the loaders in :mod:`onfido_sdk.config.settings.loaders`.
    """

    _prefix: ClassVar[str] = "ONFIDO"

    api_token: str
    region: str = DEFAULT_REGION
    retries: int = 0
    retry_wait: float | None = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str | None = None

    def _validate(self) -> None:
        if not self.api_token:
            raise ConfigError("api_token is required", fields={"api_token": ["is required"]})
        self.region = str(self.region).lower()
        if self.region not in REGIONS:
            raise InvalidSettingValueError("region", self.region, f"must be one of {', '.join(REGIONS)}")
        if self.retries < 0:
            raise InvalidSettingValueError("retries", self.retries, "must be >= 0")
        if self.retry_wait is not None and self.retry_wait < 0:
            raise InvalidSettingValueError("retry_wait", self.retry_wait, "must be >= 0")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be > 0")

    @property
    def effective_retry_wait(self) -> float:
        """Retry wait in seconds; retries without an explicit wait use 2s."""
        if self.retry_wait is None:
            return DEFAULT_RETRY_WAIT if self.retries > 0 else 0.0
        return self.retry_wait


__all__ = [
    "ClientSettings",
    "DEFAULT_REGION",
    "DEFAULT_RETRY_WAIT",
    "DEFAULT_TIMEOUT",
    "REGIONS",
    "Settings",
]
