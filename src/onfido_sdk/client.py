"""Client – configuration, region selection and lifecycle.

Usage::

    from onfido_sdk import Client, Region
    from onfido_sdk.application.pagination import WithPage, WithPageLimit

    with Client(api_token, region=Region.US, retries=3) as client:
        applicant = client.applicants.create({"first_name": "Jane", "last_name": "Doe"})
        applicants, page = client.applicants.list(WithPage(1), WithPageLimit(20))
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping

from onfido_sdk.adapters.http import HttpxTransport, RequestDescriptor, Response
from onfido_sdk.adapters.http.request import Body
from onfido_sdk.config import ClientSettings, DotenvSettingsLoader, EnvSettingsLoader
from onfido_sdk.config.settings.base import DEFAULT_REGION, DEFAULT_TIMEOUT
from onfido_sdk.resilience.deadline import Context
from onfido_sdk.resilience.retry import RetryPolicy
from onfido_sdk.resources import Applicants, Documents, WorkflowRuns

CLIENT_VERSION = "1.0.0"
API_VERSION = "v3.6"
BASE_URL_TEMPLATE = "https://api.{region}.onfido.com/" + API_VERSION
USER_AGENT = f"onfido-sdk-python/{CLIENT_VERSION}"


class Region(str, Enum):
    EU = "eu"
    US = "us"
    CA = "ca"


def base_url_for(region: Region | str) -> str:
    value = region.value if isinstance(region, Region) else str(region).lower()
    return BASE_URL_TEMPLATE.format(region=value)


class Client:
    """Entry point to the API; safe to share between threads.

    Parameters
    ----------
    api_token:
        API token, sent as ``Authorization: Token token=<api_token>``.
    region:
        ``eu`` (default), ``us`` or ``ca``.
    retries:
        Additional attempts after the first send for transport errors,
        ``429`` and ``5xx``. Operations may override it per call.
    retry_wait:
        Seconds between attempts; 2s when *retries* is set without a wait.
    timeout:
        Per-attempt timeout in seconds.
    sleep:
        Replaces the wait between attempts; meant for tests.
    """

    def __init__(
        self,
        api_token: str,
        *,
        region: Region | str = DEFAULT_REGION,
        retries: int = 0,
        retry_wait: float | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        settings = ClientSettings(
            api_token=api_token,
            region=region.value if isinstance(region, Region) else region,
            retries=retries,
            retry_wait=retry_wait,
            timeout=timeout,
            user_agent=user_agent,
        )
        self._settings = settings
        self._transport = HttpxTransport(
            base_url_for(settings.region),
            headers=self._default_headers(settings),
            timeout=settings.timeout,
            retry_policy=RetryPolicy.fixed(settings.retries, settings.effective_retry_wait),
            sleep=sleep,
        )
        self.applicants = Applicants(self._transport)
        self.documents = Documents(self._transport)
        self.workflow_runs = WorkflowRuns(self._transport)

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs: Any) -> "Client":
        return cls(
            settings.api_token,
            region=settings.region,
            retries=settings.retries,
            retry_wait=settings.retry_wait,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_file: str | None = None, **kwargs: Any) -> "Client":
        """Build from ``ONFIDO_*`` variables, loading *env_file* first if given."""
        loader = DotenvSettingsLoader(env_file) if env_file else EnvSettingsLoader()
        return cls.from_settings(loader.load(ClientSettings), **kwargs)

    @staticmethod
    def _default_headers(settings: ClientSettings) -> dict[str, str]:
        return {
            "Authorization": f"Token token={settings.api_token}",
            "User-Agent": settings.user_agent or USER_AGENT,
            "Accept": "application/json",
        }

    # ------------------------------------------------------------------
    # Configuration (read-only)
    # ------------------------------------------------------------------

    @property
    def region(self) -> Region:
        return Region(self._settings.region)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def retries(self) -> int:
        return self._transport.retry_policy.retries

    @property
    def retry_wait(self) -> float:
        return self._settings.effective_retry_wait

    @property
    def timeout(self) -> float:
        return self._transport.timeout

    def __repr__(self) -> str:
        return f"Client(region={self._settings.region!r}, retries={self.retries})"

    # ------------------------------------------------------------------
    # Raw access and lifecycle
    # ------------------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Body | None = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        ctx: Context | None = None,
        retries: int | None = None,
        retry_wait: float | None = None,
    ) -> Response:
        """Send an arbitrary API request and return the raw response."""
        descriptor = RequestDescriptor.create(
            method,
            path,
            body=body,
            params=params,
            headers=headers,
            retries=retries,
            retry_wait=retry_wait,
        )
        return self._transport.execute(descriptor, ctx)

    def close(self) -> None:
        """Release pooled connections; the client stays usable."""
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = [
    "API_VERSION",
    "BASE_URL_TEMPLATE",
    "CLIENT_VERSION",
    "Client",
    "Region",
    "USER_AGENT",
    "base_url_for",
]
