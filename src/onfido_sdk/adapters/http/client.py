"""HTTP adapter – HttpxTransport.

Sends :class:`RequestDescriptor` plans through one shared ``httpx.Client``
and wraps every send in the tenacity-driven :class:`RetryPolicy` loop.
Redirects are never followed: a ``302`` reaches the caller as-is.
"""
from __future__ import annotations

import threading
import time
from typing import Any, Callable, Mapping

import httpx
import tenacity

from onfido_sdk.adapters.http.mapper import raise_for_status
from onfido_sdk.adapters.http.request import RequestDescriptor
from onfido_sdk.adapters.http.response import Response
from onfido_sdk.config.settings.base import DEFAULT_RETRY_WAIT, DEFAULT_TIMEOUT
from onfido_sdk.kernel.errors import EMPTY_RESPONSE, ApiError, TransportError
from onfido_sdk.observability.logging import get_logger
from onfido_sdk.resilience.deadline import Context, DeadlineContext
from onfido_sdk.resilience.retry import RetryPolicy, TenacityRetryPolicy

_log = get_logger(__name__)


class HttpxTransport:
    """Thread-safe, retrying transport for one API base URL.

    Parameters
    ----------
    base_url:
        Prefix joined with every descriptor path.
    headers:
        Sent on every request; per-request headers win on conflict.
    timeout:
        Per-attempt timeout in seconds.
    retry_policy:
        Default budget and wait; a descriptor may override both.
    sleep:
        Replaces the cancellable wait between attempts (tests pass a
        recorder). The context is still checked after each wait.
    """

    def __init__(
        self,
        base_url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        retry_policy: RetryPolicy | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self._base_url = base_url
        self._headers = dict(headers or {})
        self._timeout = timeout
        self._policy = retry_policy or RetryPolicy()
        self._sleep = sleep
        self._lock = threading.Lock()
        self._http: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def retry_policy(self) -> RetryPolicy:
        return self._policy

    @property
    def timeout(self) -> float:
        return self._timeout

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _client(self) -> httpx.Client:
        with self._lock:
            if self._http is None:
                self._http = httpx.Client(
                    base_url=self._base_url,
                    headers=self._headers,
                    timeout=self._timeout,
                    follow_redirects=False,
                )
            return self._http

    def close(self) -> None:
        """Release pooled connections; the next call opens a fresh pool."""
        with self._lock:
            http, self._http = self._http, None
        if http is not None:
            http.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    def execute(self, descriptor: RequestDescriptor, ctx: Context | None = None) -> Response:
        """Send *descriptor*, retrying per policy, and return the last response.

        Raises :class:`TransportError` when every attempt failed without a
        response, and :class:`CancelledError` when *ctx* is done.
        """
        ctx = DeadlineContext.resolve(ctx)
        ctx.raise_if_done()
        request = self.build_request(descriptor)
        return self._run(request, self.policy_for(descriptor), ctx)

    def resolve_indirect(self, descriptor: RequestDescriptor, ctx: Context | None = None) -> str:
        """Send *descriptor* expecting a ``302`` and return its ``Location`` URL.

        Error statuses raise the mapped :class:`ApiError`; a response without
        a location raises ``ApiError(type="empty_response")``.
        """
        response = self.execute(descriptor, ctx)
        raise_for_status(response, allow_redirect=True)
        location = response.location
        if not location:
            raise ApiError(
                "response carries no download location",
                type=EMPTY_RESPONSE,
                status_code=response.status_code,
            )
        return location

    def fetch_external(self, url: str, ctx: Context | None = None) -> Response:
        """``GET`` an absolute, pre-signed *url* without the client's auth header."""
        ctx = DeadlineContext.resolve(ctx)
        ctx.raise_if_done()
        request = self._client().build_request("GET", url)
        request.headers.pop("Authorization", None)
        request.read()
        return self._run(request, self._policy, ctx)

    def build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        """Build the request once; its body is buffered so retries resend it verbatim."""
        kwargs: dict[str, Any] = descriptor.body.request_kwargs() if descriptor.body else {}
        headers = httpx.Headers(kwargs.pop("headers", None))
        if descriptor.headers:
            headers.update(httpx.Headers(list(descriptor.headers)))
        request = self._client().build_request(
            descriptor.method,
            descriptor.path,
            params=list(descriptor.params) or None,
            headers=headers,
            **kwargs,
        )
        request.read()
        return request

    def policy_for(self, descriptor: RequestDescriptor) -> RetryPolicy:
        if descriptor.retries is None and descriptor.retry_wait is None:
            return self._policy
        retries = self._policy.retries if descriptor.retries is None else descriptor.retries
        wait = descriptor.retry_wait
        if wait is None:
            wait = self._policy.backoff.compute(0) if self._policy.retries > 0 else DEFAULT_RETRY_WAIT
        return RetryPolicy.fixed(retries, wait)

    def _run(self, request: httpx.Request, policy: RetryPolicy, ctx: Context) -> Response:
        log = _log.bind(method=request.method, url=str(request.url))
        started = time.monotonic()

        def before(state: tenacity.RetryCallState) -> None:
            ctx.raise_if_done()
            log.debug("http.request", attempt=state.attempt_number)

        def before_sleep(state: tenacity.RetryCallState) -> None:
            outcome = state.outcome
            wait = state.next_action.sleep if state.next_action else 0.0
            if outcome is not None and outcome.failed:
                log.info("http.retry", attempt=state.attempt_number, error=repr(outcome.exception()), wait=wait)
            elif outcome is not None:
                discarded = outcome.result()
                discarded.close()
                log.info("http.retry", attempt=state.attempt_number, status=discarded.status_code, wait=wait)
            ctx.raise_if_done()

        def on_exhausted(state: tenacity.RetryCallState) -> httpx.Response:
            outcome = state.outcome
            exc = outcome.exception() if outcome is not None else None
            if exc is not None:
                log.warning("http.retries_exhausted", attempts=state.attempt_number, error=repr(exc))
                raise TransportError(
                    f"request failed after {policy.retries} retries: {exc}",
                    attempts=state.attempt_number,
                    cause=exc,
                )
            last = outcome.result()  # type: ignore[union-attr]
            log.warning("http.retries_exhausted", attempts=state.attempt_number, status=last.status_code)
            return last

        def wait(seconds: float) -> None:
            if self._sleep is None:
                ctx.sleep(seconds)
            else:
                self._sleep(seconds)
                ctx.raise_if_done()

        retrying = TenacityRetryPolicy(
            policy,
            sleep=wait,
            before=before,
            before_sleep=before_sleep,
            on_exhausted=on_exhausted,
        )
        raw: httpx.Response = retrying.execute(self._send, request, ctx)
        try:
            raw.read()
        except httpx.HTTPError as exc:
            raise TransportError(f"failed to read response body: {exc}", cause=exc) from exc
        finally:
            raw.close()
        response = Response.from_httpx(raw)
        log.debug(
            "http.response",
            status=response.status_code,
            elapsed=round(time.monotonic() - started, 3),
        )
        return response

    def _send(self, request: httpx.Request, ctx: Context) -> httpx.Response:
        request.extensions["timeout"] = httpx.Timeout(self._attempt_timeout(ctx)).as_dict()
        return self._client().send(request, stream=True)

    def _attempt_timeout(self, ctx: Context) -> float:
        remaining = ctx.remaining_seconds
        if remaining is None:
            return self._timeout
        return max(min(self._timeout, remaining), 0.001)


__all__ = ["HttpxTransport"]
