"""Resilience – RetryPolicy.

Decides, per attempt, whether a request goes out again and how long to wait
first. Transport-level failures, ``429`` and ``5xx`` are retryable; a ``429``
carrying an integer ``Retry-After`` waits exactly that many seconds, anything
else waits the fixed backoff.
"""
from __future__ import annotations

import dataclasses

import httpx

from onfido_sdk.resilience.retry.backoff import BackoffStrategy, ConstantBackoff

TOO_MANY_REQUESTS = 429
SERVER_ERROR = 500


def is_retryable_status(status_code: int) -> bool:
    return status_code == TOO_MANY_REQUESTS or status_code >= SERVER_ERROR


def parse_retry_after(value: str | None) -> float | None:
    """Seconds from a ``Retry-After`` header; ``None`` unless a non-negative integer."""
    if value is None:
        return None
    value = value.strip()
    if not value.isdigit():
        return None
    return float(int(value))


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Retry budget and wait rule for one request.

    ``retries`` is the number of additional attempts after the first send.
    """

    retries: int = 0
    backoff: BackoffStrategy = dataclasses.field(default_factory=ConstantBackoff)

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError("retries must be >= 0")

    @classmethod
    def fixed(cls, retries: int, wait: float) -> "RetryPolicy":
        return cls(retries=retries, backoff=ConstantBackoff(wait))

    @property
    def max_attempts(self) -> int:
        return self.retries + 1

    def should_retry(self, response: httpx.Response | None, error: BaseException | None) -> bool:
        if error is not None:
            return isinstance(error, httpx.TransportError)
        return response is not None and is_retryable_status(response.status_code)

    def compute_wait(self, response: httpx.Response | None, attempt: int) -> float:
        if response is not None and response.status_code == TOO_MANY_REQUESTS:
            retry_after = parse_retry_after(response.headers.get("Retry-After"))
            if retry_after is not None:
                return retry_after
        return self.backoff.compute(attempt)


__all__ = [
    "RetryPolicy",
    "is_retryable_status",
    "parse_retry_after",
]
