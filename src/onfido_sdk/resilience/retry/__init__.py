"""Resilience – retry policy with a fixed backoff, driven by tenacity."""
from onfido_sdk.resilience.retry.backoff import BackoffStrategy, ConstantBackoff
from onfido_sdk.resilience.retry.policy import (
    RetryPolicy,
    is_retryable_status,
    parse_retry_after,
)
from onfido_sdk.resilience.retry.tenacity_adapter import RetryHook, TenacityRetryPolicy

__all__ = [
    "BackoffStrategy",
    "ConstantBackoff",
    "RetryHook",
    "RetryPolicy",
    "TenacityRetryPolicy",
    "is_retryable_status",
    "parse_retry_after",
]
