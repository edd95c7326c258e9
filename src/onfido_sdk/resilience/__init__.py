"""Resilience – retry and cancellation."""

from onfido_sdk.resilience.deadline import Context, Deadline, DeadlineContext
from onfido_sdk.resilience.retry import ConstantBackoff, RetryPolicy, TenacityRetryPolicy

__all__ = [
    "ConstantBackoff",
    "Context",
    "Deadline",
    "DeadlineContext",
    "RetryPolicy",
    "TenacityRetryPolicy",
]
