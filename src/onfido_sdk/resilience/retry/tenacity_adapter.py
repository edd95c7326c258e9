"""Resilience – drive a :class:`RetryPolicy` with ``tenacity``.

``tenacity`` owns the attempt loop; the policy only answers "retry?" and
"how long?". Hooks let the caller close discarded responses, log, and
react to an exhausted budget.
"""
from __future__ import annotations

from typing import Any, Callable

import tenacity
from tenacity.retry import retry_base
from tenacity.wait import wait_base

from onfido_sdk.resilience.retry.policy import RetryPolicy

RetryHook = Callable[[tenacity.RetryCallState], Any]


class _RetryFromPolicy(retry_base):
    def __init__(self, policy: RetryPolicy) -> None:
        self._policy = policy

    def __call__(self, retry_state: tenacity.RetryCallState) -> bool:
        outcome = retry_state.outcome
        if outcome is None:
            return False
        if outcome.failed:
            return self._policy.should_retry(None, outcome.exception())
        return self._policy.should_retry(outcome.result(), None)


class _WaitFromPolicy(wait_base):
    def __init__(self, policy: RetryPolicy) -> None:
        self._policy = policy

    def __call__(self, retry_state: tenacity.RetryCallState) -> float:
        outcome = retry_state.outcome
        response = None
        if outcome is not None and not outcome.failed:
            response = outcome.result()
        return self._policy.compute_wait(response, retry_state.attempt_number - 1)


class TenacityRetryPolicy:
    """Build ``tenacity.Retrying`` controllers from a :class:`RetryPolicy`.

    Parameters
    ----------
    policy:
        Retry budget and wait rule.
    sleep:
        Blocking sleep used between attempts; tests inject a recorder.
    before:
        Called with the retry state before every attempt; raising aborts
        the loop without retrying.
    before_sleep:
        Called with the retry state after a retryable outcome, before waiting.
    on_exhausted:
        Called when the budget runs out on a retryable outcome; its return
        value (or exception) becomes the call's result. Without it the last
        outcome is returned or re-raised unchanged.
    """

    def __init__(
        self,
        policy: RetryPolicy,
        *,
        sleep: Callable[[float], None],
        before: RetryHook | None = None,
        before_sleep: RetryHook | None = None,
        on_exhausted: RetryHook | None = None,
    ) -> None:
        self._policy = policy
        self._sleep = sleep
        self._before = before
        self._before_sleep = before_sleep
        self._on_exhausted = on_exhausted or _last_outcome

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def build_retrying(self) -> tenacity.Retrying:
        return tenacity.Retrying(
            stop=tenacity.stop_after_attempt(self._policy.max_attempts),
            wait=_WaitFromPolicy(self._policy),
            retry=_RetryFromPolicy(self._policy),
            sleep=self._sleep,
            before=self._before or tenacity.before_nothing,
            before_sleep=self._before_sleep or tenacity.before_sleep_nothing,
            retry_error_callback=self._on_exhausted,
        )

    def execute(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Call *func* until the policy stops retrying."""
        return self.build_retrying()(func, *args, **kwargs)


def _last_outcome(retry_state: tenacity.RetryCallState) -> Any:
    return retry_state.outcome.result()  # type: ignore[union-attr]


__all__ = ["RetryHook", "TenacityRetryPolicy"]
