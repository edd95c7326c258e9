"""Unit tests for RetryPolicy and the tenacity-driven retry loop."""

from __future__ import annotations

from typing import Any

import httpx
import pytest
import tenacity

from onfido_sdk.resilience.retry import (
    ConstantBackoff,
    RetryPolicy,
    TenacityRetryPolicy,
    is_retryable_status,
    parse_retry_after,
)


def _response(status: int, **headers: str) -> httpx.Response:
    return httpx.Response(status, headers=headers)


class SleepRecorder:
    def __init__(self) -> None:
        self.waits: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)


def _sequence(*outcomes: Any) -> Any:
    """Callable returning (or raising) *outcomes* in order; records call count."""
    remaining = list(outcomes)

    def call() -> Any:
        call.count += 1  # type: ignore[attr-defined]
        outcome = remaining.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    call.count = 0  # type: ignore[attr-defined]
    return call


# ---------------------------------------------------------------------------
# ConstantBackoff
# ---------------------------------------------------------------------------


class TestConstantBackoff:
    def test_always_returns_same(self) -> None:
        b = ConstantBackoff(delay=2.0)
        for i in range(5):
            assert b.compute(i) == 2.0

    def test_default_delay(self) -> None:
        assert ConstantBackoff().compute(0) == 2.0

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            ConstantBackoff(delay=-1)

    def test_equality(self) -> None:
        assert ConstantBackoff(1.0) == ConstantBackoff(1.0)
        assert ConstantBackoff(1.0) != ConstantBackoff(2.0)


# ---------------------------------------------------------------------------
# Retry-After / status helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    @pytest.mark.parametrize(("status", "expected"), [(429, True), (500, True), (503, True), (200, False), (302, False), (404, False), (422, False)])
    def test_is_retryable_status(self, status: int, expected: bool) -> None:
        assert is_retryable_status(status) is expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("3", 3.0), (" 10 ", 10.0), ("0", 0.0), (None, None), ("", None), ("1.5", None), ("-2", None),
         ("Wed, 21 Oct 2015 07:28:00 GMT", None)],
    )
    def test_parse_retry_after(self, value: str | None, expected: float | None) -> None:
        assert parse_retry_after(value) == expected


# ---------------------------------------------------------------------------
# RetryPolicy
# ---------------------------------------------------------------------------


class TestRetryPolicy:
    def test_defaults(self) -> None:
        policy = RetryPolicy()
        assert policy.retries == 0
        assert policy.max_attempts == 1

    def test_negative_retries_rejected(self) -> None:
        with pytest.raises(ValueError):
            RetryPolicy(retries=-1)

    def test_fixed(self) -> None:
        policy = RetryPolicy.fixed(3, 0.5)
        assert policy.retries == 3
        assert policy.backoff == ConstantBackoff(0.5)

    def test_transport_error_is_retryable(self) -> None:
        assert RetryPolicy().should_retry(None, httpx.ConnectError("refused"))

    def test_other_errors_are_not(self) -> None:
        assert not RetryPolicy().should_retry(None, ValueError("x"))

    def test_status_based(self) -> None:
        policy = RetryPolicy()
        assert policy.should_retry(_response(429), None)
        assert policy.should_retry(_response(502), None)
        assert not policy.should_retry(_response(422), None)
        assert not policy.should_retry(_response(200), None)

    def test_wait_uses_retry_after_on_429(self) -> None:
        policy = RetryPolicy.fixed(5, 2.0)
        assert policy.compute_wait(_response(429, **{"Retry-After": "3"}), 0) == 3.0

    def test_wait_ignores_retry_after_on_5xx(self) -> None:
        policy = RetryPolicy.fixed(5, 2.0)
        assert policy.compute_wait(_response(503, **{"Retry-After": "9"}), 0) == 2.0

    def test_wait_falls_back_for_non_integer_retry_after(self) -> None:
        policy = RetryPolicy.fixed(5, 2.0)
        assert policy.compute_wait(_response(429, **{"Retry-After": "soon"}), 0) == 2.0

    def test_wait_is_flat(self) -> None:
        policy = RetryPolicy.fixed(5, 1.5)
        assert [policy.compute_wait(_response(500), i) for i in range(4)] == [1.5] * 4


# ---------------------------------------------------------------------------
# TenacityRetryPolicy
# ---------------------------------------------------------------------------


class TestTenacityRetryPolicy:
    def test_two_rate_limits_then_success(self) -> None:
        sleep = SleepRecorder()
        call = _sequence(_response(429), _response(429), _response(200))
        result = TenacityRetryPolicy(RetryPolicy.fixed(5, 2.0), sleep=sleep).execute(call)
        assert result.status_code == 200
        assert sleep.waits == [2.0, 2.0]
        assert call.count == 3

    def test_retry_after_overrides_wait(self) -> None:
        sleep = SleepRecorder()
        call = _sequence(_response(429, **{"Retry-After": "3"}), _response(200))
        result = TenacityRetryPolicy(RetryPolicy.fixed(5, 2.0), sleep=sleep).execute(call)
        assert result.status_code == 200
        assert sleep.waits == [3.0]

    def test_non_retryable_returns_immediately(self) -> None:
        sleep = SleepRecorder()
        call = _sequence(_response(422), _response(200))
        result = TenacityRetryPolicy(RetryPolicy.fixed(5, 2.0), sleep=sleep).execute(call)
        assert result.status_code == 422
        assert sleep.waits == []
        assert call.count == 1

    def test_exhausted_status_returns_last_response(self) -> None:
        sleep = SleepRecorder()
        call = _sequence(_response(500), _response(502), _response(503))
        result = TenacityRetryPolicy(RetryPolicy.fixed(2, 0.1), sleep=sleep).execute(call)
        assert result.status_code == 503
        assert sleep.waits == [0.1, 0.1]
        assert call.count == 3

    def test_exhausted_error_reraises_without_handler(self) -> None:
        call = _sequence(httpx.ConnectError("a"), httpx.ConnectError("b"))
        with pytest.raises(httpx.ConnectError, match="b"):
            TenacityRetryPolicy(RetryPolicy.fixed(1, 0.0), sleep=SleepRecorder()).execute(call)

    def test_on_exhausted_result_is_returned(self) -> None:
        call = _sequence(_response(500))
        policy = TenacityRetryPolicy(
            RetryPolicy(), sleep=SleepRecorder(), on_exhausted=lambda state: "exhausted"
        )
        assert policy.execute(call) == "exhausted"

    def test_non_retryable_exception_propagates(self) -> None:
        call = _sequence(KeyError("k"), _response(200))
        with pytest.raises(KeyError):
            TenacityRetryPolicy(RetryPolicy.fixed(3, 0.0), sleep=SleepRecorder()).execute(call)
        assert call.count == 1

    def test_transport_error_then_success(self) -> None:
        sleep = SleepRecorder()
        call = _sequence(httpx.ReadTimeout("slow"), _response(200))
        result = TenacityRetryPolicy(RetryPolicy.fixed(1, 0.5), sleep=sleep).execute(call)
        assert result.status_code == 200
        assert sleep.waits == [0.5]

    def test_hooks_are_called(self) -> None:
        before: list[int] = []
        before_sleep: list[float] = []

        def on_before(state: tenacity.RetryCallState) -> None:
            before.append(state.attempt_number)

        def on_before_sleep(state: tenacity.RetryCallState) -> None:
            before_sleep.append(state.next_action.sleep)

        call = _sequence(_response(500), _response(200))
        TenacityRetryPolicy(
            RetryPolicy.fixed(3, 1.0),
            sleep=SleepRecorder(),
            before=on_before,
            before_sleep=on_before_sleep,
        ).execute(call)
        assert before == [1, 2]
        assert before_sleep == [1.0]

    def test_raising_before_hook_stops_loop(self) -> None:
        def stop(state: tenacity.RetryCallState) -> None:
            if state.attempt_number > 1:
                raise RuntimeError("cancelled")

        call = _sequence(_response(500), _response(200))
        with pytest.raises(RuntimeError, match="cancelled"):
            TenacityRetryPolicy(RetryPolicy.fixed(3, 0.0), sleep=SleepRecorder(), before=stop).execute(call)
        assert call.count == 1

    def test_zero_retries_single_attempt(self) -> None:
        call = _sequence(_response(503), _response(200))
        result = TenacityRetryPolicy(RetryPolicy(), sleep=SleepRecorder()).execute(call)
        assert result.status_code == 503
        assert call.count == 1
