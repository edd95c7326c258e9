"""Resilience – backoff strategies."""
from __future__ import annotations

import abc


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ConstantBackoff(BackoffStrategy):
    """Fixed delay between attempts."""

    def __init__(self, delay: float = 2.0) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self._delay = delay

    @property
    def delay(self) -> float:
        return self._delay

    def compute(self, attempt: int) -> float:  # noqa: ARG002
        return self._delay

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ConstantBackoff) and other._delay == self._delay

    def __hash__(self) -> int:
        return hash(self._delay)

    def __repr__(self) -> str:
        return f"ConstantBackoff(delay={self._delay!r})"


__all__ = ["BackoffStrategy", "ConstantBackoff"]
