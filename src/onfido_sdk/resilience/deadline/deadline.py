"""Resilience – Deadline.

Measured on the monotonic clock so wall-clock adjustments (NTP steps,
DST) neither extend nor cut short a request's time budget.
"""
from __future__ import annotations

import dataclasses
import time
from typing import Callable

Clock = Callable[[], float]


@dataclasses.dataclass(frozen=True)
class Deadline:
    """A point on *clock* after which a request context is expired."""

    expires_at: float
    clock: Clock = dataclasses.field(default=time.monotonic, compare=False, repr=False)

    @classmethod
    def after(cls, seconds: float, clock: Clock = time.monotonic) -> "Deadline":
        return cls(expires_at=clock() + seconds, clock=clock)

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, self.expires_at - self.clock())

    @property
    def is_expired(self) -> bool:
        return self.clock() >= self.expires_at


__all__ = ["Clock", "Deadline"]
