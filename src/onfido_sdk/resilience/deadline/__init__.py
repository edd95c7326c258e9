"""Resilience – cancellation and deadline propagation."""
from onfido_sdk.resilience.deadline.context import Context, DeadlineContext
from onfido_sdk.resilience.deadline.deadline import Deadline

__all__ = ["Context", "Deadline", "DeadlineContext"]
