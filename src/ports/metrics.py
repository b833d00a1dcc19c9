"""Retry metrics port definition (interface and DTO)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

__all__ = ["StepAttemptDto", "RetryMetricsPort"]


@dataclass(slots=True, frozen=True)
class StepAttemptDto:
    """Outcome of one attempt to deliver a step event.

    Attributes:
        number: Step sequence number that was attempted.
        is_failed: True if the dispatch raised a send error.
    """

    number: int
    is_failed: bool = False


class RetryMetricsPort(Protocol):
    """Interface for tracking how often step events had to be retried.

    Core calls update() after each step attempt, in attempt order.
    """

    def update(self, attempt: StepAttemptDto, /) -> None:
        """Record a finished step attempt.

        Args:
            attempt: The attempt to record.
        """
        ...

    def __str__(self) -> str:
        """Return concise textual summary for humans."""
        ...
