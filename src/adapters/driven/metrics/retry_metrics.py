"""Per-step retry accounting for the sender loop."""

from __future__ import annotations

import statistics
from collections import deque

from src.ports.metrics import RetryMetricsPort, StepAttemptDto

__all__ = ["RetryMetrics"]


class RetryMetrics(RetryMetricsPort):
    """Counts failed attempts per step number.

    Since a failed step is retried with the same number, consecutive
    failures of one number form a streak. When the number is finally
    delivered, its streak becomes the "retries before success" sample.

    Tracks:
    - Delivered steps and failed attempts in total.
    - The open streak of the step currently being retried.
    - Retries before success for recent deliveries (sliding window).
    - The step that needed the most retries so far.

    Not thread-safe; create one instance per sender.
    """

    def __init__(self, *, window_size: int = 100) -> None:
        """Initialize collector.

        Args:
            window_size: Number of recent deliveries kept for the average.
        """
        self._retries: deque[int] = deque(maxlen=window_size)
        self.delivered: int = 0
        self.failed: int = 0
        self.streak: int = 0
        self.worst_number: int | None = None
        self.worst_retries: int = 0
        self._current: int | None = None

    def update(self, attempt: StepAttemptDto) -> None:
        """Record a step attempt.

        Args:
            attempt: Attempted step number and its outcome.
        """
        if attempt.number != self._current:
            self._current = attempt.number
            self.streak = 0

        if attempt.is_failed:
            self.failed += 1
            self.streak += 1
            return

        self.delivered += 1
        self._retries.append(self.streak)
        if self.worst_number is None or self.streak > self.worst_retries:
            self.worst_number = attempt.number
            self.worst_retries = self.streak
        self.streak = 0

    def __str__(self) -> str:
        """Return one-line summary for logging."""
        if self._current is None:
            return "Retry metrics: no attempts yet"

        avg = statistics.fmean(self._retries) if self._retries else 0.0
        return (
            f"step=#{self._current} | "
            f"delivered={self.delivered} | "
            f"failed={self.failed} | "
            f"streak={self.streak} | "
            f"retries avg={avg:.2f} max={self.worst_retries} (#{self.worst_number})"
        )
