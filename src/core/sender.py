"""Continual sender emitting sequenced step events until stopped."""

import asyncio
import enum
import logging
from collections.abc import Callable

from src.core.envelope import new_envelope
from src.core.errors import FinishedEventError, SendError
from src.core.events import FINISHED_TYPE, STEP_TYPE, Finished, Step
from src.core.registry import TransportRegistry
from src.ports.metrics import RetryMetricsPort, StepAttemptDto
from src.ports.settings import SettingsPort

__all__ = ["Sender", "SenderState"]

logger = logging.getLogger(__name__)


class SenderState(enum.Enum):
    """Lifecycle of a sender."""

    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"


class Sender:
    """Sends step events continually and a finished event on shutdown.

    The counter holds the number of step events delivered so far. It is
    only touched by the coroutine running send_continually(), so sends are
    strictly serial and need no locking.
    """

    def __init__(
        self,
        settings: SettingsPort,
        registry: TransportRegistry,
        metrics: RetryMetricsPort | None = None,
    ) -> None:
        """Initialize sender.

        Args:
            settings: Endpoint address, interval and cooldown.
            registry: Transports used to dispatch envelopes.
            metrics: Optional collector updated after each step attempt.
        """
        self.settings = settings
        self.registry = registry
        self.metrics = metrics
        self.counter = 0
        self.state = SenderState.RUNNING
        self._finished_sent = False

    async def send_continually(self, stop_fn: Callable[[], bool]) -> None:
        """Run the send loop until stop_fn() returns True.

        Termination is checked once per iteration, never mid-send or
        mid-sleep, so shutdown may take up to one interval or cooldown.
        Failed steps are retried forever with the fixed cooldown.
        Once shut down, the sender stays shut down: calling this again
        neither restarts the loop nor sends another finished event.

        Args:
            stop_fn: Callable that returns True once termination is requested.

        Raises:
            EnvelopeError: If an envelope cannot be built.
            FinishedEventError: If the finished event cannot be delivered.
        """
        while self.state is SenderState.RUNNING:
            if stop_fn():
                self.state = SenderState.SHUTTING_DOWN
                break
            try:
                await self.send_step()
            except SendError as e:
                logger.warning(
                    f"Could not send step event, retry in {self.settings.cooldown_sec}s: {e}"
                )
                await asyncio.sleep(self.settings.cooldown_sec)
            else:
                await asyncio.sleep(self.settings.interval_sec)

        await self.send_finished()

    async def send_step(self) -> None:
        """Send the next step event and advance the counter on success.

        Raises:
            SendError: If dispatch failed; the counter is left untouched.
            EnvelopeError: If the envelope cannot be built.
        """
        step = Step(number=self.counter + 1)
        envelope = new_envelope(step, STEP_TYPE)
        endpoint = self.settings.address
        logger.info(f"Sending step event #{step.number} to {endpoint}")

        try:
            await self.registry.send_event(envelope, endpoint)
        except SendError:
            self._record(step.number, failed=True)
            raise

        self._record(step.number, failed=False)
        self.counter += 1

    async def send_finished(self) -> None:
        """Send the finished event once, unless nothing was ever sent.

        Raises:
            FinishedEventError: If dispatch failed. There is no retry window
                left at this point.
        """
        if self._finished_sent:
            return
        if self.counter == 0:
            logger.info("No step events were sent, skipping finished event")
            return

        self._finished_sent = True
        finished = Finished(count=self.counter)
        envelope = new_envelope(finished, FINISHED_TYPE)
        endpoint = self.settings.address
        logger.info(f"Sending finished event (count: {finished.count}) to {endpoint}")
        try:
            await self.registry.send_event(envelope, endpoint)
        except SendError as e:
            raise FinishedEventError(
                f"Could not send finished event (count: {finished.count}): {e}"
            ) from e

    def _record(self, number: int, failed: bool) -> None:
        if self.metrics is None:
            return
        self.metrics.update(StepAttemptDto(number=number, is_failed=failed))
        logger.debug(f"Retry metrics: {self.metrics}")
