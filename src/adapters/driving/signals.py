"""Signal handling for graceful shutdown."""

import asyncio
import logging
import signal
from collections.abc import Callable

__all__ = ["make_stop_on_sigterm"]

logger = logging.getLogger(__name__)


def make_stop_on_sigterm() -> Callable[[], bool]:
    """Create SIGTERM/SIGINT-based stop flag for the sender loop.

    Registers handlers that set an asyncio.Event, returning an
    is_set-style callable for the loop to poll between iterations.
    Only the first signal is logged; later ones are no-ops.

    Returns:
        Callable that returns True once SIGTERM or SIGINT has been received.
    """
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()

    def handle_signal(sig: signal.Signals) -> None:
        """Set the stop event on the first received signal."""
        if stop.is_set():
            return
        logger.info(f"{sig.name} signal received, closing")
        stop.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, handle_signal, sig)

    return stop.is_set
