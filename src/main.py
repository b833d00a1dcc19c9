"""Application entrypoint."""

import asyncio
import logging

from src.adapters.driven.config.settings import load_settings
from src.adapters.driven.http.transport import HttpTransport
from src.adapters.driven.logging.logging_config import configure_logs
from src.adapters.driven.metrics.retry_metrics import RetryMetrics
from src.adapters.driving.signals import make_stop_on_sigterm
from src.core.errors import ProberError
from src.core.registry import TransportRegistry
from src.core.sender import Sender
from src.ports.settings import SettingsPort

__all__ = ["main"]

logger = logging.getLogger(__name__)


async def main() -> None:
    """Start the prober sender.

    Startup sequence:
    1. Configure logging.
    2. Load and validate configuration.
    3. Send step events until SIGTERM/SIGINT.
    4. Send the finished event and exit.

    Raises:
        SystemExit: With status 1 when an envelope cannot be built or the
            finished event cannot be delivered.
    """
    configure_logs()
    logger.info("Starting prober sender...")

    try:
        config = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(
            "Configuration error: %s\n"
            "Hint: check SENDER_ADDRESS, SENDER_INTERVAL_IN_SECONDS and "
            "SENDER_COOLDOWN_IN_SECONDS.",
            exc,
        )
        return

    # Wrap config into port so core depends on interface (hexagonal)
    settings_port = SettingsPort(
        address=config.address,
        interval_sec=config.interval_sec,
        cooldown_sec=config.cooldown_sec,
    )

    registry = TransportRegistry(fallback=HttpTransport)
    sender = Sender(settings=settings_port, registry=registry, metrics=RetryMetrics())

    try:
        await sender.send_continually(stop_fn=make_stop_on_sigterm())
    except ProberError as e:
        logger.critical(f"Prober sender aborted: {e}", exc_info=True)
        raise SystemExit(1) from e

    logger.info(f"Prober sender stopped after {sender.counter} step events ({sender.metrics}).")


if __name__ == "__main__":
    asyncio.run(main())
