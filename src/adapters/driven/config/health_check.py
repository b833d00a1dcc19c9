"""Healthcheck validator for container orchestration."""

import logging

from src.adapters.driven.config.settings import load_settings
from src.adapters.driven.http.transport import HttpTransport
from src.adapters.driven.logging.logging_config import configure_logs

__all__ = ["main"]

logger = logging.getLogger(__name__)


def main() -> int:
    """Run health check for container orchestration.

    Validates:
    - SENDER_ADDRESS is set, and interval/cooldown are positive and finite.
    - The address can be delivered to by the standalone process. Only the
      HTTP transport is available there; other schemes need a custom
      transport registered by a harness, so every step would fail forever.

    Returns:
        0 if healthy, 1 if unhealthy.
    """
    configure_logs()

    try:
        settings = load_settings()
    except Exception as exc:
        logger.error(f"Prober sender healthcheck FAILED: {exc}")
        return 1

    if not HttpTransport().supports(settings.address):
        logger.error(
            f"Prober sender healthcheck FAILED: address {settings.address!r} is not an "
            "http:// or https:// URL and no custom transport is registered in this process"
        )
        return 1

    logger.info(f"Prober sender healthcheck OK (address={settings.address})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
