"""Console logging setup for the prober sender."""

import logging

__all__ = ["configure_logs"]

_HANDLER_NAME = "prober-console"


def configure_logs(app_level: int = logging.DEBUG) -> None:
    """Configure console logging.

    Sets up:
    - Root logger at INFO level with one console handler. Calling this
      again (entrypoint and health check share it) adds no duplicate.
    - Framework loggers (aiohttp, asyncio) at WARNING level.
    - Application loggers (src) at app_level. Per-step send lines are
      INFO and retry metrics are DEBUG, so INFO drops the metrics.

    Args:
        app_level: Level for the application loggers.
    """
    root = logging.getLogger()
    root.setLevel(logging.INFO)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        log_format = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s"
        date_format = "%d/%m/%y %H:%M:%S"
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(log_format, date_format))
        root.addHandler(handler)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger("src").setLevel(app_level)
