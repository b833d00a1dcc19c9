"""Tests for console logging setup."""

import logging
from collections.abc import Iterator

import pytest

from src.adapters.driven.logging.logging_config import configure_logs

__all__ = []


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore root handlers and levels touched by configure_logs."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    root_level = root.level
    app_level = logging.getLogger("src").level
    yield
    root.handlers[:] = handlers
    root.setLevel(root_level)
    logging.getLogger("src").setLevel(app_level)


def test_configure_logs_is_idempotent(restore_logging) -> None:
    """Repeated calls should install a single console handler."""
    configure_logs()
    configure_logs()

    names = [h.get_name() for h in logging.getLogger().handlers]
    assert names.count("prober-console") == 1


def test_configure_logs_sets_levels(restore_logging) -> None:
    """Application level is configurable; frameworks stay at WARNING."""
    configure_logs(app_level=logging.INFO)

    assert logging.getLogger("src").level == logging.INFO
    assert logging.getLogger("aiohttp").level == logging.WARNING
    assert logging.getLogger().level == logging.INFO
