"""Tests for main application entrypoint."""

from unittest.mock import AsyncMock, Mock, patch

import pytest

from src.core.errors import FinishedEventError
from src.main import main

__all__ = []


def make_config() -> Mock:
    config = Mock()
    config.address = "http://localhost:22111"
    config.interval_sec = 0.01
    config.cooldown_sec = 0.1
    return config


@pytest.mark.asyncio
async def test_main_starts_and_runs_successfully() -> None:
    """Main should wire settings, registry and sender and run the loop."""
    with (
        patch("src.main.configure_logs"),
        patch("src.main.load_settings", return_value=make_config()),
        patch("src.main.make_stop_on_sigterm") as mock_stop,
        patch("src.main.Sender") as mock_sender_class,
    ):
        mock_sender = mock_sender_class.return_value
        mock_sender.send_continually = AsyncMock()
        mock_sender.counter = 3

        await main()

    mock_sender.send_continually.assert_awaited_once_with(stop_fn=mock_stop.return_value)
    settings = mock_sender_class.call_args.kwargs["settings"]
    assert settings.address == "http://localhost:22111"
    assert settings.interval_sec == 0.01
    assert settings.cooldown_sec == 0.1


@pytest.mark.asyncio
async def test_main_aborts_on_configuration_error() -> None:
    """Main should not start sending when configuration is invalid."""
    with (
        patch("src.main.configure_logs"),
        patch("src.main.load_settings", side_effect=RuntimeError("Missing SENDER_ADDRESS")),
        patch("src.main.Sender") as mock_sender_class,
        patch("src.main.logger") as mock_logger,
    ):
        await main()

    mock_sender_class.assert_not_called()
    mock_logger.error.assert_called()


@pytest.mark.asyncio
async def test_main_exits_with_error_on_fatal_sender_error() -> None:
    """Fatal sender errors should be logged and exit with status 1."""
    with (
        patch("src.main.configure_logs"),
        patch("src.main.load_settings", return_value=make_config()),
        patch("src.main.make_stop_on_sigterm"),
        patch("src.main.Sender") as mock_sender_class,
        patch("src.main.logger") as mock_logger,
    ):
        mock_sender_class.return_value.send_continually = AsyncMock(
            side_effect=FinishedEventError("finished lost")
        )

        with pytest.raises(SystemExit) as exc_info:
            await main()

    assert exc_info.value.code == 1
    mock_logger.critical.assert_called_once()
