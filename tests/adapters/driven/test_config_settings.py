"""Tests for configuration loading and validation."""

import pytest
from pydantic import ValidationError

from src.adapters.driven.config.settings import (
    DEFAULT_COOLDOWN_IN_SECONDS,
    DEFAULT_INTERVAL_IN_SECONDS,
    Settings,
    load_settings,
)

__all__ = []


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    """Start every test without sender variables set."""
    for name in ("SENDER_ADDRESS", "SENDER_INTERVAL_IN_SECONDS", "SENDER_COOLDOWN_IN_SECONDS"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults() -> None:
    """Interval and cooldown should fall back to defaults."""
    settings = Settings(address="http://localhost:22111")

    assert settings.interval_sec == DEFAULT_INTERVAL_IN_SECONDS
    assert settings.cooldown_sec == DEFAULT_COOLDOWN_IN_SECONDS


def test_settings_rejects_invalid_http_address() -> None:
    """HTTP addresses should be validated as URLs."""
    with pytest.raises(ValidationError, match="Invalid HTTP address"):
        Settings(address="http://")


def test_settings_accepts_custom_scheme_address() -> None:
    """Non-HTTP addresses are left to custom transports."""
    settings = Settings(address="mem://capture")

    assert settings.address == "mem://capture"


def test_settings_rejects_non_positive_durations() -> None:
    """Interval and cooldown must be positive."""
    with pytest.raises(ValidationError):
        Settings(address="http://localhost:22111", interval_sec=0)
    with pytest.raises(ValidationError):
        Settings(address="http://localhost:22111", cooldown_sec=-1)


def test_settings_load_settings_success(monkeypatch) -> None:
    """Load Settings should create Settings object when the input is valid."""
    monkeypatch.setenv("SENDER_ADDRESS", "http://example.com")
    monkeypatch.setenv("SENDER_INTERVAL_IN_SECONDS", "0.5")
    monkeypatch.setenv("SENDER_COOLDOWN_IN_SECONDS", "2")

    settings = load_settings()

    assert isinstance(settings, Settings)
    assert settings.address == "http://example.com"
    assert settings.interval_sec == 0.5
    assert settings.cooldown_sec == 2.0


def test_settings_load_settings_requires_address() -> None:
    """Missing address should raise RuntimeError."""
    with pytest.raises(RuntimeError, match="SENDER_ADDRESS"):
        load_settings()


@pytest.mark.parametrize("raw", ["-1", "0", "soon", "inf", "nan", "-inf"])
def test_settings_load_settings_rejects_bad_interval(monkeypatch, raw: str) -> None:
    """Invalid interval should raise RuntimeError."""
    monkeypatch.setenv("SENDER_ADDRESS", "http://example.com")
    monkeypatch.setenv("SENDER_INTERVAL_IN_SECONDS", raw)

    with pytest.raises(
        RuntimeError, match="SENDER_INTERVAL_IN_SECONDS must be a positive finite number"
    ):
        load_settings()


@pytest.mark.parametrize("raw", ["inf", "nan"])
def test_settings_load_settings_rejects_non_finite_cooldown(monkeypatch, raw: str) -> None:
    """A cooldown that never ends would block shutdown forever."""
    monkeypatch.setenv("SENDER_ADDRESS", "http://example.com")
    monkeypatch.setenv("SENDER_COOLDOWN_IN_SECONDS", raw)

    with pytest.raises(RuntimeError, match="SENDER_COOLDOWN_IN_SECONDS"):
        load_settings()


def test_settings_rejects_infinite_durations() -> None:
    """Model validation should refuse infinite interval and cooldown."""
    with pytest.raises(ValidationError):
        Settings(address="http://localhost:22111", interval_sec=float("inf"))
    with pytest.raises(ValidationError):
        Settings(address="http://localhost:22111", cooldown_sec=float("inf"))
