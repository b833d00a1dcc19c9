"""Configuration loading from environment variables."""

import logging
import math
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, HttpUrl, TypeAdapter, field_validator

__all__ = [
    "Settings",
    "load_settings",
    "DEFAULT_INTERVAL_IN_SECONDS",
    "DEFAULT_COOLDOWN_IN_SECONDS",
]

load_dotenv()

logger = logging.getLogger(__name__)
_http_url_adapter = TypeAdapter(HttpUrl)

DEFAULT_INTERVAL_IN_SECONDS = 0.01
DEFAULT_COOLDOWN_IN_SECONDS = 0.1


class Settings(BaseModel):
    """Runtime configuration for the prober sender.

    Attributes:
        address: Endpoint that will receive events.
        interval_sec: Delay after a successful send (positive, finite).
        cooldown_sec: Delay after a failed send (positive, finite).
    """

    address: str = Field(..., min_length=1, description="Endpoint that will receive events.")
    interval_sec: float = Field(
        default=DEFAULT_INTERVAL_IN_SECONDS,
        gt=0,
        allow_inf_nan=False,
        description="Seconds between successful sends.",
    )
    cooldown_sec: float = Field(
        default=DEFAULT_COOLDOWN_IN_SECONDS,
        gt=0,
        allow_inf_nan=False,
        description="Seconds to wait before retrying a failed send.",
    )

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Validate HTTP(S) addresses as URLs.

        Other schemes are left to custom transports registered at runtime.

        Args:
            v: Address to validate.

        Returns:
            The validated address.

        Raises:
            ValueError: If an HTTP(S) address is not a valid URL.
        """
        if v.startswith(("http://", "https://")):
            try:
                _http_url_adapter.validate_python(v)
            except Exception as e:
                raise ValueError(f"Invalid HTTP address: {e}") from e
        return v


def _read_seconds(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
        if not math.isfinite(value) or value <= 0:
            raise ValueError("Must be positive and finite")
    except ValueError as e:
        raise RuntimeError(f"{name} must be a positive finite number (got: {raw})") from e
    return value


def load_settings() -> Settings:
    """Load and validate settings from the environment.

    Required environment variables:
    - SENDER_ADDRESS: Endpoint receiving the events.

    Optional:
    - SENDER_INTERVAL_IN_SECONDS: Delay after a successful send.
    - SENDER_COOLDOWN_IN_SECONDS: Delay after a failed send.

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If required env vars missing or invalid.
        ValueError: If configuration is invalid.
    """
    try:
        address = os.environ["SENDER_ADDRESS"]
    except KeyError as e:
        raise RuntimeError(f"Missing required environment variable: {e.args[0]}") from e

    settings = Settings(
        address=address,
        interval_sec=_read_seconds("SENDER_INTERVAL_IN_SECONDS", DEFAULT_INTERVAL_IN_SECONDS),
        cooldown_sec=_read_seconds("SENDER_COOLDOWN_IN_SECONDS", DEFAULT_COOLDOWN_IN_SECONDS),
    )

    logger.info(
        f"Sender configured: address={settings.address}, "
        f"interval={settings.interval_sec}s, "
        f"cooldown={settings.cooldown_sec}s"
    )

    return settings
