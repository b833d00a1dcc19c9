"""Settings port definition (DTO)."""

from dataclasses import dataclass

__all__ = ["SettingsPort"]


@dataclass
class SettingsPort:
    """Runtime settings for the sender loop.

    Decouples core from concrete configuration sources, enabling
    easy testing and implementation swapping.

    Attributes:
        address: Endpoint descriptor where events are sent.
        interval_sec: Seconds to wait after a successful send.
        cooldown_sec: Seconds to wait after a failed send before retrying.
    """

    address: object
    interval_sec: float
    cooldown_sec: float
