"""Error taxonomy for the prober sender."""

__all__ = [
    "ProberError",
    "EnvelopeError",
    "SendError",
    "UnsupportedEndpointError",
    "DeliveryError",
    "FinishedEventError",
]


class ProberError(Exception):
    """Base class for all prober errors."""


class EnvelopeError(ProberError):
    """Envelope could not be built or failed validation.

    Indicates a payload/schema mismatch or a broken environment, so it is
    never retried.
    """


class SendError(ProberError):
    """Envelope could not be dispatched. Transient for the send loop."""


class UnsupportedEndpointError(SendError):
    """No registered transport supports the given endpoint.

    Attributes:
        endpoint: The endpoint value nobody claimed.
    """

    def __init__(self, endpoint: object) -> None:
        self.endpoint = endpoint
        super().__init__(
            "given endpoint isn't supported by any registered event sender: "
            f"endpoint is {endpoint!r}"
        )


class DeliveryError(SendError):
    """Transport failed to deliver or the receiver did not acknowledge."""


class FinishedEventError(ProberError):
    """Terminal finished event could not be delivered during shutdown."""
