"""Ordered registry of transports with first-match dispatch."""

import logging
from collections.abc import Callable

from src.core.envelope import Envelope
from src.core.errors import UnsupportedEndpointError
from src.ports.transport import TransportPort

__all__ = ["TransportRegistry"]

logger = logging.getLogger(__name__)


class TransportRegistry:
    """Registry deciding which transport delivers an envelope.

    Transports are tried in registration order and the first one whose
    supports() accepts the endpoint gets the delivery. When nothing is
    registered, a fresh fallback transport is built for every dispatch.
    """

    def __init__(self, fallback: Callable[[], TransportPort] | None = None) -> None:
        """Initialize an empty registry.

        Args:
            fallback: Factory for the transport used while the registry is
                empty. None disables the fallback.
        """
        self._transports: list[TransportPort] = []
        self._fallback = fallback

    @property
    def transports(self) -> tuple[TransportPort, ...]:
        """Snapshot of registered transports in registration order."""
        return tuple(self._transports)

    def register(self, transport: TransportPort) -> None:
        """Append transport to the registry.

        No de-duplication is done; registration order is the only priority.

        Args:
            transport: Transport to append.
        """
        self._transports.append(transport)
        logger.debug(f"Registered transport {type(transport).__name__}")

    def _candidates(self) -> list[TransportPort]:
        if self._transports:
            return list(self._transports)
        if self._fallback is not None:
            return [self._fallback()]
        return []

    async def send_event(self, envelope: Envelope, endpoint: object) -> None:
        """Deliver envelope through the first transport supporting endpoint.

        The chosen transport's outcome is final; no other transport is tried.

        Args:
            envelope: Validated envelope to send.
            endpoint: Untyped endpoint descriptor.

        Raises:
            UnsupportedEndpointError: If no transport supports endpoint.
            SendError: If the chosen transport failed to deliver.
        """
        for transport in self._candidates():
            if transport.supports(endpoint):
                await transport.deliver(envelope, endpoint)
                return
        raise UnsupportedEndpointError(endpoint)
