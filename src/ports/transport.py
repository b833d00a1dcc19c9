"""Transport port definition (interface)."""

from __future__ import annotations

from typing import Protocol

from src.core.envelope import Envelope

__all__ = ["TransportPort"]


class TransportPort(Protocol):
    """Interface for pluggable envelope delivery mechanisms.

    The endpoint is an opaque descriptor; each implementation decides which
    shapes it understands through supports().
    """

    def supports(self, endpoint: object, /) -> bool:
        """Tell whether this transport can deliver to endpoint.

        Args:
            endpoint: Untyped endpoint descriptor.

        Returns:
            True if deliver() may be called with this endpoint.
        """
        ...

    async def deliver(self, envelope: Envelope, endpoint: object, /) -> None:
        """Deliver envelope to endpoint.

        Args:
            envelope: Validated envelope to send.
            endpoint: Endpoint previously accepted by supports().

        Raises:
            SendError: If delivery failed or was not acknowledged.
        """
        ...
