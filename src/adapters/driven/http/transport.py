"""Default HTTP transport delivering envelopes with aiohttp."""

import asyncio
import logging

import aiohttp

from src.core.envelope import Envelope
from src.core.errors import DeliveryError

__all__ = ["HttpTransport", "STRUCTURED_CONTENT_TYPE"]

logger = logging.getLogger(__name__)

STRUCTURED_CONTENT_TYPE = "application/cloudevents+json"
HTTP_PREFIXES = ("http://", "https://")


def is_acknowledged(status: int) -> bool:
    """Tell whether an HTTP status acknowledges the event (2xx)."""
    return 200 <= status < 300


class HttpTransport:
    """Transport POSTing structured-mode events to HTTP(S) URLs.

    A new client session is opened per delivery. No retry is done here;
    retrying is the caller's job.
    """

    def supports(self, endpoint: object) -> bool:
        """Accept string endpoints starting with http:// or https://.

        Args:
            endpoint: Untyped endpoint descriptor.

        Returns:
            True for HTTP(S) URL strings, False for anything else.
        """
        return isinstance(endpoint, str) and endpoint.startswith(HTTP_PREFIXES)

    async def _post(self, url: str, body: bytes) -> int:
        """Single HTTP POST of an event body.

        Args:
            url: Target URL.
            body: Serialized envelope.

        Returns:
            HTTP status code of the response.

        Raises:
            aiohttp exceptions: Network errors.
            asyncio.TimeoutError: Session timeout.
        """
        headers = {"Content-Type": STRUCTURED_CONTENT_TYPE}
        async with aiohttp.ClientSession() as session:
            async with session.post(url, data=body, headers=headers) as resp:
                return resp.status

    async def deliver(self, envelope: Envelope, endpoint: object) -> None:
        """POST envelope to endpoint and require a 2xx acknowledgement.

        Args:
            envelope: Validated envelope to send.
            endpoint: HTTP(S) URL string.

        Raises:
            DeliveryError: On network failure or a non-2xx response.
        """
        url = str(endpoint)
        try:
            status = await self._post(url, envelope.to_json().encode("utf-8"))
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise DeliveryError(f"Failed to deliver event {envelope.id} to {url}: {e!r}") from e

        if not is_acknowledged(status):
            raise DeliveryError(
                f"Event {envelope.id} not acknowledged by {url}: HTTP status {status}"
            )
        logger.debug(f"Event {envelope.id} acknowledged by {url} (status {status})")
