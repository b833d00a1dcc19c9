"""Event envelope construction and validation."""

import socket
import uuid
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from src.core.errors import EnvelopeError

__all__ = ["Envelope", "new_envelope", "new_event_id", "CONTENT_TYPE"]

CONTENT_TYPE = "application/json"
SOURCE_TEMPLATE = "knative://{host}/wathola/sender"


class Envelope(BaseModel):
    """CloudEvents-shaped wrapper around a JSON payload.

    Attributes:
        id: Unique event identifier.
        type: Logical type tag (step, finished, ...).
        source: URI identifying the emitting host.
        time: Creation timestamp (timezone-aware).
        datacontenttype: Media type of ``data``.
        specversion: CloudEvents spec version.
        data: JSON-compatible payload.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1)
    time: datetime
    datacontenttype: str = CONTENT_TYPE
    specversion: Literal["1.0"] = "1.0"
    data: Any = None

    def to_json(self) -> str:
        """Render the structured-mode wire representation."""
        return self.model_dump_json()


def new_event_id() -> str:
    """Generate a fresh event id."""
    return str(uuid.uuid4())


def new_envelope(payload: Any, type_tag: str) -> Envelope:
    """Wrap payload into a validated envelope.

    Args:
        payload: Pydantic model or any JSON-compatible value.
        type_tag: Non-empty event type.

    Returns:
        Envelope that passed validation.

    Raises:
        EnvelopeError: If the host name is unavailable, the payload is not
            JSON-serializable, or the envelope fails validation.
    """
    try:
        host = socket.gethostname()
    except OSError as e:
        raise EnvelopeError(f"Cannot resolve host name: {e}") from e

    try:
        if isinstance(payload, BaseModel):
            data = payload.model_dump(mode="json")
        else:
            data = to_jsonable_python(payload)
    except PydanticSerializationError as e:
        raise EnvelopeError(f"Payload is not JSON-serializable: {e}") from e

    try:
        return Envelope(
            id=new_event_id(),
            type=type_tag,
            source=SOURCE_TEMPLATE.format(host=host),
            time=datetime.now(timezone.utc),
            data=data,
        )
    except ValidationError as e:
        raise EnvelopeError(f"Invalid {type_tag!r} envelope: {e}") from e
