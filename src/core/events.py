"""Payload schemas carried by prober envelopes."""

from pydantic import BaseModel, Field

__all__ = ["STEP_TYPE", "FINISHED_TYPE", "Step", "Finished"]

STEP_TYPE = "dev.knative.eventing.wathola.step"
FINISHED_TYPE = "dev.knative.eventing.wathola.finished"


class Step(BaseModel):
    """One successful probe iteration.

    Attributes:
        number: Sequence number, starting at 1.
    """

    number: int = Field(..., ge=1)


class Finished(BaseModel):
    """Summary sent once on shutdown.

    Attributes:
        count: Total number of step events that were delivered.
    """

    count: int = Field(..., ge=0)
