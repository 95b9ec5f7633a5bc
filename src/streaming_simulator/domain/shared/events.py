"""Base class for domain events emitted by the simulation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Events are immutable records of something that happened during a
    simulation step. They carry no wall-clock time: ordering comes from the
    sequence in which the engine returns them.
    """

    model_config = ConfigDict(frozen=True)
