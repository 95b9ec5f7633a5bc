"""Domain events for the listening bounded context."""

from __future__ import annotations

from typing import Literal

from streaming_simulator.domain.shared.events import DomainEvent
from streaming_simulator.domain.shared.types import NonNegativeInt, TrackNameStr, UsernameStr


class ListenEvent(DomainEvent):
    """One playthrough attributed to a user.

    ``ordinal`` is the ledger-wide sequence number of the listen, so events
    from different users can be ordered after the fact.
    """

    event_type: Literal["ListenEvent"] = "ListenEvent"
    user_id: UsernameStr
    track_name: TrackNameStr
    artist: UsernameStr
    ordinal: NonNegativeInt
