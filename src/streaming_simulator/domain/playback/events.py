"""Domain events for the playback bounded context."""

from __future__ import annotations

from typing import Literal

from streaming_simulator.domain.listening.events import ListenEvent
from streaming_simulator.domain.shared.events import DomainEvent
from streaming_simulator.domain.shared.types import NonNegativeFloat, NonEmptyStr, UsernameStr


class AdBreakCrossed(DomainEvent):
    event_type: Literal["AdBreakCrossed"] = "AdBreakCrossed"
    user_id: UsernameStr
    ad_price: NonNegativeFloat
    distributed: NonNegativeFloat = 0.0


class SourceExhausted(DomainEvent):
    event_type: Literal["SourceExhausted"] = "SourceExhausted"
    user_id: UsernameStr
    source_name: NonEmptyStr


PlaybackEvent = ListenEvent | AdBreakCrossed | SourceExhausted
"""Anything a simulation step can report back to its caller."""
