"""
Playback Bounded Context

Loaded sources, repeat/shuffle state and the time simulation step.
"""

from streaming_simulator.domain.playback.engine import PlaybackEngine, PlayerStatus
from streaming_simulator.domain.playback.events import (
    AdBreakCrossed,
    PlaybackEvent,
    SourceExhausted,
)
from streaming_simulator.domain.playback.source import PlaybackSource
from streaming_simulator.domain.playback.value_objects import (
    CursorMove,
    PodcastBookmark,
    RepeatMode,
    SourceKind,
)

__all__ = [
    # Engine
    "PlaybackEngine",
    "PlayerStatus",
    "PlaybackSource",
    # Value Objects
    "CursorMove",
    "PodcastBookmark",
    "RepeatMode",
    "SourceKind",
    # Events
    "AdBreakCrossed",
    "PlaybackEvent",
    "SourceExhausted",
]
