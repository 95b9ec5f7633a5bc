"""Immutable value objects for the playback bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from streaming_simulator.domain.catalog.entities import CollectionKind


class SourceKind(Enum):
    """What kind of unit is loaded in a player."""

    TRACK = "song"
    PLAYLIST = "playlist"
    ALBUM = "album"
    PODCAST = "podcast"

    @property
    def supports_shuffle(self) -> bool:
        return self in {SourceKind.PLAYLIST, SourceKind.ALBUM}

    @property
    def supports_seek(self) -> bool:
        return self == SourceKind.PODCAST

    @property
    def is_single_track(self) -> bool:
        return self == SourceKind.TRACK

    @classmethod
    def from_collection_kind(cls, kind: CollectionKind) -> SourceKind:
        return cls(kind.value)


class CursorMove(Enum):
    """What happens to the cursor when the current track ends."""

    EXHAUST = "exhaust"  # nothing left to play
    REPLAY = "replay"  # same index again
    STEP = "step"  # next index, exhaust after the last
    WRAP = "wrap"  # next index, back to the first after the last


class RepeatMode(Enum):
    """Repeat setting of a player. The value is the label shown to users.

    Cycling order depends on the loaded source:

    - single track: NONE -> REPEAT_ONCE -> REPEAT_INFINITE -> NONE
    - collection or podcast: NONE -> REPEAT_ALL -> REPEAT_CURRENT -> NONE
    """

    NONE = "no repeat"
    REPEAT_ONCE = "repeat once"
    REPEAT_ALL = "repeat all"
    REPEAT_INFINITE = "repeat infinite"
    REPEAT_CURRENT = "repeat current song"

    @property
    def label(self) -> str:
        return self.value

    def next_mode(self, kind: SourceKind) -> RepeatMode:
        """Cycle to the next repeat mode for a source of ``kind``."""
        return _REPEAT_TRANSITIONS.get((self, kind), RepeatMode.NONE)

    def cursor_move(self, kind: SourceKind) -> CursorMove:
        """How the cursor moves at a track boundary under this mode."""
        return _CURSOR_MOVES[(self, kind.is_single_track)]


_TRACK_CYCLE = {
    RepeatMode.NONE: RepeatMode.REPEAT_ONCE,
    RepeatMode.REPEAT_ONCE: RepeatMode.REPEAT_INFINITE,
    RepeatMode.REPEAT_INFINITE: RepeatMode.NONE,
}

_COLLECTION_CYCLE = {
    RepeatMode.NONE: RepeatMode.REPEAT_ALL,
    RepeatMode.REPEAT_ALL: RepeatMode.REPEAT_CURRENT,
    RepeatMode.REPEAT_CURRENT: RepeatMode.NONE,
}

_REPEAT_TRANSITIONS: dict[tuple[RepeatMode, SourceKind], RepeatMode] = {
    (mode, kind): following
    for kind in SourceKind
    for mode, following in (_TRACK_CYCLE if kind.is_single_track else _COLLECTION_CYCLE).items()
}

# Keyed by (mode, source is a single track). REPEAT_ALL and REPEAT_INFINITE
# both wrap on collections; only their labels differ.
_CURSOR_MOVES: dict[tuple[RepeatMode, bool], CursorMove] = {
    (RepeatMode.NONE, True): CursorMove.EXHAUST,
    (RepeatMode.REPEAT_ONCE, True): CursorMove.EXHAUST,
    (RepeatMode.REPEAT_INFINITE, True): CursorMove.REPLAY,
    (RepeatMode.REPEAT_CURRENT, True): CursorMove.REPLAY,
    (RepeatMode.REPEAT_ALL, True): CursorMove.REPLAY,
    (RepeatMode.NONE, False): CursorMove.STEP,
    (RepeatMode.REPEAT_ONCE, False): CursorMove.REPLAY,
    (RepeatMode.REPEAT_ALL, False): CursorMove.WRAP,
    (RepeatMode.REPEAT_INFINITE, False): CursorMove.WRAP,
    (RepeatMode.REPEAT_CURRENT, False): CursorMove.REPLAY,
}


@dataclass(frozen=True)
class PodcastBookmark:
    """Where a listener left a podcast: episode index and seconds into it."""

    name: str
    index: int
    elapsed_seconds: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Bookmark index cannot be negative")
        if self.elapsed_seconds < 0:
            raise ValueError("Bookmark position cannot be negative")
