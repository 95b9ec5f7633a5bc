"""Core catalog entities: tracks, collections and merchandise."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from streaming_simulator.domain.shared.constants import PlaybackConstants
from streaming_simulator.domain.shared.types import (
    DurationSeconds,
    NonEmptyStr,
    PriceInt,
    TrackNameStr,
    UsernameStr,
)


class TrackKind(Enum):
    """What a playable item is."""

    SONG = "song"
    EPISODE = "episode"
    AD = "ad"


class CollectionKind(Enum):
    """Ordered collections a listener can load."""

    ALBUM = "album"
    PLAYLIST = "playlist"
    PODCAST = "podcast"


class Track(BaseModel):
    """Immutable catalog item: a song, a podcast episode or the ad pseudo-track.

    Listen counters are not stored here; they live in the ListenLedger keyed
    by the track so that catalog items stay shareable between users.
    """

    model_config = ConfigDict(frozen=True)

    name: TrackNameStr
    artist: UsernameStr
    duration_seconds: DurationSeconds
    genre: str = ""
    album: str | None = None
    kind: TrackKind = TrackKind.SONG

    @property
    def is_song(self) -> bool:
        return self.kind == TrackKind.SONG


AD_BREAK = Track(
    name=PlaybackConstants.AD_BREAK_NAME,
    artist=PlaybackConstants.AD_BREAK_OWNER,
    duration_seconds=0,
    kind=TrackKind.AD,
)
"""Zero-duration pseudo-track spliced into a source by an ad break."""


class TrackCollection(BaseModel):
    """An album, playlist or podcast: an ordered, named sequence of tracks."""

    model_config = ConfigDict(frozen=True)

    name: TrackNameStr
    owner: UsernameStr
    kind: CollectionKind
    tracks: tuple[Track, ...] = Field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.tracks


class Merchandise(BaseModel):
    """An item an artist sells on their page."""

    model_config = ConfigDict(frozen=True)

    name: NonEmptyStr
    artist: UsernameStr
    price: PriceInt
    description: str = ""
