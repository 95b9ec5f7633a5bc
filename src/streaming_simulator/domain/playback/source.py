"""The unit loaded into a player: one track, an album/playlist, or a podcast."""

from __future__ import annotations

import random
from collections.abc import Sequence

from streaming_simulator.domain.catalog.entities import AD_BREAK, Track, TrackCollection
from streaming_simulator.domain.playback.value_objects import (
    CursorMove,
    PodcastBookmark,
    RepeatMode,
    SourceKind,
)
from streaming_simulator.domain.shared.exceptions import InvalidOperationError
from streaming_simulator.domain.shared.messages import ErrorMessages


class PlaybackSource:
    """Cursor over an ordered list of tracks plus the position inside the current one.

    The source borrows the catalog's Track objects and never copies them.
    The shuffle permutation is a list of indices into ``tracks``; when
    shuffle is on, "next" and "previous" walk the permutation instead of the
    natural order. An ad break, once inserted, is served at the next track
    boundary as a zero-duration pseudo-track without moving the cursor.
    """

    def __init__(
        self,
        kind: SourceKind,
        tracks: Sequence[Track],
        *,
        name: str,
        bookmark: PodcastBookmark | None = None,
    ) -> None:
        if not tracks:
            raise InvalidOperationError(
                operation="create source",
                current_state="empty",
                message=ErrorMessages.EMPTY_SOURCE,
            )
        for track in tracks:
            if track.duration_seconds == 0:
                raise ValueError(ErrorMessages.ZERO_DURATION_TRACK.format(name=track.name))

        self._kind = kind
        self._name = name
        self._tracks = tuple(tracks)
        self._index = 0
        self._elapsed = 0
        self._shuffle_order = list(range(len(self._tracks)))
        self._shuffle_position = 0
        self._pending_ad_price: float | None = None
        self._ad_price: float | None = None

        if bookmark is not None:
            self._index = min(bookmark.index, len(self._tracks) - 1)
            self._elapsed = min(bookmark.elapsed_seconds, self._tracks[self._index].duration_seconds)

    @classmethod
    def for_track(cls, track: Track) -> PlaybackSource:
        return cls(SourceKind.TRACK, [track], name=track.name)

    @classmethod
    def for_collection(
        cls, collection: TrackCollection, bookmark: PodcastBookmark | None = None
    ) -> PlaybackSource:
        kind = SourceKind.from_collection_kind(collection.kind)
        return cls(kind, collection.tracks, name=collection.name, bookmark=bookmark)

    # ---- Reads ----

    @property
    def kind(self) -> SourceKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def tracks(self) -> tuple[Track, ...]:
        return self._tracks

    @property
    def index(self) -> int:
        return self._index

    @property
    def on_ad_break(self) -> bool:
        return self._ad_price is not None

    @property
    def has_pending_ad_break(self) -> bool:
        return self._pending_ad_price is not None

    @property
    def current_ad_price(self) -> float:
        return self._ad_price or 0.0

    @property
    def current_track(self) -> Track:
        if self._ad_price is not None:
            return AD_BREAK
        return self._tracks[self._index]

    @property
    def duration(self) -> int:
        return self.current_track.duration_seconds

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    @property
    def remaining_seconds(self) -> int:
        return self.duration - self._elapsed

    @property
    def shuffle_order(self) -> tuple[int, ...]:
        return tuple(self._shuffle_order)

    @property
    def shuffle_position(self) -> int:
        return self._shuffle_position

    # ---- Cursor moves ----

    def advance(self, repeat_mode: RepeatMode, shuffle_enabled: bool) -> bool:
        """Move to whatever plays after the current track.

        Returns:
            True when nothing is left to play (the source is exhausted).
        """
        self._elapsed = 0

        if self._pending_ad_price is not None:
            self._ad_price = self._pending_ad_price
            self._pending_ad_price = None
            return False
        self._ad_price = None

        move = repeat_mode.cursor_move(self._kind)
        if move == CursorMove.EXHAUST:
            return True
        if move == CursorMove.REPLAY:
            return False

        use_shuffle = shuffle_enabled and self._kind.supports_shuffle
        position = self._shuffle_position if use_shuffle else self._index
        if position < len(self._tracks) - 1:
            position += 1
        elif move == CursorMove.WRAP:
            position = 0
        else:
            return True

        self._move_to(position, use_shuffle)
        return False

    def retreat(self, shuffle_enabled: bool) -> None:
        """Move to the previous track, staying on the first one if already there."""
        self._elapsed = 0
        if self._ad_price is not None:
            # Leaving an ad backwards lands on the track it interrupted.
            self._ad_price = None
            return

        use_shuffle = shuffle_enabled and self._kind.supports_shuffle
        position = self._shuffle_position if use_shuffle else self._index
        self._move_to(max(0, position - 1), use_shuffle)

    def _move_to(self, position: int, use_shuffle: bool) -> None:
        if use_shuffle:
            self._shuffle_position = position
            self._index = self._shuffle_order[position]
        else:
            self._index = position

    # ---- Position inside the current track ----

    def play_for(self, seconds: int) -> None:
        """Advance the intra-track position without crossing a boundary."""
        self._elapsed = min(self.duration, self._elapsed + seconds)

    def restart(self) -> None:
        self._elapsed = 0

    def skip(self, delta_seconds: int) -> bool:
        """Seek inside a podcast episode, clamped to the episode's bounds.

        Returns:
            False (and does nothing) for sources that are not podcasts.
        """
        if not self._kind.supports_seek:
            return False
        self._elapsed = max(0, min(self.duration, self._elapsed + delta_seconds))
        return True

    # ---- Shuffle ----

    def generate_shuffle_order(self, seed: int) -> tuple[int, ...]:
        """Build the permutation for ``seed``; the same seed always yields the same order."""
        order = list(range(len(self._tracks)))
        random.Random(seed).shuffle(order)
        self._shuffle_order = order
        return tuple(order)

    def sync_shuffle_position(self) -> None:
        """Point the permutation position at the current track so it stays current."""
        self._shuffle_position = self._shuffle_order.index(self._index)

    # ---- Ads and bookmarks ----

    def insert_ad_break(self, price: float) -> None:
        self._pending_ad_price = price

    def bookmark(self) -> PodcastBookmark | None:
        if self._kind != SourceKind.PODCAST:
            return None
        return PodcastBookmark(name=self._name, index=self._index, elapsed_seconds=self._elapsed)
