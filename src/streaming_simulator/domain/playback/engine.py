"""Per-listener player: repeat/shuffle/pause state and the time simulation step."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from streaming_simulator.domain.catalog.entities import Track, TrackCollection
from streaming_simulator.domain.playback.events import (
    AdBreakCrossed,
    PlaybackEvent,
    SourceExhausted,
)
from streaming_simulator.domain.playback.source import PlaybackSource
from streaming_simulator.domain.playback.value_objects import (
    PodcastBookmark,
    RepeatMode,
    SourceKind,
)
from streaming_simulator.domain.shared.constants import PlaybackConstants
from streaming_simulator.domain.shared.exceptions import ValidationError
from streaming_simulator.domain.shared.messages import ErrorMessages, LogTemplates
from streaming_simulator.domain.shared.types import NonNegativeInt

if TYPE_CHECKING:
    from streaming_simulator.domain.accounts.entities import Listener
    from streaming_simulator.domain.catalog.repository import CatalogRepository
    from streaming_simulator.domain.listening.events import ListenEvent
    from streaming_simulator.domain.listening.ledger import ListenLedger
    from streaming_simulator.domain.monetization.ledger import RevenueLedger

logger = logging.getLogger(__name__)


class PlayerStatus(BaseModel):
    """Snapshot of a player for status reporting."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    remained_time: NonNegativeInt = Field(default=0, alias="remainedTime")
    repeat: str = RepeatMode.NONE.label
    shuffle: bool = False
    paused: bool = True


class PlaybackEngine:
    """Owns one listener's loaded source and drives it through simulated time.

    The engine is paused with nothing elapsed whenever no source is loaded.
    Collaborators are passed in explicitly: the catalog resolves revenue
    owners, the listen ledger counts plays, and the revenue ledger is paid
    when an ad break is crossed.
    """

    def __init__(
        self,
        owner: str,
        *,
        catalog: CatalogRepository,
        listen_ledger: ListenLedger,
        revenue_ledger: RevenueLedger,
        skip_seconds: int = PlaybackConstants.SKIP_SECONDS,
    ) -> None:
        self._owner = owner
        self._catalog = catalog
        self._listen_ledger = listen_ledger
        self._revenue_ledger = revenue_ledger
        self._skip_seconds = skip_seconds

        self._source: PlaybackSource | None = None
        self._repeat_mode = RepeatMode.NONE
        self._shuffle = False
        self._paused = True
        self._bookmarks: dict[str, PodcastBookmark] = {}

    # ---- Reads ----

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def source(self) -> PlaybackSource | None:
        return self._source

    @property
    def is_loaded(self) -> bool:
        return self._source is not None

    @property
    def source_kind(self) -> SourceKind | None:
        return self._source.kind if self._source else None

    @property
    def repeat_mode(self) -> RepeatMode:
        return self._repeat_mode

    @property
    def shuffle_enabled(self) -> bool:
        return self._shuffle

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def current_track(self) -> Track | None:
        return self._source.current_track if self._source else None

    @property
    def elapsed_seconds(self) -> int:
        return self._source.elapsed_seconds if self._source else 0

    @property
    def remaining_seconds(self) -> int:
        return self._source.remaining_seconds if self._source else 0

    def bookmark_for(self, podcast_name: str) -> PodcastBookmark | None:
        return self._bookmarks.get(podcast_name)

    def status(self) -> PlayerStatus:
        if self._source is None:
            return PlayerStatus(repeat=self._repeat_mode.label, shuffle=self._shuffle)
        return PlayerStatus(
            name=self._source.current_track.name,
            remained_time=self._source.remaining_seconds,
            repeat=self._repeat_mode.label,
            shuffle=self._shuffle,
            paused=self._paused,
        )

    # ---- Loading ----

    def load(self, entry: Track | TrackCollection, kind: SourceKind) -> PlaybackSource:
        """Replace the current source, saving a podcast bookmark first.

        The new source starts paused with repeat and shuffle off. A podcast
        that was bookmarked by this engine resumes where it was left.
        """
        self._save_bookmark()

        if isinstance(entry, Track):
            source = PlaybackSource.for_track(entry)
        else:
            bookmark = self._bookmarks.get(entry.name) if kind == SourceKind.PODCAST else None
            source = PlaybackSource.for_collection(entry, bookmark)
            if bookmark is not None:
                logger.info(
                    LogTemplates.SOURCE_RESUMED_FROM_BOOKMARK,
                    entry.name,
                    bookmark.index,
                    bookmark.elapsed_seconds,
                )

        self._source = source
        self._reset_state()
        logger.info(LogTemplates.SOURCE_LOADED, kind.value, source.name, self._owner)
        return source

    def stop(self) -> None:
        """Unload the current source, bookmarking it if it is a podcast."""
        self._save_bookmark()
        self._source = None
        self._reset_state()

    def _finish(self, source: PlaybackSource, listener: Listener) -> SourceExhausted:
        if source.kind == SourceKind.PODCAST and self._bookmarks.pop(source.name, None):
            logger.debug(LogTemplates.BOOKMARK_DROPPED, source.name)
        self._source = None
        self._reset_state()
        logger.info(LogTemplates.SOURCE_EXHAUSTED, self._owner)
        return SourceExhausted(user_id=listener.username, source_name=source.name)

    def _reset_state(self) -> None:
        self._repeat_mode = RepeatMode.NONE
        self._shuffle = False
        self._paused = True

    def _save_bookmark(self) -> None:
        if self._source is None:
            return
        bookmark = self._source.bookmark()
        if bookmark is not None:
            self._bookmarks[bookmark.name] = bookmark
            logger.debug(
                LogTemplates.BOOKMARK_SAVED, bookmark.name, bookmark.index, bookmark.elapsed_seconds
            )

    # ---- Player controls ----

    def pause_toggle(self) -> bool:
        """Flip the paused flag and return it. Stays paused when nothing is loaded."""
        if self._source is None:
            return self._paused
        self._paused = not self._paused
        return self._paused

    def cycle_repeat(self) -> RepeatMode:
        """Move to the next repeat mode for the loaded source kind and return it."""
        if self._source is None:
            return self._repeat_mode
        self._repeat_mode = self._repeat_mode.next_mode(self._source.kind)
        logger.debug(LogTemplates.REPEAT_CHANGED, self._owner, self._repeat_mode.label)
        return self._repeat_mode

    def toggle_shuffle(self, seed: int | None = None) -> bool:
        """Turn shuffle on or off for an album or playlist and return the new flag.

        Turning shuffle on regenerates the permutation from ``seed`` (when
        given) and keeps the current track current. Other source kinds are
        left untouched.
        """
        if self._source is None or not self._source.kind.supports_shuffle:
            return self._shuffle

        self._shuffle = not self._shuffle
        if self._shuffle:
            if seed is not None:
                self._source.generate_shuffle_order(seed)
            self._source.sync_shuffle_position()
        logger.debug(LogTemplates.SHUFFLE_TOGGLED, self._owner, self._shuffle, seed)
        return self._shuffle

    def skip_forward(self) -> bool:
        return self._seek(self._skip_seconds)

    def skip_backward(self) -> bool:
        return self._seek(-self._skip_seconds)

    def _seek(self, delta_seconds: int) -> bool:
        if self._source is None or not self._source.skip(delta_seconds):
            return False
        self._paused = False
        return True

    def insert_ad_break(self, price: float) -> bool:
        """Queue an ad break after the current track. Returns False when nothing is loaded."""
        if price < 0:
            raise ValidationError(ErrorMessages.NEGATIVE_AD_PRICE, field="price")
        if self._source is None:
            return False
        self._source.insert_ad_break(price)
        logger.debug(LogTemplates.AD_BREAK_INSERTED, price, self._owner)
        return True

    def next_track(self, listener: Listener) -> list[PlaybackEvent]:
        """User-requested skip to whatever plays next."""
        return self.advance_to_next(listener)

    def previous_track(self) -> bool:
        """Restart the current track, or step back if it has not started yet."""
        source = self._source
        if source is None:
            return False
        if source.elapsed_seconds > 0 and not source.on_ad_break:
            source.restart()
        else:
            source.retreat(self._shuffle)
        self._paused = False
        return True

    # ---- Time simulation ----

    def tick(self, elapsed_seconds: int, listener: Listener) -> list[PlaybackEvent]:
        """Let ``elapsed_seconds`` of simulated time pass.

        Crosses as many track boundaries as the time covers, recording a
        listen for each new track and paying out ad breaks on the way. Does
        nothing while paused or unloaded.
        """
        if elapsed_seconds < 0:
            raise ValidationError(ErrorMessages.NEGATIVE_ELAPSED_TIME, field="elapsed_seconds")

        events: list[PlaybackEvent] = []
        if self._paused or self._source is None:
            return events

        remaining = elapsed_seconds
        while self._source is not None and remaining >= self._source.remaining_seconds:
            remaining -= self._source.remaining_seconds
            events.extend(self.advance_to_next(listener))
            if self._paused:
                break

        if not self._paused and self._source is not None:
            self._source.play_for(remaining)
        return events

    def advance_to_next(self, listener: Listener) -> list[PlaybackEvent]:
        """Cross one track boundary and fold its side effects into the ledgers.

        Returns no events when nothing is loaded.
        """
        source = self._source
        if source is None:
            return []
        exhausted = source.advance(self._repeat_mode, self._shuffle)

        if self._repeat_mode == RepeatMode.REPEAT_ONCE:
            self._repeat_mode = RepeatMode.NONE

        if exhausted:
            return [self._finish(source, listener)]

        self._paused = False
        track = source.current_track

        if source.on_ad_break:
            logger.debug(LogTemplates.AD_BREAK_CROSSED, listener.username)
            distributed = self._revenue_ledger.distribute_free(listener, source.current_ad_price)
            return [
                AdBreakCrossed(
                    user_id=listener.username,
                    ad_price=source.current_ad_price,
                    distributed=distributed,
                )
            ]

        logger.debug(LogTemplates.TRACK_ADVANCED, listener.username, track.name)
        return [self.record_listen(track, listener)]

    def record_current_listen(self, listener: Listener) -> ListenEvent | None:
        """Attribute the track currently under the cursor, used right after a load."""
        if self._source is None:
            return None
        return self.record_listen(self._source.current_track, listener)

    def record_listen(self, track: Track, listener: Listener) -> ListenEvent:
        event = self._listen_ledger.record_play(track, listener.username)
        if track.is_song:
            listener.add_pending_listen(track)
            self._revenue_ledger.register_artist(self._catalog.artist_of(track))
        return event
