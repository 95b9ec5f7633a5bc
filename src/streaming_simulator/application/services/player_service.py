"""Player Application Service - one method per user command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel

from ...domain.catalog.entities import CollectionKind, Track, TrackCollection
from ...domain.playback.engine import PlaybackEngine, PlayerStatus
from ...domain.playback.events import PlaybackEvent
from ...domain.playback.value_objects import SourceKind
from ...domain.shared.constants import PlaybackConstants
from ...domain.shared.messages import LogTemplates, PlayerMessages
from ...domain.statistics.services import WrappedStats
from ..queries.get_track_listens import TrackListensInfo

if TYPE_CHECKING:
    from ...domain.accounts.entities import Listener
    from ...domain.catalog.repository import CatalogRepository
    from ...domain.listening.ledger import ListenLedger
    from ...domain.monetization.ledger import RevenueLedger
    from ...domain.statistics.services import WrappedStatsService

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Outcome of a user command. Failed preconditions are results, not exceptions."""

    success: bool
    message: str = ""
    stats: PlayerStatus | None = None
    result: WrappedStats | TrackListensInfo | None = None

    @classmethod
    def ok(cls, message: str) -> CommandResult:
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str) -> CommandResult:
        return cls(success=False, message=message)


class PlayerApplicationService:
    """Drives one playback engine per listener and the shared ledgers.

    Engines are created on first use and live for the whole run, so podcast
    bookmarks survive across loads.
    """

    def __init__(
        self,
        *,
        catalog: CatalogRepository,
        listeners: dict[str, Listener],
        listen_ledger: ListenLedger,
        revenue_ledger: RevenueLedger,
        stats_service: WrappedStatsService,
        skip_seconds: int = PlaybackConstants.SKIP_SECONDS,
    ) -> None:
        self._catalog = catalog
        self._listeners = listeners
        self._listen_ledger = listen_ledger
        self._revenue_ledger = revenue_ledger
        self._stats_service = stats_service
        self._skip_seconds = skip_seconds
        self._engines: dict[str, PlaybackEngine] = {}

    # ---- Lookups ----

    @property
    def listeners(self) -> dict[str, Listener]:
        return self._listeners

    def listener(self, username: str) -> Listener | None:
        return self._listeners.get(username)

    def engine_for(self, username: str) -> PlaybackEngine:
        engine = self._engines.get(username)
        if engine is None:
            engine = PlaybackEngine(
                username,
                catalog=self._catalog,
                listen_ledger=self._listen_ledger,
                revenue_ledger=self._revenue_ledger,
                skip_seconds=self._skip_seconds,
            )
            self._engines[username] = engine
        return engine

    def _resolve_source(
        self, source_type: str | None, name: str | None
    ) -> tuple[Track | TrackCollection, SourceKind] | None:
        if not source_type or not name:
            return None
        if source_type == SourceKind.TRACK.value:
            track = self._catalog.track_by_name(name)
            return (track, SourceKind.TRACK) if track else None
        try:
            collection_kind = CollectionKind(source_type)
        except ValueError:
            return None
        collection = self._catalog.collection(collection_kind, name)
        if collection is None:
            return None
        return collection, SourceKind.from_collection_kind(collection_kind)

    # ---- Player commands ----

    def load(self, username: str, source_type: str | None, name: str | None) -> CommandResult:
        """Load a song, album, playlist or podcast and start playing it."""
        listener = self.listener(username)
        if listener is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))

        resolved = self._resolve_source(source_type, name)
        if resolved is None:
            return CommandResult.fail(PlayerMessages.SOURCE_NOT_FOUND.format(name=name))
        entry, kind = resolved
        if isinstance(entry, TrackCollection) and entry.is_empty:
            return CommandResult.fail(PlayerMessages.EMPTY_COLLECTION)

        engine = self.engine_for(username)
        engine.load(entry, kind)
        engine.pause_toggle()
        engine.record_current_listen(listener)
        return CommandResult.ok(PlayerMessages.LOADED)

    def play_pause(self, username: str) -> CommandResult:
        if self.listener(username) is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        engine = self.engine_for(username)
        if not engine.is_loaded:
            return CommandResult.fail(PlayerMessages.PAUSE_NO_SOURCE)
        paused = engine.pause_toggle()
        return CommandResult.ok(PlayerMessages.PAUSED if paused else PlayerMessages.RESUMED)

    def repeat(self, username: str) -> CommandResult:
        if self.listener(username) is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        engine = self.engine_for(username)
        if not engine.is_loaded:
            return CommandResult.fail(PlayerMessages.REPEAT_NO_SOURCE)
        mode = engine.cycle_repeat()
        return CommandResult.ok(PlayerMessages.REPEAT_CHANGED.format(label=mode.label))

    def shuffle(self, username: str, seed: int | None) -> CommandResult:
        if self.listener(username) is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        engine = self.engine_for(username)
        if engine.source_kind is None:
            return CommandResult.fail(PlayerMessages.SHUFFLE_NO_SOURCE)
        if not engine.source_kind.supports_shuffle:
            return CommandResult.fail(PlayerMessages.SHUFFLE_WRONG_KIND)
        enabled = engine.toggle_shuffle(seed)
        return CommandResult.ok(PlayerMessages.SHUFFLE_ON if enabled else PlayerMessages.SHUFFLE_OFF)

    def forward(self, username: str) -> CommandResult:
        return self._seek(username, forward=True)

    def backward(self, username: str) -> CommandResult:
        return self._seek(username, forward=False)

    def _seek(self, username: str, *, forward: bool) -> CommandResult:
        if self.listener(username) is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        engine = self.engine_for(username)
        if engine.source_kind is None:
            return CommandResult.fail(
                PlayerMessages.FORWARD_NO_SOURCE if forward else PlayerMessages.BACKWARD_NO_SOURCE
            )
        if not engine.source_kind.supports_seek:
            return CommandResult.fail(PlayerMessages.NOT_A_PODCAST)
        if forward:
            engine.skip_forward()
            return CommandResult.ok(PlayerMessages.FORWARDED)
        engine.skip_backward()
        return CommandResult.ok(PlayerMessages.REWOUND)

    def next(self, username: str) -> CommandResult:
        listener = self.listener(username)
        if listener is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        engine = self.engine_for(username)
        if not engine.is_loaded:
            return CommandResult.fail(PlayerMessages.NEXT_NO_SOURCE)

        engine.next_track(listener)
        if engine.current_track is None:
            # The skip ran past the end of the source.
            return CommandResult.fail(PlayerMessages.NEXT_NO_SOURCE)
        return CommandResult.ok(PlayerMessages.NEXT_DONE.format(name=engine.current_track.name))

    def prev(self, username: str) -> CommandResult:
        if self.listener(username) is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        engine = self.engine_for(username)
        if not engine.is_loaded:
            return CommandResult.fail(PlayerMessages.PREV_NO_SOURCE)
        engine.previous_track()
        name = engine.current_track.name if engine.current_track else ""
        return CommandResult.ok(PlayerMessages.PREV_DONE.format(name=name))

    def status(self, username: str) -> CommandResult:
        if self.listener(username) is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        return CommandResult(success=True, stats=self.engine_for(username).status())

    def ad_break(self, username: str, price: int | None) -> CommandResult:
        if self.listener(username) is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        engine = self.engine_for(username)
        if not engine.is_loaded:
            return CommandResult.fail(PlayerMessages.AD_NO_MUSIC.format(username=username))
        engine.insert_ad_break(float(price or 0))
        return CommandResult.ok(PlayerMessages.AD_INSERTED)

    # ---- Account commands ----

    def buy_premium(self, username: str) -> CommandResult:
        listener = self.listener(username)
        if listener is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        if not listener.buy_premium():
            return CommandResult.fail(PlayerMessages.ALREADY_PREMIUM.format(username=username))
        return CommandResult.ok(PlayerMessages.PREMIUM_BOUGHT.format(username=username))

    def cancel_premium(self, username: str) -> CommandResult:
        """Pay out the listener's premium plays, then drop back to the free tier."""
        listener = self.listener(username)
        if listener is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        if not listener.is_premium:
            return CommandResult.fail(PlayerMessages.NOT_PREMIUM.format(username=username))
        self._revenue_ledger.distribute_premium(listener)
        listener.cancel_premium()
        return CommandResult.ok(PlayerMessages.PREMIUM_CANCELLED.format(username=username))

    def buy_merch(self, username: str, artist: str | None, merch_name: str | None) -> CommandResult:
        listener = self.listener(username)
        if listener is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=username))
        if artist is None or artist not in self._catalog.artists():
            return CommandResult.fail(PlayerMessages.ARTIST_NOT_FOUND.format(artist=artist))

        item = next((m for m in self._catalog.merchandise(artist) if m.name == merch_name), None)
        if item is None:
            return CommandResult.fail(PlayerMessages.MERCH_NOT_FOUND.format(merch=merch_name))

        listener.record_purchase(item)
        self._revenue_ledger.record_merch_sale(artist, item.price)
        logger.info(LogTemplates.MERCH_SOLD, item.name, artist, username)
        return CommandResult.ok(PlayerMessages.MERCH_BOUGHT.format(username=username))

    def wrapped(self, username: str, artist: str | None = None) -> CommandResult:
        """Statistics of ``artist``, or of the calling user when no artist is given.

        The summary depends on whether the target is an artist, a podcast host
        or a listener.
        """
        target = artist or username
        role = self._stats_service.role_of(target, self._listeners)
        if role is None:
            return CommandResult.fail(PlayerMessages.USER_NOT_FOUND.format(username=target))
        stats = self._stats_service.wrapped(target, role)
        if stats is None:
            return CommandResult.fail(PlayerMessages.NO_STATS.format(role=role.value, name=target))
        return CommandResult(success=True, result=stats)

    # ---- Simulation ----

    def advance_time(self, elapsed_seconds: int) -> list[PlaybackEvent]:
        """Let time pass on every listener's player, in listener declaration order."""
        events: list[PlaybackEvent] = []
        for username, listener in self._listeners.items():
            engine = self._engines.get(username)
            if engine is not None:
                events.extend(engine.tick(elapsed_seconds, listener))
        return events

    def settle_premium(self) -> float:
        """Distribute every premium listener's pending plays. Returns the total paid."""
        total = 0.0
        for listener in self._listeners.values():
            if listener.is_premium:
                total += self._revenue_ledger.distribute_premium(listener)
        return total
