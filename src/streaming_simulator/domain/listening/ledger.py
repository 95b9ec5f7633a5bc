"""Per-track listen counters."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from streaming_simulator.domain.catalog.entities import Track
from streaming_simulator.domain.listening.events import ListenEvent
from streaming_simulator.domain.shared.messages import LogTemplates
from streaming_simulator.domain.shared.types import NonNegativeInt

logger = logging.getLogger(__name__)


class TrackListens(BaseModel):
    """Listen aggregates for one track."""

    total_plays: NonNegativeInt = 0
    user_listen_counts: dict[str, int] = Field(default_factory=dict)
    unique_listeners: set[str] = Field(default_factory=set)

    @property
    def unique_listener_count(self) -> int:
        return len(self.unique_listeners)


class ListenLedger:
    """Counts plays per track, per user and per unique listener.

    Tracks that were never played have no entry; every read returns zero
    for them. ``total_plays`` always equals the sum of the per-user counts.
    """

    def __init__(self) -> None:
        self._listens: dict[Track, TrackListens] = {}
        self._sequence = 0

    def record_play(self, track: Track, user_id: str) -> ListenEvent:
        """Attribute one playthrough of ``track`` to ``user_id``.

        Repeated calls accumulate; nothing is deduplicated.
        """
        listens = self._listens.setdefault(track, TrackListens())
        listens.total_plays += 1
        listens.user_listen_counts[user_id] = listens.user_listen_counts.get(user_id, 0) + 1
        listens.unique_listeners.add(user_id)

        self._sequence += 1
        logger.debug(LogTemplates.LISTEN_RECORDED, self._sequence, user_id, track.name)
        return ListenEvent(
            user_id=user_id,
            track_name=track.name,
            artist=track.artist,
            ordinal=self._sequence,
        )

    def total_plays(self, track: Track) -> int:
        listens = self._listens.get(track)
        return listens.total_plays if listens else 0

    def user_plays(self, track: Track, user_id: str) -> int:
        listens = self._listens.get(track)
        return listens.user_listen_counts.get(user_id, 0) if listens else 0

    def unique_listener_count(self, track: Track) -> int:
        listens = self._listens.get(track)
        return listens.unique_listener_count if listens else 0

    def listens_for(self, track: Track) -> TrackListens:
        """Return a detached copy of the aggregates for ``track``."""
        listens = self._listens.get(track)
        if listens is None:
            return TrackListens()
        return listens.model_copy(deep=True)

    def played_tracks(self) -> list[Track]:
        """Tracks with at least one recorded play, in first-play order."""
        return list(self._listens)
