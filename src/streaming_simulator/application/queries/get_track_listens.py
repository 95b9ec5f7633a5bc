"""Query for the listen counters of a catalog track."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from streaming_simulator.domain.shared.types import NonNegativeInt, TrackNameStr

if TYPE_CHECKING:
    from ...domain.catalog.repository import CatalogRepository
    from ...domain.listening.ledger import ListenLedger


class GetTrackListensQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    track_name: TrackNameStr


class TrackListensInfo(BaseModel):
    """Total and unique listens of one track, serialized with camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    track_name: TrackNameStr = Field(alias="name")
    found: bool = Field(default=True, exclude=True)
    total_plays: NonNegativeInt = Field(default=0, alias="totalPlays")
    unique_listeners: NonNegativeInt = Field(default=0, alias="uniqueListeners")


class GetTrackListensHandler:

    def __init__(self, *, catalog: CatalogRepository, listen_ledger: ListenLedger) -> None:
        self._catalog = catalog
        self._listen_ledger = listen_ledger

    def handle(self, query: GetTrackListensQuery) -> TrackListensInfo:
        track = self._catalog.track_by_name(query.track_name)
        if track is None:
            return TrackListensInfo(track_name=query.track_name, found=False)

        return TrackListensInfo(
            track_name=track.name,
            total_plays=self._listen_ledger.total_plays(track),
            unique_listeners=self._listen_ledger.unique_listener_count(track),
        )
