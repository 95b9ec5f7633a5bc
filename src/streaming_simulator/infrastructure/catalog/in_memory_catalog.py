"""In-memory implementation of the catalog repository."""

from __future__ import annotations

from collections.abc import Iterable

from streaming_simulator.domain.catalog.entities import (
    CollectionKind,
    Merchandise,
    Track,
    TrackCollection,
)
from streaming_simulator.domain.catalog.repository import CatalogRepository


class InMemoryCatalog(CatalogRepository):
    """Catalog held in plain dictionaries, built once from a scenario.

    Tracks keep their declaration order; when two tracks share a name the
    first one wins on lookups by name.
    """

    def __init__(
        self,
        tracks: Iterable[Track] = (),
        collections: Iterable[TrackCollection] = (),
        merchandise: Iterable[Merchandise] = (),
    ) -> None:
        self._tracks: list[Track] = list(tracks)
        self._by_name: dict[str, Track] = {}
        for track in self._tracks:
            self._by_name.setdefault(track.name, track)

        self._collections: dict[tuple[CollectionKind, str], TrackCollection] = {
            (collection.kind, collection.name): collection for collection in collections
        }

        self._merchandise: dict[str, list[Merchandise]] = {}
        for item in merchandise:
            self._merchandise.setdefault(item.artist, []).append(item)

    def track_by_name(self, name: str) -> Track | None:
        return self._by_name.get(name)

    def artist_of(self, track: Track) -> str:
        return track.artist

    def tracks_by_genre(self, genre: str) -> list[Track]:
        return [track for track in self._tracks if track.genre.lower() == genre.lower()]

    def tracks_by_artist(self, artist: str) -> list[Track]:
        return [track for track in self._tracks if track.artist == artist]

    def collection(self, kind: CollectionKind, name: str) -> TrackCollection | None:
        return self._collections.get((kind, name))

    def collections_by_owner(
        self, owner: str, kind: CollectionKind | None = None
    ) -> list[TrackCollection]:
        return [
            collection
            for collection in self._collections.values()
            if collection.owner == owner and (kind is None or collection.kind == kind)
        ]

    def merchandise(self, artist: str) -> list[Merchandise]:
        return list(self._merchandise.get(artist, []))

    def artists(self) -> list[str]:
        names = [track.artist for track in self._tracks if track.is_song]
        names.extend(self._merchandise)
        return list(dict.fromkeys(names))
