"""
Catalog Repository Interface

Abstract base class defining the catalog-access capability handed to the
playback engine and the revenue ledger at construction time.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod

from streaming_simulator.domain.catalog.entities import (
    CollectionKind,
    Merchandise,
    Track,
    TrackCollection,
)


class CatalogRepository(ABC):
    """Read-only lookup over the tracks, collections and merchandise of a run.

    The catalog is loaded once before the simulation starts and is never
    mutated afterwards.
    """

    @abstractmethod
    def track_by_name(self, name: str) -> Track | None:
        """Retrieve a track by its name.

        Args:
            name: The track name.

        Returns:
            The first track with that name, None if there is none.
        """
        ...

    @abstractmethod
    def artist_of(self, track: Track) -> str:
        """Return the artist credited with revenue for a track."""
        ...

    @abstractmethod
    def tracks_by_genre(self, genre: str) -> list[Track]:
        """Return every track of a genre, in catalog order."""
        ...

    @abstractmethod
    def tracks_by_artist(self, artist: str) -> list[Track]:
        """Return every track owned by an artist, in catalog order."""
        ...

    @abstractmethod
    def collection(self, kind: CollectionKind, name: str) -> TrackCollection | None:
        """Retrieve a collection by kind and name.

        Args:
            kind: Album, playlist or podcast.
            name: The collection name.

        Returns:
            The collection if found, None otherwise.
        """
        ...

    @abstractmethod
    def collections_by_owner(
        self, owner: str, kind: CollectionKind | None = None
    ) -> list[TrackCollection]:
        """Return the collections owned by a user, optionally of one kind only."""
        ...

    @abstractmethod
    def merchandise(self, artist: str) -> list[Merchandise]:
        """Return the merchandise an artist sells."""
        ...

    @abstractmethod
    def artists(self) -> list[str]:
        """Return the names of all artists that own at least one song or merch item."""
        ...
