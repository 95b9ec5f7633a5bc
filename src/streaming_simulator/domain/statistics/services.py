"""
Wrapped Statistics Domain Services

Builds the "wrapped" summaries from the listen ledger. What a summary holds
depends on the role of the name it is asked for:

- an artist sees their most played albums and songs, their top fans and how
  many distinct listeners they reached;
- a podcast host sees their most played episodes and their listener count;
- a listener sees the artists, genres, songs, albums and episodes they
  played most.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Container
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from streaming_simulator.domain.catalog.entities import CollectionKind, TrackKind
from streaming_simulator.domain.shared.constants import StatisticsConstants
from streaming_simulator.domain.shared.types import NonNegativeInt

if TYPE_CHECKING:
    from streaming_simulator.domain.catalog.repository import CatalogRepository
    from streaming_simulator.domain.listening.ledger import ListenLedger


class StatsRole(Enum):
    """Which summary a name gets."""

    USER = "user"
    ARTIST = "artist"
    HOST = "host"


class ArtistStats(BaseModel):
    """Top lists of one artist, serialized with the report's camelCase keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    top_albums: dict[str, int] = Field(default_factory=dict, alias="topAlbums")
    top_songs: dict[str, int] = Field(default_factory=dict, alias="topSongs")
    top_fans: list[str] = Field(default_factory=list, alias="topFans")
    listeners: NonNegativeInt = 0


class HostStats(BaseModel):
    """Top episodes of one podcast host."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    top_episodes: dict[str, int] = Field(default_factory=dict, alias="topEpisodes")
    listeners: NonNegativeInt = 0


class UserStats(BaseModel):
    """What one listener played most."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    top_artists: dict[str, int] = Field(default_factory=dict, alias="topArtists")
    top_genres: dict[str, int] = Field(default_factory=dict, alias="topGenres")
    top_songs: dict[str, int] = Field(default_factory=dict, alias="topSongs")
    top_albums: dict[str, int] = Field(default_factory=dict, alias="topAlbums")
    top_episodes: dict[str, int] = Field(default_factory=dict, alias="topEpisodes")


WrappedStats = ArtistStats | HostStats | UserStats


class _RankedStatsService:
    def __init__(
        self,
        catalog: CatalogRepository,
        ledger: ListenLedger,
        *,
        top_limit: int = StatisticsConstants.TOP_LIMIT,
    ) -> None:
        self._catalog = catalog
        self._ledger = ledger
        self._top_limit = top_limit

    def _top(self, counts: Counter[str]) -> list[tuple[str, int]]:
        """Highest counts first, ties broken by name, cut to the configured limit."""
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[: self._top_limit]


class ArtistStatsService(_RankedStatsService):
    """Aggregates ledger counters over an artist's songs."""

    def wrapped(self, artist: str) -> ArtistStats | None:
        """Summarize the listens of ``artist``.

        Returns:
            The statistics, or None when nobody listened to the artist yet.
        """
        albums: Counter[str] = Counter()
        songs: Counter[str] = Counter()
        fans: Counter[str] = Counter()
        listeners: set[str] = set()

        for track in self._catalog.tracks_by_artist(artist):
            if not track.is_song:
                continue
            listens = self._ledger.listens_for(track)
            if listens.total_plays == 0:
                continue
            songs[track.name] += listens.total_plays
            if track.album:
                albums[track.album] += listens.total_plays
            fans.update(listens.user_listen_counts)
            listeners |= listens.unique_listeners

        if not listeners:
            return None

        return ArtistStats(
            top_albums=dict(self._top(albums)),
            top_songs=dict(self._top(songs)),
            top_fans=[name for name, _ in self._top(fans)],
            listeners=len(listeners),
        )


class HostStatsService(_RankedStatsService):
    """Aggregates ledger counters over the episodes of a host's podcasts."""

    def wrapped(self, host: str) -> HostStats | None:
        episodes: Counter[str] = Counter()
        listeners: set[str] = set()

        for podcast in self._catalog.collections_by_owner(host, CollectionKind.PODCAST):
            for episode in podcast.tracks:
                listens = self._ledger.listens_for(episode)
                if listens.total_plays == 0:
                    continue
                episodes[episode.name] += listens.total_plays
                listeners |= listens.unique_listeners

        if not listeners:
            return None

        return HostStats(top_episodes=dict(self._top(episodes)), listeners=len(listeners))


class UserStatsService(_RankedStatsService):
    """Aggregates one listener's own plays across everything they played."""

    def wrapped(self, username: str) -> UserStats | None:
        """Summarize what ``username`` listened to.

        Returns:
            The statistics, or None when the user played no song and no episode.
        """
        artists: Counter[str] = Counter()
        genres: Counter[str] = Counter()
        songs: Counter[str] = Counter()
        albums: Counter[str] = Counter()
        episodes: Counter[str] = Counter()

        for track in self._ledger.played_tracks():
            count = self._ledger.user_plays(track, username)
            if count == 0:
                continue
            if track.is_song:
                artists[self._catalog.artist_of(track)] += count
                songs[track.name] += count
                if track.genre:
                    genres[track.genre] += count
                if track.album:
                    albums[track.album] += count
            elif track.kind == TrackKind.EPISODE:
                episodes[track.name] += count

        if not artists and not episodes:
            return None

        return UserStats(
            top_artists=dict(self._top(artists)),
            top_genres=dict(self._top(genres)),
            top_songs=dict(self._top(songs)),
            top_albums=dict(self._top(albums)),
            top_episodes=dict(self._top(episodes)),
        )


class WrappedStatsService:
    """Picks the summary matching the role a name plays in the run.

    Artists are the owners of songs or merchandise, hosts the owners of
    podcasts, and users the listeners of the scenario. A name that is
    several of these gets the first match in that order.
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        ledger: ListenLedger,
        *,
        top_limit: int = StatisticsConstants.TOP_LIMIT,
    ) -> None:
        self._catalog = catalog
        self.artists = ArtistStatsService(catalog, ledger, top_limit=top_limit)
        self.hosts = HostStatsService(catalog, ledger, top_limit=top_limit)
        self.users = UserStatsService(catalog, ledger, top_limit=top_limit)

    def role_of(self, name: str, listeners: Container[str]) -> StatsRole | None:
        if name in self._catalog.artists():
            return StatsRole.ARTIST
        if self._catalog.collections_by_owner(name, CollectionKind.PODCAST):
            return StatsRole.HOST
        if name in listeners:
            return StatsRole.USER
        return None

    def wrapped(self, name: str, role: StatsRole) -> WrappedStats | None:
        if role == StatsRole.ARTIST:
            return self.artists.wrapped(name)
        if role == StatsRole.HOST:
            return self.hosts.wrapped(name)
        return self.users.wrapped(name)
