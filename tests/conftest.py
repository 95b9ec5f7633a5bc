import pytest

# ============================================================================
# Catalog Fixtures
# ============================================================================


@pytest.fixture
def make_track():
    """Factory for catalog tracks with sensible defaults."""
    from streaming_simulator.domain.catalog.entities import Track, TrackKind

    def _make(
        name: str,
        duration: int = 200,
        artist: str = "alpha",
        album: str | None = None,
        kind: TrackKind = TrackKind.SONG,
    ) -> Track:
        return Track(
            name=name,
            artist=artist,
            duration_seconds=duration,
            album=album,
            genre="rock",
            kind=kind,
        )

    return _make


@pytest.fixture
def album_tracks(make_track):
    """Three 200-second songs of the album 'First'."""
    return [make_track(f"song{i}", album="First") for i in (1, 2, 3)]


@pytest.fixture
def episodes(make_track):
    """Two podcast episodes of 300 and 600 seconds."""
    from streaming_simulator.domain.catalog.entities import TrackKind

    return [
        make_track("episode1", duration=300, artist="host", kind=TrackKind.EPISODE),
        make_track("episode2", duration=600, artist="host", kind=TrackKind.EPISODE),
    ]


@pytest.fixture
def single_song(make_track):
    """A standalone 100-second song by another artist."""
    return make_track("solo", duration=100, artist="beta")


@pytest.fixture
def album(album_tracks):
    from streaming_simulator.domain.catalog.entities import CollectionKind, TrackCollection

    return TrackCollection(
        name="First", owner="alpha", kind=CollectionKind.ALBUM, tracks=tuple(album_tracks)
    )


@pytest.fixture
def podcast(episodes):
    from streaming_simulator.domain.catalog.entities import CollectionKind, TrackCollection

    return TrackCollection(
        name="Talk", owner="host", kind=CollectionKind.PODCAST, tracks=tuple(episodes)
    )


@pytest.fixture
def catalog(album_tracks, episodes, single_song, album, podcast):
    """In-memory catalog with an album, a playlist, a podcast and merch."""
    from streaming_simulator.domain.catalog.entities import (
        CollectionKind,
        Merchandise,
        TrackCollection,
    )
    from streaming_simulator.infrastructure.catalog.in_memory_catalog import InMemoryCatalog

    playlist = TrackCollection(
        name="Mix",
        owner="alice",
        kind=CollectionKind.PLAYLIST,
        tracks=(album_tracks[2], single_song, album_tracks[0]),
    )
    empty = TrackCollection(name="Nothing", owner="alice", kind=CollectionKind.PLAYLIST)
    merch = [
        Merchandise(name="T-Shirt", artist="alpha", price=20),
        Merchandise(name="Poster", artist="beta", price=5),
    ]
    return InMemoryCatalog(
        [*album_tracks, single_song, *episodes],
        [album, playlist, podcast, empty],
        merch,
    )


# ============================================================================
# Ledger and Listener Fixtures
# ============================================================================


@pytest.fixture
def listen_ledger():
    from streaming_simulator.domain.listening.ledger import ListenLedger

    return ListenLedger()


@pytest.fixture
def revenue_ledger(catalog):
    from streaming_simulator.domain.monetization.ledger import RevenueLedger

    return RevenueLedger(catalog)


@pytest.fixture
def free_listener():
    from streaming_simulator.domain.accounts.entities import Listener

    return Listener(username="alice")


@pytest.fixture
def premium_listener():
    from streaming_simulator.domain.accounts.entities import Listener

    return Listener(username="bob", is_premium=True)


@pytest.fixture
def engine(catalog, listen_ledger, revenue_ledger):
    """A playback engine owned by 'alice' with nothing loaded."""
    from streaming_simulator.domain.playback.engine import PlaybackEngine

    return PlaybackEngine(
        "alice",
        catalog=catalog,
        listen_ledger=listen_ledger,
        revenue_ledger=revenue_ledger,
    )


# ============================================================================
# Application Fixtures
# ============================================================================


@pytest.fixture
def listeners(free_listener, premium_listener):
    return {free_listener.username: free_listener, premium_listener.username: premium_listener}


@pytest.fixture
def stats_service(catalog, listen_ledger):
    from streaming_simulator.domain.statistics.services import WrappedStatsService

    return WrappedStatsService(catalog, listen_ledger)


@pytest.fixture
def player_service(catalog, listeners, listen_ledger, revenue_ledger, stats_service):
    from streaming_simulator.application.services.player_service import PlayerApplicationService

    return PlayerApplicationService(
        catalog=catalog,
        listeners=listeners,
        listen_ledger=listen_ledger,
        revenue_ledger=revenue_ledger,
        stats_service=stats_service,
    )


@pytest.fixture
def scenario_document():
    """A small scenario file body as a plain dict."""
    return {
        "tracks": [
            {"name": "song1", "artist": "alpha", "duration": 200, "album": "First"},
            {"name": "song2", "artist": "alpha", "duration": 200, "album": "First"},
            {"name": "song3", "artist": "alpha", "duration": 200, "album": "First"},
            {"name": "solo", "artist": "beta", "duration": 100},
        ],
        "collections": [
            {
                "name": "First",
                "owner": "alpha",
                "kind": "album",
                "tracks": ["song1", "song2", "song3"],
            }
        ],
        "merchandise": [{"name": "T-Shirt", "artist": "alpha", "price": 20}],
        "users": [{"username": "alice"}, {"username": "bob", "premium": True}],
        "commands": [
            {"command": "load", "username": "alice", "timestamp": 0, "type": "album", "name": "First"},
            {"command": "adBreak", "username": "alice", "timestamp": 10, "price": 100},
            {"command": "status", "username": "alice", "timestamp": 250},
        ],
    }
