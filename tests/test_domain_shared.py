"""
Unit Tests for the Shared Kernel and Catalog Entities

Tests for:
- Exception hierarchy and error codes
- Track, TrackCollection and Merchandise validation
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from streaming_simulator.domain.catalog.entities import (
    AD_BREAK,
    CollectionKind,
    Merchandise,
    Track,
    TrackCollection,
    TrackKind,
)
from streaming_simulator.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)

# =============================================================================
# Exception Tests
# =============================================================================


class TestExceptions:
    """Unit tests for the domain exception hierarchy."""

    def test_domain_error_default_code(self):
        """Should default the code to the class name."""
        error = DomainError("boom")

        assert error.message == "boom"
        assert error.code == "DomainError"
        assert str(error) == "boom"

    def test_validation_error(self):
        """Should carry the offending field."""
        error = ValidationError("bad", field="elapsed_seconds")

        assert isinstance(error, DomainError)
        assert error.code == "VALIDATION_ERROR"
        assert error.field == "elapsed_seconds"

    def test_entity_not_found_default_message(self):
        """Should build a message from the entity type and id."""
        error = EntityNotFoundError("Track", "song9")

        assert error.message == "Track with id 'song9' not found"
        assert error.code == "ENTITY_NOT_FOUND"

    def test_invalid_operation_default_message(self):
        """Should describe the operation and state."""
        error = InvalidOperationError("seek", "unloaded")

        assert error.message == "Cannot perform 'seek' in state 'unloaded'"
        assert error.operation == "seek"
        assert error.current_state == "unloaded"


# =============================================================================
# Catalog Entity Tests
# =============================================================================


class TestCatalogEntities:
    """Unit tests for catalog entities."""

    def test_track_is_hashable_and_frozen(self, make_track):
        """Should be usable as a dict key and refuse mutation."""
        track = make_track("song1")

        assert {track: 1}[make_track("song1")] == 1
        with pytest.raises(PydanticValidationError):
            track.name = "other"

    def test_negative_duration_rejected(self):
        """Should reject negative durations."""
        with pytest.raises(PydanticValidationError):
            Track(name="x", artist="y", duration_seconds=-1)

    def test_ad_break_pseudo_track(self):
        """Should be a zero-duration ad that is not a song."""
        assert AD_BREAK.name == "Ad Break"
        assert AD_BREAK.duration_seconds == 0
        assert AD_BREAK.kind == TrackKind.AD
        assert not AD_BREAK.is_song

    def test_collection_emptiness(self, album):
        """Should tell empty collections apart."""
        empty = TrackCollection(name="e", owner="o", kind=CollectionKind.PLAYLIST)

        assert not album.is_empty
        assert empty.is_empty

    def test_episode_kind(self, episodes):
        """Should mark podcast episodes as non-songs."""
        assert episodes[0].kind == TrackKind.EPISODE
        assert not episodes[0].is_song

    def test_merch_price_not_negative(self):
        """Should reject negative merch prices."""
        with pytest.raises(PydanticValidationError):
            Merchandise(name="Cap", artist="alpha", price=-3)
