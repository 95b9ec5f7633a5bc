"""Pydantic models for the scenario file format.

A scenario file is one JSON document::

    {
      "tracks": [{"name": "...", "artist": "...", "duration": 200, "album": "..."}],
      "collections": [{"name": "...", "owner": "...", "kind": "album", "tracks": ["..."]}],
      "merchandise": [{"name": "...", "artist": "...", "price": 20}],
      "users": [{"username": "...", "premium": false}],
      "commands": [{"command": "load", "username": "...", "timestamp": 0, ...}]
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from streaming_simulator.application.commands.scenario_command import ScenarioCommand
from streaming_simulator.domain.accounts.entities import Listener
from streaming_simulator.domain.catalog.entities import (
    CollectionKind,
    Merchandise,
    Track,
    TrackKind,
)
from streaming_simulator.domain.shared.messages import ErrorMessages
from streaming_simulator.domain.shared.types import (
    NonEmptyStr,
    PositiveInt,
    PriceInt,
    TrackNameStr,
    UsernameStr,
)


class ScenarioTrack(BaseModel):
    """A song or podcast episode declared in the catalog section."""

    name: TrackNameStr
    artist: UsernameStr
    # Catalog tracks always take time to play; only the ad break is instant.
    duration: PositiveInt = Field(le=86_400)
    genre: str = ""
    album: str | None = None
    kind: TrackKind = TrackKind.SONG

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: TrackKind) -> TrackKind:
        if v == TrackKind.AD:
            raise ValueError(ErrorMessages.AD_KIND_IN_CATALOG)
        return v

    def to_domain(self) -> Track:
        return Track(
            name=self.name,
            artist=self.artist,
            duration_seconds=self.duration,
            genre=self.genre,
            album=self.album,
            kind=self.kind,
        )


class ScenarioCollection(BaseModel):
    """An album, playlist or podcast listing its tracks by name."""

    name: TrackNameStr
    owner: UsernameStr
    kind: CollectionKind
    tracks: list[TrackNameStr] = Field(default_factory=list)


class ScenarioMerchandise(BaseModel):
    name: NonEmptyStr
    artist: UsernameStr
    price: PriceInt
    description: str = ""

    def to_domain(self) -> Merchandise:
        return Merchandise(
            name=self.name, artist=self.artist, price=self.price, description=self.description
        )


class ScenarioUser(BaseModel):
    username: UsernameStr
    premium: bool = False

    def to_domain(self) -> Listener:
        return Listener(username=self.username, is_premium=self.premium)


class ScenarioFile(BaseModel):
    """Top-level document of a scenario file."""

    model_config = ConfigDict(extra="forbid")

    tracks: list[ScenarioTrack] = Field(default_factory=list)
    collections: list[ScenarioCollection] = Field(default_factory=list)
    merchandise: list[ScenarioMerchandise] = Field(default_factory=list)
    users: list[ScenarioUser] = Field(default_factory=list)
    commands: list[ScenarioCommand] = Field(default_factory=list)
