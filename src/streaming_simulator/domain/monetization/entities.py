"""Revenue accumulators and the end-of-run report entry."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from streaming_simulator.domain.shared.types import (
    NonEmptyStr,
    NonNegativeFloat,
    PositiveInt,
    UsernameStr,
)


class ArtistRevenue(BaseModel):
    """Running revenue totals for one artist."""

    artist: UsernameStr
    song_revenue: NonNegativeFloat = 0.0
    merch_revenue: NonNegativeFloat = 0.0
    track_revenue: dict[str, float] = Field(default_factory=dict)

    @property
    def total_revenue(self) -> float:
        return self.song_revenue + self.merch_revenue

    def add_song_revenue(self, track_name: str, amount: float) -> None:
        self.song_revenue += amount
        self.track_revenue[track_name] = self.track_revenue.get(track_name, 0.0) + amount

    def add_merch_revenue(self, amount: float) -> None:
        self.merch_revenue += amount


class ArtistRevenueReport(BaseModel):
    """One artist's line in the end-of-run report.

    Serializes with the camelCase keys consumers of the report expect::

        report.model_dump(by_alias=True)
        # {"merchRevenue": 0.0, "songRevenue": 250000.0, "ranking": 1, "mostProfitableSong": "..."}
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    merch_revenue: NonNegativeFloat = Field(alias="merchRevenue")
    song_revenue: NonNegativeFloat = Field(alias="songRevenue")
    ranking: PositiveInt
    most_profitable_song: NonEmptyStr = Field(alias="mostProfitableSong")
