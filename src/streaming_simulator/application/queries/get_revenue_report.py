"""Query for the end-of-run artist revenue report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from streaming_simulator.domain.monetization.entities import ArtistRevenueReport

if TYPE_CHECKING:
    from ...domain.monetization.ledger import RevenueLedger


class GetRevenueReportQuery(BaseModel):
    model_config = ConfigDict(frozen=True)


class RevenueReport(BaseModel):
    """Artists in ranking order with their rounded revenue."""

    artists: dict[str, ArtistRevenueReport] = Field(default_factory=dict)

    @property
    def ranking(self) -> list[str]:
        return list(self.artists)

    def to_output(self) -> dict[str, Any]:
        """The report keyed by artist, with camelCase field names."""
        return {name: entry.model_dump(by_alias=True) for name, entry in self.artists.items()}


class GetRevenueReportHandler:

    def __init__(self, *, revenue_ledger: RevenueLedger) -> None:
        self._revenue_ledger = revenue_ledger

    def handle(self, query: GetRevenueReportQuery) -> RevenueReport:
        return RevenueReport(artists=self._revenue_ledger.report())
