"""Revenue distribution and end-of-run ranking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from streaming_simulator.domain.monetization.entities import ArtistRevenue, ArtistRevenueReport
from streaming_simulator.domain.shared.constants import MonetizationConstants
from streaming_simulator.domain.shared.exceptions import ValidationError
from streaming_simulator.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from streaming_simulator.domain.accounts.entities import Listener
    from streaming_simulator.domain.catalog.entities import Track
    from streaming_simulator.domain.catalog.repository import CatalogRepository

logger = logging.getLogger(__name__)


class RevenueLedger:
    """Accumulates per-artist revenue and ranks artists at the end of a run.

    Song revenue comes from two pools. A premium listener's plays share a
    fixed pool when their pending bucket is distributed; a free listener's
    plays share the price of the ad break that interrupts them. Either way
    the pool is split evenly across the pending plays and each share is
    credited to the artist who owns the track.
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        *,
        premium_pool: float = MonetizationConstants.PREMIUM_POOL,
        round_digits: int = MonetizationConstants.ROUND_DIGITS,
    ) -> None:
        self._catalog = catalog
        self._premium_pool = premium_pool
        self._round_digits = round_digits
        self._entries: dict[str, ArtistRevenue] = {}

    @property
    def premium_pool(self) -> float:
        return self._premium_pool

    def register_artist(self, artist: str) -> ArtistRevenue:
        """Make sure ``artist`` has an entry and appears in the report."""
        entry = self._entries.get(artist)
        if entry is None:
            entry = ArtistRevenue(artist=artist)
            self._entries[artist] = entry
        return entry

    def entry(self, artist: str) -> ArtistRevenue | None:
        return self._entries.get(artist)

    def distribute_premium(self, listener: Listener) -> float:
        """Split the premium pool across the listener's pending premium plays.

        Returns:
            The amount credited, 0.0 when the bucket was empty.
        """
        distributed = self._distribute(listener.songs_listened_premium, self._premium_pool)
        if distributed:
            logger.info(
                LogTemplates.PREMIUM_DISTRIBUTED,
                len(listener.songs_listened_premium),
                listener.username,
            )
        else:
            logger.debug(LogTemplates.DISTRIBUTION_SKIPPED, "premium", listener.username)
        listener.songs_listened_premium.clear()
        return distributed

    def distribute_free(self, listener: Listener, ad_price: float) -> float:
        """Split an ad break's price across the listener's pending free plays.

        Returns:
            The amount credited, 0.0 when the bucket was empty.
        """
        if ad_price < 0:
            raise ValidationError(ErrorMessages.NEGATIVE_AD_PRICE, field="ad_price")

        distributed = self._distribute(listener.songs_listened_free, ad_price)
        if distributed:
            logger.info(
                LogTemplates.FREE_DISTRIBUTED,
                ad_price,
                len(listener.songs_listened_free),
                listener.username,
            )
        else:
            logger.debug(LogTemplates.DISTRIBUTION_SKIPPED, "free", listener.username)
        listener.songs_listened_free.clear()
        return distributed

    def _distribute(self, plays: list[Track], pool: float) -> float:
        if not plays:
            return 0.0

        share = pool / len(plays)
        for track in plays:
            artist = self._catalog.artist_of(track)
            self.register_artist(artist).add_song_revenue(track.name, share)
        return share * len(plays)

    def record_merch_sale(self, artist: str, price: float) -> None:
        self.register_artist(artist).add_merch_revenue(price)

    def most_profitable_track(self, artist: str) -> str:
        """Highest-earning track of ``artist``; ties go to the lexicographically smaller name."""
        entry = self._entries.get(artist)
        if entry is None or not entry.track_revenue:
            return MonetizationConstants.NO_PROFITABLE_TRACK

        best_name, _ = min(entry.track_revenue.items(), key=lambda item: (-item[1], item[0]))
        return best_name

    def rank(self) -> list[str]:
        """Artists by total revenue descending, then by name ascending."""
        return sorted(self._entries, key=lambda name: (-self._entries[name].total_revenue, name))

    def report(self) -> dict[str, ArtistRevenueReport]:
        """Build the end-of-run report, in ranking order."""
        result: dict[str, ArtistRevenueReport] = {}
        for ranking, artist in enumerate(self.rank(), start=1):
            entry = self._entries[artist]
            result[artist] = ArtistRevenueReport(
                merch_revenue=round(entry.merch_revenue, self._round_digits),
                song_revenue=round(entry.song_revenue, self._round_digits),
                ranking=ranking,
                most_profitable_song=self.most_profitable_track(artist),
            )
        return result
