"""
Monetization Bounded Context

Premium and ad-supported revenue distribution, merchandise sales and the
end-of-run artist ranking.
"""

from streaming_simulator.domain.monetization.entities import ArtistRevenue, ArtistRevenueReport
from streaming_simulator.domain.monetization.ledger import RevenueLedger

__all__ = ["ArtistRevenue", "ArtistRevenueReport", "RevenueLedger"]
