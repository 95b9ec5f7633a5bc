"""
Statistics Bounded Context

Read-only "wrapped" summaries computed from the listen ledger.
"""

from streaming_simulator.domain.statistics.services import (
    ArtistStats,
    ArtistStatsService,
    HostStats,
    HostStatsService,
    StatsRole,
    UserStats,
    UserStatsService,
    WrappedStats,
    WrappedStatsService,
)

__all__ = [
    "ArtistStats",
    "ArtistStatsService",
    "HostStats",
    "HostStatsService",
    "StatsRole",
    "UserStats",
    "UserStatsService",
    "WrappedStats",
    "WrappedStatsService",
]
