"""
Application Queries (CQRS Read Side)

Query objects and handlers for read operations.
Queries do not modify state, only retrieve data.
"""

from streaming_simulator.application.queries.get_revenue_report import (
    GetRevenueReportHandler,
    GetRevenueReportQuery,
    RevenueReport,
)
from streaming_simulator.application.queries.get_track_listens import (
    GetTrackListensHandler,
    GetTrackListensQuery,
    TrackListensInfo,
)

__all__ = [
    "GetRevenueReportQuery",
    "GetRevenueReportHandler",
    "RevenueReport",
    "GetTrackListensQuery",
    "GetTrackListensHandler",
    "TrackListensInfo",
]
