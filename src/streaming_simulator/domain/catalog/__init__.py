"""
Catalog Bounded Context

Tracks, collections and merchandise shared by every listener of a run.
"""

from streaming_simulator.domain.catalog.entities import (
    AD_BREAK,
    CollectionKind,
    Merchandise,
    Track,
    TrackCollection,
    TrackKind,
)
from streaming_simulator.domain.catalog.repository import CatalogRepository

__all__ = [
    "AD_BREAK",
    "CollectionKind",
    "Merchandise",
    "Track",
    "TrackCollection",
    "TrackKind",
    "CatalogRepository",
]
