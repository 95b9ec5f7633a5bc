"""
Listening Bounded Context

Listen attribution: per-track totals, per-user counts and unique listeners.
"""

from streaming_simulator.domain.listening.events import ListenEvent
from streaming_simulator.domain.listening.ledger import ListenLedger, TrackListens

__all__ = ["ListenEvent", "ListenLedger", "TrackListens"]
