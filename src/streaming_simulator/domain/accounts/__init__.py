"""
Accounts Bounded Context

Listener subscription state and pending revenue buckets.
"""

from streaming_simulator.domain.accounts.entities import Listener

__all__ = ["Listener"]
