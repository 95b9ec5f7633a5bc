"""Listener accounts: subscription status and pending revenue buckets."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from streaming_simulator.domain.catalog.entities import Merchandise, Track
from streaming_simulator.domain.shared.types import UsernameStr


class Listener(BaseModel):
    """A user who plays music and pays for it, either with a subscription or with ads.

    Songs played since the last distribution are appended to one of two
    pending buckets depending on the subscription at the time of the listen.
    The buckets are plain lists; the revenue ledger clears them after each
    distribution.
    """

    model_config = ConfigDict(validate_assignment=True)

    username: UsernameStr
    is_premium: bool = False
    songs_listened_premium: list[Track] = Field(default_factory=list)
    songs_listened_free: list[Track] = Field(default_factory=list)
    purchased_merch: list[Merchandise] = Field(default_factory=list)

    def add_pending_listen(self, track: Track) -> None:
        """Append a played song to the bucket matching the current subscription."""
        if self.is_premium:
            self.songs_listened_premium.append(track)
        else:
            self.songs_listened_free.append(track)

    def buy_premium(self) -> bool:
        """Switch to the premium tier. Returns False if already premium."""
        if self.is_premium:
            return False
        self.is_premium = True
        return True

    def cancel_premium(self) -> bool:
        """Switch back to the free tier. Returns False if not premium."""
        if not self.is_premium:
            return False
        self.is_premium = False
        return True

    def record_purchase(self, merchandise: Merchandise) -> None:
        self.purchased_merch.append(merchandise)

    @property
    def purchased_merch_names(self) -> list[str]:
        return [item.name for item in self.purchased_merch]
