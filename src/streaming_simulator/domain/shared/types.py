"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across bounded contexts is defined here once,
so models can simply annotate their fields::

    from streaming_simulator.domain.shared.types import NonEmptyStr, DurationSeconds

    class MyModel(BaseModel):
        name: NonEmptyStr
        duration_seconds: DurationSeconds
"""

from __future__ import annotations

from typing import Annotated

from pydantic import Field

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

PositiveInt = Annotated[int, Field(gt=0)]
"""Integer > 0."""

NonNegativeFloat = Annotated[float, Field(ge=0.0)]
"""Float >= 0.0, used for revenue amounts and prices."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

UsernameStr = Annotated[str, Field(min_length=1, max_length=100)]
"""Listener or artist username: 1-100 characters."""

TrackNameStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Track or collection name: 1-500 characters."""


# ── Domain-specific numeric constraints ─────────────────────────────

DurationSeconds = Annotated[int, Field(ge=0, le=86_400)]
"""Track duration in seconds: 0 … 86 400 (24 hours). Only the ad break is 0."""

TimestampInt = Annotated[int, Field(ge=0)]
"""Simulated timestamp in seconds since the start of the run."""

PriceInt = Annotated[int, Field(ge=0)]
"""Merchandise price in whole currency units."""


# ── Settings-specific constraints ──────────────────────────────────

SkipSeconds = Annotated[int, Field(ge=1, le=3600)]
"""Podcast seek step: 1 … 3 600 seconds."""

RoundDigits = Annotated[int, Field(ge=0, le=6)]
"""Decimal places kept in the revenue report: 0 … 6."""

TopLimit = Annotated[int, Field(ge=1, le=50)]
"""Entries kept in a statistics top list: 1 … 50."""
