"""Centralized constants for simulation defaults and log levels.

This module provides reusable constants that reduce magic strings and numbers.
"""

from __future__ import annotations


class PlaybackConstants:
    """Player behavior constants."""

    # Podcast forward/backward seek
    SKIP_SECONDS = 90

    AD_BREAK_NAME = "Ad Break"
    AD_BREAK_OWNER = "platform"


class MonetizationConstants:
    """Revenue distribution constants."""

    # Value shared by all tracks a premium listener played between distributions
    PREMIUM_POOL = 1_000_000.0
    ROUND_DIGITS = 2
    NO_PROFITABLE_TRACK = "N/A"


class StatisticsConstants:
    """Statistics report limits."""

    TOP_LIMIT = 5


class LogLevels:
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
