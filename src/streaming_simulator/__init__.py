"""Streaming Simulator - playback and monetization simulation for a music/podcast service."""

__version__ = "1.0.0"
