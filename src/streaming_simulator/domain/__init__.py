"""
Domain Layer

Contains the core simulation logic organized by bounded contexts:
- catalog: Tracks, collections and merchandise
- accounts: Listeners and their subscriptions
- listening: Per-track listen counters
- playback: Loaded sources and the time simulation step
- monetization: Revenue distribution and artist ranking
- statistics: Artist summaries built from the listen counters
- shared: Common exceptions, messages and types
"""
