"""Application layer - use cases driving the domain.

- services: per-command operations on listeners and their players
- commands: scenario commands and the simulation runner
- queries: read-only reports
"""
