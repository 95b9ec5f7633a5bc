"""Infrastructure layer - concrete adapters for the domain interfaces.

This layer contains implementations for:
- Catalog (in-memory repository)
- Scenario (JSON file loading)
"""
