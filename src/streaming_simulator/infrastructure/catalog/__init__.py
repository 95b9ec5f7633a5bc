"""Catalog repository implementations."""

from streaming_simulator.infrastructure.catalog.in_memory_catalog import InMemoryCatalog

__all__ = ["InMemoryCatalog"]
