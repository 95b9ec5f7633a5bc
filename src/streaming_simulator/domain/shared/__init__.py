"""
Shared Domain Kernel

Contains exceptions, constants, messages and constrained types shared across
all bounded contexts.
"""

from streaming_simulator.domain.shared.exceptions import (
    DomainError,
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "InvalidOperationError",
]
