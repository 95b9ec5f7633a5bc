"""Application services coordinating the domain for user commands."""

from streaming_simulator.application.services.player_service import (
    CommandResult,
    PlayerApplicationService,
)

__all__ = ["CommandResult", "PlayerApplicationService"]
