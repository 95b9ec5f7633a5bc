"""
Application Commands (CQRS Write Side)

Scenario commands and the runner that replays them against the players.
"""

from streaming_simulator.application.commands.scenario_command import CommandName, ScenarioCommand
from streaming_simulator.application.commands.simulation_runner import (
    CommandOutput,
    SimulationRunner,
)

__all__ = [
    "CommandName",
    "ScenarioCommand",
    "CommandOutput",
    "SimulationRunner",
]
