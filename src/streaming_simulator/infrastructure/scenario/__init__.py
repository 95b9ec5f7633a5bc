"""Scenario file parsing."""

from streaming_simulator.infrastructure.scenario.loader import Scenario, build_scenario, load_scenario
from streaming_simulator.infrastructure.scenario.models import ScenarioFile

__all__ = ["Scenario", "ScenarioFile", "build_scenario", "load_scenario"]
