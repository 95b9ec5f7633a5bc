"""Dependency Injection Container

Wires the ledgers, services and handlers of one simulation run. Components
are created on first access and cached for the rest of the run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.commands.simulation_runner import SimulationRunner
    from ..application.queries.get_revenue_report import GetRevenueReportHandler
    from ..application.queries.get_track_listens import GetTrackListensHandler
    from ..application.services.player_service import PlayerApplicationService
    from ..domain.listening.ledger import ListenLedger
    from ..domain.monetization.ledger import RevenueLedger
    from ..domain.statistics.services import WrappedStatsService
    from ..infrastructure.scenario.loader import Scenario
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    The scenario supplies the catalog and the listeners, so it has to be set
    before any component that depends on it is accessed.
    """

    settings: Settings
    _scenario: Scenario | None = None

    # Ledgers
    _listen_ledger: ListenLedger | None = None
    _revenue_ledger: RevenueLedger | None = None

    # Domain services
    _stats_service: WrappedStatsService | None = None

    # Application services
    _player_service: PlayerApplicationService | None = None
    _simulation_runner: SimulationRunner | None = None

    # Query handlers
    _revenue_report_handler: GetRevenueReportHandler | None = None
    _track_listens_handler: GetTrackListensHandler | None = None

    def set_scenario(self, scenario: Scenario) -> None:
        """Set the scenario whose catalog and listeners the run uses."""
        self._scenario = scenario

    @property
    def scenario(self) -> Scenario:
        """Get the loaded scenario."""
        if self._scenario is None:
            raise RuntimeError("Scenario not loaded. Call set_scenario() first.")
        return self._scenario

    # === Ledgers ===

    @property
    def listen_ledger(self) -> ListenLedger:
        if self._listen_ledger is None:
            from ..domain.listening.ledger import ListenLedger

            self._listen_ledger = ListenLedger()
        return self._listen_ledger

    @property
    def revenue_ledger(self) -> RevenueLedger:
        if self._revenue_ledger is None:
            from ..domain.monetization.ledger import RevenueLedger

            self._revenue_ledger = RevenueLedger(
                self.scenario.catalog,
                premium_pool=self.settings.monetization.premium_pool,
                round_digits=self.settings.monetization.round_digits,
            )
        return self._revenue_ledger

    # === Domain Services ===

    @property
    def stats_service(self) -> WrappedStatsService:
        if self._stats_service is None:
            from ..domain.statistics.services import WrappedStatsService

            self._stats_service = WrappedStatsService(
                self.scenario.catalog,
                self.listen_ledger,
                top_limit=self.settings.statistics.top_limit,
            )
        return self._stats_service

    # === Application Services ===

    @property
    def player_service(self) -> PlayerApplicationService:
        if self._player_service is None:
            from ..application.services.player_service import PlayerApplicationService

            self._player_service = PlayerApplicationService(
                catalog=self.scenario.catalog,
                listeners=self.scenario.listeners,
                listen_ledger=self.listen_ledger,
                revenue_ledger=self.revenue_ledger,
                stats_service=self.stats_service,
                skip_seconds=self.settings.playback.skip_seconds,
            )
        return self._player_service

    @property
    def simulation_runner(self) -> SimulationRunner:
        if self._simulation_runner is None:
            from ..application.commands.simulation_runner import SimulationRunner

            self._simulation_runner = SimulationRunner(
                player_service=self.player_service,
                report_handler=self.revenue_report_handler,
                track_listens_handler=self.track_listens_handler,
            )
        return self._simulation_runner

    # === Query Handlers ===

    @property
    def revenue_report_handler(self) -> GetRevenueReportHandler:
        if self._revenue_report_handler is None:
            from ..application.queries.get_revenue_report import GetRevenueReportHandler

            self._revenue_report_handler = GetRevenueReportHandler(
                revenue_ledger=self.revenue_ledger
            )
        return self._revenue_report_handler

    @property
    def track_listens_handler(self) -> GetTrackListensHandler:
        if self._track_listens_handler is None:
            from ..application.queries.get_track_listens import GetTrackListensHandler

            self._track_listens_handler = GetTrackListensHandler(
                catalog=self.scenario.catalog, listen_ledger=self.listen_ledger
            )
        return self._track_listens_handler


def create_container(settings: Settings, scenario: Scenario | None = None) -> Container:
    """Create a new dependency injection container."""
    container = Container(settings)
    if scenario is not None:
        container.set_scenario(scenario)
        logger.debug("Container created with %s listeners", len(scenario.listeners))
    return container
