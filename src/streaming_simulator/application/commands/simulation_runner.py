"""
Simulation Runner

Replays scenario commands in timestamp order. Before each command every
player is moved forward by the time elapsed since the previous command, so
the command observes the state at its own timestamp.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from ...domain.playback.engine import PlayerStatus
from ...domain.shared.exceptions import ValidationError
from ...domain.shared.messages import ErrorMessages, LogTemplates, PlayerMessages
from ...domain.statistics.services import WrappedStats
from ...utils.logging import set_simulation_time
from ..queries.get_revenue_report import GetRevenueReportQuery, RevenueReport
from ..queries.get_track_listens import GetTrackListensQuery, TrackListensInfo
from ..services.player_service import CommandResult
from .scenario_command import CommandName, ScenarioCommand

if TYPE_CHECKING:
    from ..queries.get_revenue_report import GetRevenueReportHandler
    from ..queries.get_track_listens import GetTrackListensHandler
    from ..services.player_service import PlayerApplicationService

logger = logging.getLogger(__name__)


class CommandOutput(BaseModel):
    """One line of the run's output, echoing the command it answers."""

    command: str
    user: str
    timestamp: int
    message: str | None = None
    stats: PlayerStatus | None = None
    result: WrappedStats | TrackListensInfo | None = None

    @classmethod
    def from_result(cls, command: ScenarioCommand, result: CommandResult) -> CommandOutput:
        return cls(
            command=command.command,
            user=command.username,
            timestamp=command.timestamp,
            message=result.message or None,
            stats=result.stats,
            result=result.result,
        )

    def to_output(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SimulationRunner:
    """Owns the simulated clock and routes commands to the player service."""

    def __init__(
        self,
        *,
        player_service: PlayerApplicationService,
        report_handler: GetRevenueReportHandler,
        track_listens_handler: GetTrackListensHandler,
    ) -> None:
        self._service = player_service
        self._report_handler = report_handler
        self._track_listens_handler = track_listens_handler
        self._clock = 0
        self._handlers: dict[CommandName, Callable[[ScenarioCommand], CommandResult]] = {
            CommandName.LOAD: lambda c: self._service.load(c.username, c.type, c.name),
            CommandName.PLAY_PAUSE: lambda c: self._service.play_pause(c.username),
            CommandName.REPEAT: lambda c: self._service.repeat(c.username),
            CommandName.SHUFFLE: lambda c: self._service.shuffle(c.username, c.seed),
            CommandName.FORWARD: lambda c: self._service.forward(c.username),
            CommandName.BACKWARD: lambda c: self._service.backward(c.username),
            CommandName.NEXT: lambda c: self._service.next(c.username),
            CommandName.PREV: lambda c: self._service.prev(c.username),
            CommandName.STATUS: lambda c: self._service.status(c.username),
            CommandName.AD_BREAK: lambda c: self._service.ad_break(c.username, c.price),
            CommandName.BUY_PREMIUM: lambda c: self._service.buy_premium(c.username),
            CommandName.CANCEL_PREMIUM: lambda c: self._service.cancel_premium(c.username),
            CommandName.BUY_MERCH: lambda c: self._service.buy_merch(c.username, c.artist, c.merch),
            CommandName.WRAPPED: lambda c: self._service.wrapped(c.username, c.artist),
            CommandName.TRACK_LISTENS: self._track_listens,
        }

    @property
    def clock(self) -> int:
        return self._clock

    def run(self, commands: Iterable[ScenarioCommand]) -> list[CommandOutput]:
        commands = list(commands)
        logger.info(LogTemplates.SIMULATION_STARTED, len(commands), len(self._service.listeners))
        return [self.execute(command) for command in commands]

    def advance_to(self, timestamp: int) -> None:
        """Move every player forward to ``timestamp``.

        Raises:
            ValidationError: If ``timestamp`` lies before the current clock.
        """
        elapsed = timestamp - self._clock
        if elapsed < 0:
            raise ValidationError(ErrorMessages.NEGATIVE_ELAPSED_TIME, field="timestamp")
        if elapsed:
            logger.debug(LogTemplates.TIME_ADVANCED, elapsed, timestamp)
            self._service.advance_time(elapsed)
        self._clock = timestamp
        set_simulation_time(timestamp)

    def execute(self, command: ScenarioCommand) -> CommandOutput:
        self.advance_to(command.timestamp)

        name = command.known_name
        if name is None:
            logger.warning(LogTemplates.COMMAND_UNKNOWN, command.command, command.timestamp)
            result = CommandResult.fail(PlayerMessages.UNKNOWN_COMMAND.format(command=command.command))
        else:
            logger.debug(LogTemplates.COMMAND_DISPATCHED, name.value, command.username)
            result = self._handlers[name](command)
        return CommandOutput.from_result(command, result)

    def _track_listens(self, command: ScenarioCommand) -> CommandResult:
        if not command.name:
            return CommandResult.fail(PlayerMessages.TRACK_NAME_MISSING)
        info = self._track_listens_handler.handle(GetTrackListensQuery(track_name=command.name))
        if not info.found:
            return CommandResult.fail(PlayerMessages.TRACK_NOT_FOUND.format(name=command.name))
        return CommandResult(success=True, result=info)

    def end_program(self) -> RevenueReport:
        """Pay out pending premium plays and build the final revenue report."""
        self._service.settle_premium()
        report = self._report_handler.handle(GetRevenueReportQuery())
        logger.info(LogTemplates.SIMULATION_FINISHED, self._clock)
        set_simulation_time(None)
        return report
