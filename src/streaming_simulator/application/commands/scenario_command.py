"""One scripted user action of a simulation run."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from streaming_simulator.domain.shared.types import TimestampInt, UsernameStr


class CommandName(str, Enum):
    """Commands a scenario can replay."""

    LOAD = "load"
    PLAY_PAUSE = "playPause"
    REPEAT = "repeat"
    SHUFFLE = "shuffle"
    FORWARD = "forward"
    BACKWARD = "backward"
    NEXT = "next"
    PREV = "prev"
    STATUS = "status"
    AD_BREAK = "adBreak"
    BUY_PREMIUM = "buyPremium"
    CANCEL_PREMIUM = "cancelPremium"
    BUY_MERCH = "buyMerch"
    WRAPPED = "wrapped"
    TRACK_LISTENS = "trackListens"


class ScenarioCommand(BaseModel):
    """A command as it appears in a scenario file.

    ``command`` is kept as a plain string so that unknown commands still load
    and are reported at dispatch time. Which of the optional fields matter
    depends on the command: ``type`` and ``name`` for ``load``, ``name`` for ``trackListens``, ``seed`` for
    ``shuffle``, ``price`` for ``adBreak``, ``artist`` for ``wrapped`` and
    ``buyMerch``, ``merch`` for ``buyMerch``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    command: str
    username: UsernameStr
    timestamp: TimestampInt
    type: str | None = None
    name: str | None = None
    seed: int | None = None
    price: int | None = None
    artist: str | None = None
    merch: str | None = None

    @property
    def known_name(self) -> CommandName | None:
        try:
            return CommandName(self.command)
        except ValueError:
            return None
