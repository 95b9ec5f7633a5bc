"""Logging helpers: simulated-clock stamping and a colored console formatter."""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar

_simulation_time: ContextVar[int | None] = ContextVar("simulation_time", default=None)


def set_simulation_time(timestamp: int | None) -> None:
    """Set the simulated timestamp stamped on subsequent log records."""
    _simulation_time.set(timestamp)


def get_simulation_time() -> int | None:
    return _simulation_time.get()


class SimulationClockFilter(logging.Filter):
    """Adds ``sim_time`` to every record: the simulated timestamp, or ``-`` outside a run."""

    def filter(self, record: logging.LogRecord) -> bool:
        timestamp = _simulation_time.get()
        record.sim_time = "-" if timestamp is None else str(timestamp)
        return True


class ColoredFormatter(logging.Formatter):
    """Logging formatter that applies ANSI color codes to the levelname field.

    Colors are disabled when the ``NO_COLOR`` environment variable is set or
    when the output stream is not a TTY (e.g. redirected to a file).
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[36m",  # cyan
        logging.INFO: "\033[32m",  # green
        logging.WARNING: "\033[33m",  # yellow
        logging.ERROR: "\033[31m",  # red
        logging.CRITICAL: "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, stream=None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._stream = stream

    def _use_color(self) -> bool:
        if os.environ.get("NO_COLOR") is not None:
            return False
        stream = self._stream or sys.stderr
        return hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "sim_time"):
            record.sim_time = "-"
        if self._use_color():
            color = self.COLORS.get(record.levelno, "")
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)
