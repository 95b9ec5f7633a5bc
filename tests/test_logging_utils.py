"""Tests for the logging helpers."""

import logging
from io import StringIO

import pytest

from streaming_simulator.utils.logging import (
    ColoredFormatter,
    SimulationClockFilter,
    get_simulation_time,
    set_simulation_time,
)

RESET = "\033[0m"


def _make_record(level: int = logging.INFO, message: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


def _tty_stream() -> StringIO:
    stream = StringIO()
    stream.isatty = lambda: True  # type: ignore[method-assign]
    return stream


@pytest.fixture(autouse=True)
def reset_clock():
    set_simulation_time(None)
    yield
    set_simulation_time(None)


class TestSimulationClockFilter:
    """Tests for stamping records with the simulated time."""

    def test_outside_run(self):
        """Should stamp a dash when no simulation is running."""
        record = _make_record()

        assert SimulationClockFilter().filter(record) is True
        assert record.sim_time == "-"

    def test_inside_run(self):
        """Should stamp the current simulated timestamp."""
        set_simulation_time(250)
        record = _make_record()
        SimulationClockFilter().filter(record)

        assert record.sim_time == "250"
        assert get_simulation_time() == 250


class TestColoredFormatter:
    """Tests for ANSI color formatting."""

    @pytest.mark.parametrize("level", [logging.DEBUG, logging.INFO, logging.ERROR])
    def test_color_applied_on_tty(self, level, monkeypatch):
        """Should color the level name on a TTY."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=_tty_stream())

        output = fmt.format(_make_record(level))

        assert ColoredFormatter.COLORS[level] in output
        assert RESET in output

    def test_no_color_when_no_color_env_set(self, monkeypatch):
        """Should not apply colors when NO_COLOR env var is set."""
        monkeypatch.setenv("NO_COLOR", "1")
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=_tty_stream())

        assert fmt.format(_make_record()) == "INFO | test"

    def test_no_color_when_not_tty(self, monkeypatch):
        """Should not apply colors when the stream is not a TTY."""
        monkeypatch.delenv("NO_COLOR", raising=False)
        fmt = ColoredFormatter("%(levelname)s | %(message)s", stream=StringIO())

        assert fmt.format(_make_record()) == "INFO | test"

    def test_sim_time_defaults_without_filter(self, monkeypatch):
        """Should format sim_time even when the filter was not attached."""
        monkeypatch.setenv("NO_COLOR", "1")
        fmt = ColoredFormatter("t=%(sim_time)s %(message)s")

        assert fmt.format(_make_record()) == "t=- test"
