"""
Tests for main.py - Main Entry Point

Tests for the main entry point including:
- Logging configuration
- Argument parsing
- Running a scenario file end to end
- Error handling
"""

import json
import logging
from unittest.mock import MagicMock, mock_open, patch

import pytest

from streaming_simulator.config.settings import Settings
from streaming_simulator.main import cli, main, parse_args, setup_logging


class TestLoggingSetup:
    """Tests for logging configuration."""

    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {"streaming_simulator": {"level": "DEBUG"}},
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        """Should call dictConfig when logging_config.json exists."""
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self):
        """Should fallback to basicConfig when logging_config.json is missing."""
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()
            assert mock_bc.call_args[1]["level"] == logging.INFO

    def test_fallback_to_basicconfig_when_json_malformed(self):
        """Should fallback to basicConfig when JSON is malformed."""
        m = mock_open(read_data="{invalid json")
        with (
            patch("builtins.open", m),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_root_logger_level_overridden(self):
        """Should override root logger level with the provided log_level."""
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig"),
            patch("logging.getLogger") as mock_get_logger,
        ):
            mock_root = MagicMock()
            mock_get_logger.return_value = mock_root

            setup_logging("DEBUG")

            mock_root.setLevel.assert_called_once_with(logging.DEBUG)


class TestParseArgs:
    """Tests for command line parsing."""

    def test_scenario_and_output(self, tmp_path):
        """Should parse the scenario path and optional flags."""
        args = parse_args([str(tmp_path / "s.json"), "-o", str(tmp_path / "out.json")])

        assert args.scenario == tmp_path / "s.json"
        assert args.output == tmp_path / "out.json"
        assert args.log_level is None

    def test_scenario_required(self):
        """Should exit when the scenario path is missing."""
        with pytest.raises(SystemExit):
            parse_args([])


class TestMainFunction:
    """Tests for main entry point function."""

    @pytest.fixture
    def scenario_path(self, tmp_path, scenario_document):
        path = tmp_path / "scenario.json"
        path.write_text(json.dumps(scenario_document), encoding="utf-8")
        return path

    @pytest.fixture(autouse=True)
    def patched_environment(self):
        settings = Settings(_env_file=None, environment="test")
        with (
            patch("streaming_simulator.config.settings.get_settings", return_value=settings),
            patch("streaming_simulator.main.setup_logging") as mock_setup,
        ):
            yield mock_setup

    def test_main_writes_output_file(self, scenario_path, tmp_path):
        """Should replay the scenario and write commands and report as JSON."""
        output = tmp_path / "out.json"

        exit_code = main([str(scenario_path), "--output", str(output)])

        assert exit_code == 0
        result = json.loads(output.read_text(encoding="utf-8"))
        assert [c["command"] for c in result["commands"]] == ["load", "adBreak", "status"]
        assert result["commands"][2]["stats"]["name"] == "song2"
        assert result["report"]["alpha"] == {
            "merchRevenue": 0.0,
            "songRevenue": 100.0,
            "ranking": 1,
            "mostProfitableSong": "song1",
        }

    def test_main_prints_to_stdout(self, scenario_path, capsys):
        """Should print the JSON result when no output file is given."""
        exit_code = main([str(scenario_path)])

        assert exit_code == 0
        assert "report" in json.loads(capsys.readouterr().out)

    def test_main_uses_log_level_flag(self, scenario_path, patched_environment):
        """Should prefer the command line log level over settings."""
        main([str(scenario_path), "--log-level", "WARNING"])

        patched_environment.assert_called_once_with("WARNING")

    def test_main_missing_file(self, tmp_path):
        """Should return an error code when the scenario file is missing."""
        assert main([str(tmp_path / "missing.json")]) == 1

    def test_main_invalid_document(self, tmp_path):
        """Should return an error code for a malformed scenario."""
        path = tmp_path / "bad.json"
        path.write_text('{"tracks": [{"name": "x"}]}', encoding="utf-8")

        assert main([str(path)]) == 1

    def test_main_dangling_reference(self, tmp_path, scenario_document):
        """Should return an error code when a collection names an unknown track."""
        scenario_document["collections"][0]["tracks"].append("ghost")
        path = tmp_path / "dangling.json"
        path.write_text(json.dumps(scenario_document), encoding="utf-8")

        assert main([str(path)]) == 1


class TestCli:
    """Tests for the console script wrapper."""

    def test_cli_exits_with_main_code(self):
        """Should exit with the code main returns."""
        with patch("streaming_simulator.main.main", return_value=3), pytest.raises(SystemExit) as exc:
            cli()

        assert exc.value.code == 3
