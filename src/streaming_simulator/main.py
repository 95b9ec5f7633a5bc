#!/usr/bin/env python3
"""Main entry point for the streaming simulator."""

from __future__ import annotations

import argparse
import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from streaming_simulator.domain.shared.exceptions import DomainError
from streaming_simulator.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from streaming_simulator.config.settings import Settings

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning("Could not load %s, falling back to basic config", _LOGGING_CONFIG_PATH)
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="streaming-simulator",
        description="Replay a scripted streaming scenario and print the revenue report.",
    )
    parser.add_argument("scenario", type=Path, help="Path to the scenario JSON file")
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Write the results here instead of stdout"
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser.parse_args(argv)


def run_scenario(scenario_path: Path, settings: Settings) -> dict[str, Any]:
    """Replay a scenario file and return the command outputs and the final report."""
    from streaming_simulator.config.container import create_container
    from streaming_simulator.infrastructure.scenario.loader import load_scenario

    scenario = load_scenario(scenario_path)
    container = create_container(settings, scenario)
    runner = container.simulation_runner

    outputs = runner.run(scenario.commands)
    report = runner.end_program()
    return {
        "commands": [output.to_output() for output in outputs],
        "report": report.to_output(),
    }


def main(argv: list[str] | None = None) -> int:
    from streaming_simulator.config.settings import get_settings

    args = parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.effective_log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.APP_STARTING.format(environment=settings.environment))

    try:
        result = run_scenario(args.scenario, settings)
        text = json.dumps(result, indent=2)
        if args.output is None:
            print(text)
        else:
            args.output.write_text(text + "\n", encoding="utf-8")
            logger.info(LogTemplates.REPORT_WRITTEN, args.output)
        return 0
    except (DomainError, PydanticValidationError, OSError) as e:
        logger.exception(LogTemplates.APP_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
