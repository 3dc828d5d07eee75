#!/usr/bin/env python3
"""
Recording export script

Usage:
  python scripts/export_scenario.py --recording <path> [--config <yaml>] [options]

Examples:
  python scripts/export_scenario.py --recording recordings/checkout.yaml
  python scripts/export_scenario.py --recording recordings/checkout.json --package computerdatabase --class-name CheckoutSimulation
  EXPORT_OUTPUT_FOLDER=out python scripts/export_scenario.py --recording recordings/checkout.yaml --no-automatic-referer
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

from application.services.scenario_exporter import ScenarioExporter
from domain.exceptions import EmptyScenarioError, OutputWriteError
from infrastructure.config.export_config_loader import ConfigError, ExportConfigLoader
from infrastructure.files.file_artifact_writer import FileArtifactWriter
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.rendering.jinja_simulation_renderer import JinjaSimulationRenderer
from infrastructure.scenario.base_loader import ScenarioLoadError
from infrastructure.scenario.loader_registry import ScenarioLoaderRegistry


EXIT_OK = 0
EXIT_WRITE_FAILED = 1
EXIT_BAD_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export a recorded scenario to a simulation script")
    parser.add_argument("--recording", type=str, required=True, help="recorded elements (.yaml/.yml/.json)")
    parser.add_argument("--config", type=str, help="export settings (YAML)")
    parser.add_argument("--output-folder", type=str)
    parser.add_argument("--package", type=str)
    parser.add_argument("--class-name", type=str)
    parser.add_argument("--encoding", type=str)
    parser.add_argument("--request-bodies-folder", type=str)
    parser.add_argument("--scenario-name", type=str)
    parser.add_argument("--no-automatic-referer", action="store_true")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


def _overrides(args: argparse.Namespace) -> dict:
    overrides = {
        "output_folder": args.output_folder,
        "package": args.package,
        "class_name": args.class_name,
        "encoding": args.encoding,
        "request_bodies_folder": args.request_bodies_folder,
        "scenario_name": args.scenario_name,
    }
    if args.no_automatic_referer:
        overrides["automatic_referer"] = False
    return overrides


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    setup_console_logging(level=args.log_level)
    logger = LoguruLogger().bind(recording=args.recording)

    try:
        config = ExportConfigLoader().load(args.config, _overrides(args))
        scenario = ScenarioLoaderRegistry().load(Path(args.recording))
        exporter = ScenarioExporter(
            config=config,
            renderer=JinjaSimulationRenderer(),
            writer=FileArtifactWriter(),
            logger=logger,
        )
        path = exporter.export(scenario)
    except (ConfigError, ScenarioLoadError, EmptyScenarioError) as exc:
        logger.error("export.rejected", error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_BAD_INPUT)
    except OutputWriteError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_WRITE_FAILED)

    print(f"Simulation written: {path}")
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
