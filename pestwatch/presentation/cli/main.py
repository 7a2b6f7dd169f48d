"""CLI interface for weather-driven pest risk advisories."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from ...application.services.pest_advisory_service import PestAdvisoryService
from ...domain.exceptions import InvalidInputError
from ...infrastructure.repositories.file_weather_snapshot_repository import (
    FileWeatherSnapshotRepository,
)
from ..schemas import AssessmentResponse, SnapshotRequest

from config.settings import CLI_SETTINGS, LOG_FORMAT, LOG_LEVEL

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=CLI_SETTINGS["prog"], description=CLI_SETTINGS["description"]
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {CLI_SETTINGS['version']}"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === assess: one snapshot ===
    assess_parser = subparsers.add_parser("assess", help="Assess pest risk for one weather reading")
    assess_parser.add_argument("--input", type=str, help="JSON file with the weather reading")
    assess_parser.add_argument("--temperature", type=float, help="Temperature in Celsius")
    assess_parser.add_argument("--humidity", type=float, help="Relative humidity in percent")
    assess_parser.add_argument("--condition", type=str, help="e.g. 'Rain', 'Clouds', 'Clear'")
    assess_parser.add_argument("--wind-speed", type=float, default=None, help="Wind speed in m/s")
    assess_parser.add_argument("--json", action="store_true", help="Print the assessment as JSON")
    assess_parser.add_argument(
        "--demo-on-error", action="store_true", help="Use demo weather data if the input is invalid"
    )

    # === batch: a table of snapshots ===
    batch_parser = subparsers.add_parser("batch", help="Assess every reading in a CSV/Excel file")
    batch_parser.add_argument("--input", type=str, required=True, help="CSV or .xlsx file")
    batch_parser.add_argument("--output", type=str, default=None, help="Where to write results")

    # === badge: severity -> display variant ===
    badge_parser = subparsers.add_parser("badge", help="Badge variant for a severity label")
    badge_parser.add_argument("severity", type=str, help="e.g. 'High'")

    return parser


def _read_payload(args: argparse.Namespace) -> dict:
    if args.input:
        with open(args.input, "r", encoding="utf-8") as f:
            return json.load(f)

    payload = {
        "temperature": args.temperature,
        "humidity": args.humidity,
        "condition": args.condition,
    }
    if args.wind_speed is not None:
        payload["windSpeed"] = args.wind_speed
    return payload


def _print_assessment(response: AssessmentResponse) -> None:
    print("\n" + "=" * 50)
    print(" PEST RISK ASSESSMENT ")
    print("=" * 50)
    print(f" Risk level: {response.risk_level} ({response.badge})")
    print("-" * 50)
    print("Alerts:")
    for alert in response.alerts:
        print(f"  ! {alert}")
    if response.pest_types:
        print("\nPests at risk:")
        print("  " + ", ".join(response.pest_types))
    print("\nRecommendations:")
    for rec in response.recommendations:
        print(f"  • {rec}")
    print("=" * 50)


def run_assess(service: PestAdvisoryService, args: argparse.Namespace) -> int:
    payload = _read_payload(args)
    try:
        snapshot = SnapshotRequest.parse_payload(payload).to_entity()
        assessment = service.assess(snapshot)
    except InvalidInputError as e:
        if not args.demo_on_error:
            raise
        logger.warning(f"Invalid weather input ({e}), using demo data")
        assessment = service.assess(service.demo_snapshot)

    response = AssessmentResponse.from_entity(
        assessment, badge=service.badge_for(assessment.risk_level.value)
    )
    if args.json:
        print(response.to_json())
    else:
        _print_assessment(response)
    return 0


def run_batch(args: argparse.Namespace) -> int:
    repo = FileWeatherSnapshotRepository(args.input)
    service = PestAdvisoryService(snapshot_repo=repo)
    df = service.assess_batch()

    print("\n" + "=" * 50)
    print(" BATCH ASSESSMENT ")
    print("=" * 50)
    print(f" Readings: {len(df)} | Invalid: {int(df['error'].notna().sum())}")
    for level, count in df["risk_level"].value_counts().items():
        print(f"  • {level}: {count}")
    print("=" * 50)

    if args.output:
        path = service.export_batch(df, args.output)
        print(f"Results saved to: {path}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "assess" and not args.input and None in (
        args.temperature,
        args.humidity,
        args.condition,
    ):
        parser.error("assess needs --input or all of --temperature, --humidity, --condition")

    try:
        if args.command == "assess":
            return run_assess(PestAdvisoryService(), args)
        elif args.command == "batch":
            return run_batch(args)
        elif args.command == "badge":
            print(PestAdvisoryService().badge_for(args.severity))
            return 0
    except InvalidInputError as e:
        logger.error(f"Invalid input: {e}")
    except (FileNotFoundError, ValueError, json.JSONDecodeError) as e:
        logger.error(f"Could not read input: {e}")
    except Exception as e:
        logger.error(f"Command failed: {e}", exc_info=True)
    return 1


if __name__ == "__main__":
    sys.exit(main())
