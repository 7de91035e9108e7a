"""Terminal CLI entrypoint for Mapty."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from mapty.core.config import MaptySettings, configure_logging
from mapty.ui.formatting import summary_line
from mapty.workout.factory import WorkoutValidationError, restore_workout
from mapty.workout.model import WorkoutEntry
from mapty.workout.persistence import FileStorage, WorkoutGateway

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = MaptySettings()
    parser = argparse.ArgumentParser(description="Mapty workout tracker")
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI) with the workout map",
    )
    parser.add_argument(
        "--web-host",
        default=defaults.web_host,
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=defaults.web_port,
        help="Port for --ui-web",
    )
    parser.add_argument("--list", action="store_true", help="Print stored workouts")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=defaults.data_dir,
        help="Directory holding the stored workout list",
    )
    parser.add_argument(
        "--zoom",
        type=int,
        default=defaults.zoom_level,
        help="Map zoom level used when showing a workout",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> MaptySettings:
    return MaptySettings(
        data_dir=args.data_dir,
        zoom_level=args.zoom,
        web_host=args.web_host,
        web_port=args.web_port,
    )


def run_list(settings: MaptySettings) -> int:
    gateway = WorkoutGateway(FileStorage(settings.data_dir), key=settings.storage_key)
    records = gateway.load()

    if not records:
        print("No workouts recorded")
        return 0

    for stored in records:
        record: WorkoutEntry
        try:
            record = restore_workout(stored)
        except WorkoutValidationError as exc:
            logger.warning("Stored workout %s is invalid: %s", stored.id, exc)
            record = stored
        print(
            f"{record.title:<24} {record.coords.lat:>9.4f},{record.coords.lng:>10.4f}  "
            f"{summary_line(record)}"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(debug=args.debug)
    settings = settings_from_args(args)

    if args.ui_web:
        from mapty.ui.web_app import run_web_ui

        return run_web_ui(settings)

    if args.list:
        return run_list(settings)

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
