"""Command-line entry point.

Builds the stop graph, exports it as Turtle and RDF/XML, then filters it
by one rectangle (a preset, four bounds, or an interactive choice) or, by
default, by every preset area.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import AppConfig, get_config
from .container import Container
from .domain.areas import DEFAULT_AREA, PRESET_AREAS, get_area
from .domain.errors import StopGraphError
from .domain.models import GeographicBounds
from .observability import LOG_LEVELS, configure_logging
from .services import StopGraphService
from .services.reporting import (
    format_filter_result,
    format_generated_files,
    format_sample,
    format_statistics,
)

CUSTOM_KEY = "personalizada"

# Presets offered in the interactive menu, in menu order.
MENU_AREAS = ("madrid", "centro_espana", "extremadura", "norte_espana")

Selection = Optional[Tuple[str, GeographicBounds]]


def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="stopgraph",
        description="Build an RDF graph of transit stops and filter it by area.",
    )
    ap.add_argument("--stops", type=Path, default=None, help="GTFS stops.txt file")
    ap.add_argument("--output-dir", type=Path, default=None)
    limit = ap.add_mutually_exclusive_group()
    limit.add_argument("--max-lines", type=non_negative_int, default=None)
    limit.add_argument("--all-lines", action="store_true", help="no line cap")

    area = ap.add_mutually_exclusive_group()
    area.add_argument("--area", choices=sorted(PRESET_AREAS), default=None)
    area.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("MIN_LAT", "MAX_LAT", "MIN_LON", "MAX_LON"),
        default=None,
    )
    area.add_argument("--interactive", action="store_true")

    ap.add_argument("--sample", action="store_true", help="print a sample of the graph")
    ap.add_argument("--map", action="store_true", help="render an HTML map per area")
    ap.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None
    )
    return ap


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with the command-line overrides applied."""
    ingest_update = {}
    if args.stops is not None:
        ingest_update["data_dir"] = args.stops.parent
        ingest_update["stops_file"] = args.stops.name
    if args.all_lines:
        ingest_update["max_lines"] = None
    elif args.max_lines is not None:
        ingest_update["max_lines"] = args.max_lines

    output_update = {}
    if args.output_dir is not None:
        output_update["output_dir"] = args.output_dir

    return config.model_copy(
        update={
            "ingest": config.ingest.model_copy(update=ingest_update),
            "output": config.output.model_copy(update=output_update),
        }
    )


def prompt_custom_bounds(ask: Optional[Callable[[str], str]] = None) -> GeographicBounds:
    """Ask for the four bounds; any unreadable value yields DEFAULT_AREA."""
    ask = ask or input
    print("Enter the coordinates of the rectangular area:")
    try:
        min_lat = float(ask("  Minimum latitude (e.g. 40.0): "))
        max_lat = float(ask("  Maximum latitude (e.g. 41.0): "))
        min_lon = float(ask("  Minimum longitude (e.g. -4.0): "))
        max_lon = float(ask("  Maximum longitude (e.g. -3.0): "))
    except ValueError:
        print(f"Invalid coordinates. Using {DEFAULT_AREA.name}.")
        return DEFAULT_AREA
    return GeographicBounds(min_lat, max_lat, min_lon, max_lon, "Área personalizada")


def prompt_area(ask: Optional[Callable[[str], str]] = None) -> Selection:
    """Show the area menu; ``None`` means every preset area."""
    ask = ask or input
    print("Select a geographic area to filter:")
    for number, key in enumerate(MENU_AREAS, start=1):
        print(f"  {number}. {PRESET_AREAS[key]}")
    custom = len(MENU_AREAS) + 1
    print(f"  {custom}. Custom area (enter coordinates)")
    print(f"  {custom + 1}. All preset areas")

    try:
        choice = int(ask(f"Option (1-{custom + 1}): ").strip())
    except ValueError:
        choice = custom + 1

    if 1 <= choice <= len(MENU_AREAS):
        key = MENU_AREAS[choice - 1]
        return key, PRESET_AREAS[key]
    if choice == custom:
        return CUSTOM_KEY, prompt_custom_bounds(ask)
    return None


def select_area(
    args: argparse.Namespace, default_area: Optional[str] = None
) -> Selection:
    """Resolve the area from the arguments; ``None`` means every preset."""
    if args.bounds is not None:
        min_lat, max_lat, min_lon, max_lon = args.bounds
        return CUSTOM_KEY, GeographicBounds(
            min_lat, max_lat, min_lon, max_lon, "Área personalizada"
        )
    if args.area is not None:
        return args.area, get_area(args.area)
    if args.interactive:
        return prompt_area()
    if default_area:
        key = default_area.strip().lower()
        return key, get_area(key)
    return None


def run(
    service: StopGraphService, args: argparse.Namespace, config: AppConfig
) -> int:
    store, report = service.build()
    print(
        f"Processed {report.processed} stations from {report.lines_read} lines "
        f"({report.failed} rejected)"
    )
    print(format_statistics(store))
    if args.sample:
        print(format_sample(store))

    for path in service.export(store):
        print(f"Exported: {path}")

    selection = select_area(args, config.filter.default_area)
    if selection is None:
        runs = service.run_presets(store, render_map=args.map)
    else:
        key, bounds = selection
        runs = [service.run_area(store, bounds, key, render_map=args.map)]

    for area_run in runs:
        print(format_filter_result(area_run.result))
        if area_run.output_path is not None:
            print(f"Filtered graph saved: {area_run.output_path}")
        if area_run.map_path is not None:
            print(f"Map saved: {area_run.map_path}")

    print(format_generated_files(config.output.output_dir))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = apply_overrides(get_config(), args)

    container = Container.create_default(config)
    service: StopGraphService = container.resolve(StopGraphService)

    try:
        configure_logging(config.observability, args.log_level)
        return run(service, args, config)
    except StopGraphError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
