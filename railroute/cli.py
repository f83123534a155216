"""Command-line interface for railroute."""

import argparse
import logging
import sys
from pathlib import Path

from railroute.api import export_travels, find_route, validate
from railroute.output.json import write_route_json
from railroute.schedule.models import SearchConfig
from railroute.search.astar import COST_MODES
from railroute.version import VERSION


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def cmd_route(args: argparse.Namespace) -> int:
    """Execute route command."""
    setup_logging(args.verbose)

    config = SearchConfig(
        input_path=args.input,
        departure=args.departure,
        destination=args.destination,
        cost=args.cost,
        average_speed_kmh=args.speed,
        validate=args.validate,
    )

    try:
        result = find_route(args.input, args.departure, args.destination, config)
        if args.output:
            write_route_json(Path(args.output), result)

        if not result.found:
            print(f"\nNo route found from {args.departure} to {args.destination}")
            return 0

        print(f"\nRoute ({len(result.stations)} stations):")
        for station in result.stations:
            print(f"  - {station.name}")
        print(f"Scheduled travel time: {result.travel_time}s")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Route search failed")
        return 1


def cmd_travels(args: argparse.Namespace) -> int:
    """Execute travels command."""
    setup_logging(args.verbose)

    try:
        written = export_travels(args.input, args.output)
        print("\nExport successful!")
        print(f"Output: {written}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Travel export failed")
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute validate command."""
    setup_logging(args.verbose)

    try:
        report = validate(args.input)
        if report.valid:
            print("\nValidation successful!")
            print(f"Stats: {report.stats}")
            if report.warnings:
                print(f"Warnings ({len(report.warnings)}):")
                for warning in report.warnings:
                    print(f"  - {warning}")
            return 0
        else:
            print(f"\nValidation failed with {len(report.errors)} errors:")
            for error in report.errors:
                print(f"  - {error}")
            return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Validation failed")
        return 1


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="railroute",
        description="Find railway routes from scheduled train stops",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Route command
    route_parser = subparsers.add_parser("route", help="Find a route between two stations")
    route_parser.add_argument(
        "--input", required=True, help="Directory with trains.csv, stops.csv, stations.csv"
    )
    route_parser.add_argument(
        "--from", dest="departure", required=True, help="Departure station name"
    )
    route_parser.add_argument(
        "--to", dest="destination", required=True, help="Destination station name"
    )
    route_parser.add_argument(
        "--cost",
        choices=list(COST_MODES),
        default="distance",
        help="Step cost: great-circle distance or scheduled time (default: distance)",
    )
    route_parser.add_argument(
        "--speed",
        type=float,
        default=300.0,
        help="Average speed in km/h for time estimates (default: 300)",
    )
    route_parser.add_argument(
        "--validate",
        type=lambda x: x.lower() == "true",
        default=True,
        help="Validate schedule data before searching (default: true)",
    )
    route_parser.add_argument("--output", help="Write the route to a JSON file")
    route_parser.set_defaults(func=cmd_route)

    # Travels command
    travels_parser = subparsers.add_parser("travels", help="Export travel records to JSON")
    travels_parser.add_argument(
        "--input", required=True, help="Directory with trains.csv, stops.csv, stations.csv"
    )
    travels_parser.add_argument(
        "--output", default="./travels.json", help="Output file (default: ./travels.json)"
    )
    travels_parser.set_defaults(func=cmd_travels)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate schedule data")
    validate_parser.add_argument(
        "--input", required=True, help="Directory with trains.csv, stops.csv, stations.csv"
    )
    validate_parser.set_defaults(func=cmd_validate)

    # Parse and execute
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
