"""Public API for railroute."""

import logging
import time
from pathlib import Path

from railroute.graph.builder import build_graph
from railroute.graph.travels import compute_travels
from railroute.output.json import write_travels_json
from railroute.schedule.models import RouteResult, SearchConfig, ValidationReport
from railroute.schedule.reader import ScheduleReader
from railroute.schedule.validator import ScheduleValidator
from railroute.search.astar import path_travel_time, search

logger = logging.getLogger(__name__)


def find_route(
    input_path: str,
    departure: str,
    destination: str,
    config: SearchConfig | None = None,
) -> RouteResult:
    """
    Find the route between two stations of a schedule export.

    Args:
        input_path: Directory holding trains.csv, stops.csv and stations.csv
        departure: Name of the departure station
        destination: Name of the destination station
        config: Optional search configuration

    Returns:
        RouteResult, with an empty station list when no route exists
    """
    if config is None:
        config = SearchConfig(input_path=input_path, departure=departure, destination=destination)

    logger.info(f"Searching route: {departure} -> {destination}")
    start_time = time.perf_counter()

    reader = _read(input_path, config.validate)

    nodes = build_graph(reader.trains, reader.stops, reader.stations)
    logger.info(f"Graph built in {time.perf_counter() - start_time:.2f}s")

    path = search(
        departure,
        destination,
        nodes,
        cost=config.cost,
        average_speed_kmh=config.average_speed_kmh,
    )

    elapsed = time.perf_counter() - start_time
    logger.info(f"Search completed in {elapsed:.2f}s")

    return RouteResult(
        departure=departure,
        destination=destination,
        stations=[node.station for node in path],
        travel_time=path_travel_time(path) if path else None,
        elapsed=elapsed,
    )


def export_travels(input_path: str, output_path: str) -> Path:
    """
    Write the travel records of a schedule export to a JSON file.

    Args:
        input_path: Directory holding trains.csv, stops.csv and stations.csv
        output_path: Destination JSON file

    Returns:
        Path of the written file
    """
    start_time = time.perf_counter()

    reader = _read(input_path, check=True)
    travels = compute_travels(reader.trains, reader.stops, reader.stations)
    written = write_travels_json(Path(output_path), travels)

    logger.info(f"Travels exported in {time.perf_counter() - start_time:.2f}s")
    return written


def validate(input_path: str) -> ValidationReport:
    """
    Validate a schedule export.

    Args:
        input_path: Directory holding trains.csv, stops.csv and stations.csv

    Returns:
        ValidationReport with results
    """
    reader = ScheduleReader(input_path)
    reader.read_all()
    return ScheduleValidator(reader).validate()


def _read(input_path: str, check: bool) -> ScheduleReader:
    reader = ScheduleReader(input_path)
    reader.read_all()

    if check:
        report = ScheduleValidator(reader).validate()
        if not report.valid:
            for error in report.errors:
                logger.error(error)
            raise ValueError(f"Schedule validation failed with {len(report.errors)} errors")

    return reader
