"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from railroute.schedule.models import Station, Stop, Train

BASE_TIME = datetime(2019, 3, 1, 8, 0, 0)


@pytest.fixture
def schedule_line() -> Path:
    """Path to a single train running A -> B -> C -> D."""
    return Path(__file__).parent / "fixtures" / "line"


@pytest.fixture
def schedule_network() -> Path:
    """Path to two trains linking Xville and Zburg, one slow and direct, one fast."""
    return Path(__file__).parent / "fixtures" / "network"


@pytest.fixture
def schedule_edgecases() -> Path:
    """Path to edge cases schedule fixture."""
    return Path(__file__).parent / "fixtures" / "edgecases"


@pytest.fixture
def tmp_output(tmp_path: Path) -> Path:
    """Temporary output directory."""
    output_dir = tmp_path / "railroute_data"
    output_dir.mkdir()
    return output_dir


def make_station(station_id: str, lat: float, lon: float, name: str | None = None) -> Station:
    """Station named after its id unless a name is given."""
    name = name or station_id
    return Station(id=station_id, name=name, display_name=name, lat=str(lat), lon=str(lon))


def make_train(train_id: str) -> Train:
    return Train(id=train_id, headsign="", name=train_id, date="2019-03-01", line_id="L1")


def make_stop(
    stop_id: str, train_id: str, station_id: str, departure: int, arrival: int | None = None
) -> Stop:
    """Stop with times given as minutes after 08:00."""
    if arrival is None:
        arrival = departure
    return Stop(
        id=stop_id,
        train_id=train_id,
        station_id=station_id,
        departure=BASE_TIME + timedelta(minutes=departure),
        arrival=BASE_TIME + timedelta(minutes=arrival),
    )


@pytest.fixture
def line_records() -> tuple[list[Train], list[Stop], list[Station]]:
    """In-memory A -> B -> C -> D train with segment times 600s, 300s and 900s."""
    stations = [
        make_station("1", 48.69, 6.17, "A"),
        make_station("2", 49.00, 6.18, "B"),
        make_station("3", 49.36, 6.17, "C"),
        make_station("4", 49.60, 6.13, "D"),
    ]
    trains = [make_train("T1")]
    stops = [
        make_stop("S1", "T1", "1", departure=0),
        make_stop("S2", "T1", "2", departure=12, arrival=10),
        make_stop("S3", "T1", "3", departure=20, arrival=17),
        make_stop("S4", "T1", "4", departure=35),
    ]
    return trains, stops, stations
