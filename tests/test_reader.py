"""Tests for schedule reader."""

from datetime import datetime
from pathlib import Path

import pytest

from railroute.schedule.reader import ScheduleReader


def test_reader_basic(schedule_line: Path) -> None:
    """Test basic schedule reading."""
    reader = ScheduleReader(str(schedule_line))
    reader.read_all()

    assert len(reader.trains) == 1
    assert len(reader.stops) == 4
    assert len(reader.stations) == 5


def test_reader_skips_header_row(schedule_line: Path, schedule_network: Path) -> None:
    """Test header rows are skipped and headerless files keep their first row."""
    line = ScheduleReader(str(schedule_line))
    line.read_all()
    network = ScheduleReader(str(schedule_network))
    network.read_all()

    # stations.csv of the line fixture has a header, trains.csv does not
    assert line.stations[0].id == "1"
    assert line.trains[0].id == "T1"
    assert [train.id for train in network.trains] == ["SLOW", "FAST"]
    assert network.stops[0].id == "1"


def test_reader_station_fields(schedule_line: Path) -> None:
    """Test station columns are mapped in source order."""
    reader = ScheduleReader(str(schedule_line))
    reader.read_stations()

    station = reader.stations[0]
    assert station.name == "A"
    assert station.display_name == "Station A"
    assert station.lat == "48.6899"
    assert station.lon == "6.1744"
    assert station.latitude == pytest.approx(48.6899)
    assert station.available == "true"


def test_reader_parses_timestamps(schedule_line: Path) -> None:
    """Test stop timestamps become datetimes, keeping file order."""
    reader = ScheduleReader(str(schedule_line))
    reader.read_stops()

    stop = reader.stops[0]
    assert stop.id == "S3"
    assert stop.departure == datetime(2019, 3, 1, 8, 20)
    assert stop.arrival == datetime(2019, 3, 1, 8, 17)


def test_parse_timestamp_formats() -> None:
    """Test ISO 8601 variants."""
    assert ScheduleReader._parse_timestamp("2019-03-01 08:30:45") == datetime(
        2019, 3, 1, 8, 30, 45
    )
    assert ScheduleReader._parse_timestamp(" 2019-03-01T08:30:45 ") == datetime(
        2019, 3, 1, 8, 30, 45
    )
    aware = ScheduleReader._parse_timestamp("2019-03-01T08:30:45+01:00")
    assert aware.utcoffset() is not None


def test_parse_timestamp_invalid() -> None:
    """Test empty and malformed timestamps are rejected."""
    with pytest.raises(ValueError):
        ScheduleReader._parse_timestamp("")
    with pytest.raises(ValueError):
        ScheduleReader._parse_timestamp("08h30")


def test_reader_invalid_timestamp_names_row(tmp_path: Path, schedule_line: Path) -> None:
    """Test a bad timestamp reports the offending row."""
    for name in ("stations.csv", "trains.csv"):
        (tmp_path / name).write_text((schedule_line / name).read_text())
    (tmp_path / "stops.csv").write_text("S1,T1,1,yesterday,2019-03-01 08:00:00,,\n")

    reader = ScheduleReader(str(tmp_path))
    with pytest.raises(ValueError, match="row 1"):
        reader.read_all()


def test_reader_missing_directory() -> None:
    """Test reader with a missing directory."""
    with pytest.raises(ValueError):
        ScheduleReader("/nonexistent/path")


def test_reader_missing_file(tmp_path: Path) -> None:
    """Test reader with missing required files."""
    reader = ScheduleReader(str(tmp_path))
    with pytest.raises(FileNotFoundError):
        reader.read_all()


def test_reader_mixed_timezone_awareness(tmp_path: Path, schedule_line: Path) -> None:
    """Test a stops file mixing naive and offset-aware timestamps is rejected."""
    for name in ("stations.csv", "trains.csv"):
        (tmp_path / name).write_text((schedule_line / name).read_text())
    (tmp_path / "stops.csv").write_text(
        "S1,T1,1,2019-03-01T08:00:00+01:00,2019-03-01T08:00:00+01:00,,\n"
        "S2,T1,2,2019-03-01 08:30:00,2019-03-01 08:30:00,,\n"
    )

    reader = ScheduleReader(str(tmp_path))
    with pytest.raises(ValueError, match="row 2: mixes timezone-aware and naive"):
        reader.read_all()


def test_reader_mixed_timezone_awareness_within_row(tmp_path: Path) -> None:
    """Test departure and arrival of one stop must share a form."""
    (tmp_path / "stops.csv").write_text(
        "S1,T1,1,2019-03-01T08:00:00+01:00,2019-03-01 08:00:00,,\n"
    )

    reader = ScheduleReader(str(tmp_path))
    with pytest.raises(ValueError, match="row 1: mixes timezone-aware and naive"):
        reader.read_stops()


def test_reader_all_aware_timestamps(tmp_path: Path) -> None:
    """Test a consistently offset-aware file is accepted."""
    (tmp_path / "stops.csv").write_text(
        "S1,T1,1,2019-03-01T08:00:00+01:00,2019-03-01T08:00:00+01:00,,\n"
        "S2,T1,2,2019-03-01T08:30:00+01:00,2019-03-01T08:25:00+01:00,,\n"
    )

    reader = ScheduleReader(str(tmp_path))
    reader.read_stops()

    assert len(reader.stops) == 2
    assert all(stop.departure.utcoffset() is not None for stop in reader.stops)
