"""Schedule CSV reader."""

import csv
import logging
from datetime import datetime
from pathlib import Path

from railroute.schedule.models import Station, Stop, Train

logger = logging.getLogger(__name__)

TRAIN_FIELDS = ["id", "headsign", "name", "date", "created_at", "updated_at", "line_id"]
STOP_FIELDS = ["id", "train_id", "station_id", "departure", "arrival", "created_at", "updated_at"]
STATION_FIELDS = [
    "id",
    "name",
    "display_name",
    "lon",
    "lat",
    "available",
    "created_at",
    "updated_at",
]


class ScheduleReader:
    """Read trains, stops and stations from a directory of CSV exports."""

    def __init__(self, data_path: str) -> None:
        """Initialize reader with the schedule directory path."""
        self.data_path = Path(data_path)
        if not self.data_path.is_dir():
            raise ValueError(f"Schedule path not found or not a directory: {data_path}")

        self.trains: list[Train] = []
        self.stops: list[Stop] = []
        self.stations: list[Station] = []

    def read_all(self) -> None:
        """Read all schedule files."""
        logger.info(f"Reading schedule data from {self.data_path}")
        self.read_trains()
        self.read_stops()
        self.read_stations()
        logger.info(
            f"Loaded {len(self.trains)} trains, {len(self.stops)} stops, "
            f"{len(self.stations)} stations"
        )

    def read_trains(self) -> None:
        """Read trains.csv."""
        for row in self._read_rows("trains.csv", TRAIN_FIELDS):
            self.trains.append(
                Train(
                    id=row["id"],
                    headsign=row["headsign"],
                    name=row["name"],
                    date=row["date"],
                    line_id=row["line_id"],
                )
            )

    def read_stops(self) -> None:
        """Read stops.csv, parsing departure and arrival timestamps."""
        # Naive and offset-aware datetimes cannot be compared, so a file must use one form
        aware: bool | None = None
        for line_no, row in enumerate(self._read_rows("stops.csv", STOP_FIELDS), start=1):
            try:
                departure = self._parse_timestamp(row["departure"])
                arrival = self._parse_timestamp(row["arrival"])
            except ValueError as e:
                raise ValueError(f"stops.csv row {line_no}: {e}") from e

            row_aware = {ts.utcoffset() is not None for ts in (departure, arrival)}
            if aware is not None:
                row_aware.add(aware)
            if len(row_aware) > 1:
                raise ValueError(
                    f"stops.csv row {line_no}: mixes timezone-aware and naive timestamps"
                )
            aware = row_aware.pop()

            self.stops.append(
                Stop(
                    id=row["id"],
                    train_id=row["train_id"],
                    station_id=row["station_id"],
                    departure=departure,
                    arrival=arrival,
                )
            )

    def read_stations(self) -> None:
        """Read stations.csv."""
        for row in self._read_rows("stations.csv", STATION_FIELDS):
            self.stations.append(
                Station(
                    id=row["id"],
                    name=row["name"],
                    display_name=row["display_name"],
                    lat=row["lat"].strip(),
                    lon=row["lon"].strip(),
                    available=row["available"],
                )
            )

    def _read_rows(self, filename: str, fieldnames: list[str]) -> list[dict[str, str]]:
        """Read a headerless (or header-carrying) CSV with a fixed column order."""
        file_path = self.data_path / filename
        if not file_path.exists():
            raise FileNotFoundError(f"Required file not found: {file_path}")

        rows: list[dict[str, str]] = []
        with open(file_path, encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f, fieldnames=fieldnames, restval="")
            for row in reader:
                if not rows and self._is_header(row, fieldnames):
                    logger.debug(f"{filename}: skipping header row")
                    continue
                # Extra columns land under the None key
                row.pop(None, None)  # type: ignore[call-overload]
                rows.append({key: (value or "") for key, value in row.items()})

        logger.debug(f"{filename}: {len(rows)} rows")
        return rows

    @staticmethod
    def _is_header(row: dict[str, str], fieldnames: list[str]) -> bool:
        return [(row.get(name) or "").strip() for name in fieldnames] == fieldnames

    @staticmethod
    def _parse_timestamp(value: str) -> datetime:
        """Parse an ISO 8601 date-time such as 2019-03-01 08:15:00."""
        value = value.strip()
        if not value:
            raise ValueError("Empty timestamp")
        return datetime.fromisoformat(value)
