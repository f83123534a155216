"""Schedule data validator."""

import logging
from collections import Counter

from railroute.graph.builder import group_stops_by_train, segment_weight
from railroute.schedule.models import ValidationReport
from railroute.schedule.reader import ScheduleReader

logger = logging.getLogger(__name__)


class ScheduleValidator:
    """Validate schedule data before building the station graph."""

    def __init__(self, reader: ScheduleReader) -> None:
        """Initialize validator with schedule reader."""
        self.reader = reader
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def validate(self) -> ValidationReport:
        """Run all validation checks."""
        logger.info("Validating schedule data")

        self._validate_stations()
        self._validate_stops()
        self._validate_train_sequences()

        valid = len(self.errors) == 0

        stats = {
            "trains": len(self.reader.trains),
            "stops": len(self.reader.stops),
            "stations": len(self.reader.stations),
        }

        report = ValidationReport(
            valid=valid,
            errors=self.errors.copy(),
            warnings=self.warnings.copy(),
            stats=stats,
        )

        if not valid:
            logger.error(f"Validation failed with {len(self.errors)} errors")
        elif self.warnings:
            logger.warning(f"Validation passed with {len(self.warnings)} warnings")
        else:
            logger.info("Validation passed")

        return report

    def _validate_stations(self) -> None:
        """Validate station ids are unique and coordinates are usable."""
        id_counts = Counter(station.id for station in self.reader.stations)
        for station_id, count in sorted(id_counts.items()):
            if count > 1:
                self.errors.append(f"Station id {station_id} appears {count} times")

        name_counts = Counter(station.name for station in self.reader.stations)
        for name, count in sorted(name_counts.items()):
            if count > 1:
                self.warnings.append(
                    f"Station name {name!r} is shared by {count} stations, "
                    f"searches use the first one"
                )

        for station in self.reader.stations:
            try:
                lat = station.latitude
                lon = station.longitude
            except ValueError:
                self.errors.append(
                    f"Station {station.id} has non-numeric coordinates: "
                    f"lat={station.lat!r} lon={station.lon!r}"
                )
                continue

            if not (-90 <= lat <= 90):
                self.errors.append(f"Station {station.id} has invalid latitude: {lat}")
            if not (-180 <= lon <= 180):
                self.errors.append(f"Station {station.id} has invalid longitude: {lon}")

    def _validate_stops(self) -> None:
        """Validate stops reference known stations and trains."""
        station_ids = {station.id for station in self.reader.stations}
        train_ids = {train.id for train in self.reader.trains}

        for stop in self.reader.stops:
            if stop.station_id not in station_ids:
                self.errors.append(
                    f"Stop {stop.id} references non-existent station {stop.station_id}"
                )
            if stop.train_id not in train_ids:
                self.warnings.append(
                    f"Stop {stop.id} references non-existent train {stop.train_id}"
                )
            if stop.arrival > stop.departure:
                self.warnings.append(
                    f"Stop {stop.id} arrives after it departs: "
                    f"{stop.arrival.isoformat()} > {stop.departure.isoformat()}"
                )

    def _validate_train_sequences(self) -> None:
        """Validate each train's sorted stops give non-negative travel times."""
        for train_id, train_stops in group_stops_by_train(self.reader.stops).items():
            if len(train_stops) < 2:
                self.warnings.append(f"Train {train_id} has fewer than two stops")
                continue

            for current, following in zip(train_stops, train_stops[1:]):
                weight = segment_weight(current, following)
                if weight < 0:
                    self.warnings.append(
                        f"Train {train_id} has negative travel time {weight}s "
                        f"between stops {current.id} and {following.id}"
                    )

        served = {stop.train_id for stop in self.reader.stops}
        for train in self.reader.trains:
            if train.id not in served:
                self.warnings.append(f"Train {train.id} has no stops")
