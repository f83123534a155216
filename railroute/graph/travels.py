"""Flat travel records, one per scheduled stop of each train."""

import logging

from railroute.exceptions import UnknownStationError
from railroute.graph.builder import group_stops_by_train, segment_weight
from railroute.schedule.models import Station, Stop, Train, Travel

logger = logging.getLogger(__name__)


def compute_travels(
    trains: list[Train], stops: list[Stop], stations: list[Station]
) -> list[Travel]:
    """
    Derive travel records from each train's stops.

    Every stop yields one record; the terminus has no destination station and
    a weight of 0. Stops of trains missing from `trains` are ignored.
    """
    logger.info("Computing travels")

    stations_by_id = {station.id: station for station in stations}
    stops_by_train = group_stops_by_train(stops)

    travels: list[Travel] = []
    for train in trains:
        train_stops = stops_by_train.get(train.id, [])
        if not train_stops:
            logger.debug(f"Train {train.id} has no stops, skipping")
            continue

        for index, stop in enumerate(train_stops):
            from_station = _resolve(stations_by_id, stop)
            if index + 1 < len(train_stops):
                following = train_stops[index + 1]
                to_station: Station | None = _resolve(stations_by_id, following)
                weight = segment_weight(stop, following)
            else:
                to_station = None
                weight = 0

            travels.append(
                Travel(
                    from_station=from_station,
                    to_station=to_station,
                    weight=weight,
                    train_id=train.id,
                )
            )

    ignored = set(stops_by_train) - {train.id for train in trains}
    if ignored:
        logger.warning(f"Ignored stops of {len(ignored)} unknown trains")

    logger.info(f"Computed {len(travels)} travels")
    return travels


def _resolve(stations_by_id: dict[str, Station], stop: Stop) -> Station:
    station = stations_by_id.get(stop.station_id)
    if station is None:
        raise UnknownStationError(stop.station_id, stop.id)
    return station
