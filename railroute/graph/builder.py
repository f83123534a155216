"""Station graph construction from per-train stop sequences."""

import logging

from railroute.exceptions import UnknownStationError
from railroute.schedule.models import Edge, Node, Station, Stop, Train

logger = logging.getLogger(__name__)


def build_graph(
    trains: list[Train], stops: list[Stop], stations: list[Station]
) -> dict[str, Node]:
    """
    Build the station graph.

    One Node per station, keyed by station id in station input order. Each pair
    of consecutive stops of a train (sorted by departure) adds an Edge from the
    first stop's station to the second's, weighted by the scheduled travel time
    in seconds. The last stop of a train adds nothing.

    Raises:
        UnknownStationError: a stop references a station id with no node
        ValueError: two stations share an id
    """
    logger.info("Building station graph")

    nodes: dict[str, Node] = {}
    for station in stations:
        if station.id in nodes:
            raise ValueError(f"Duplicate station id: {station.id}")
        nodes[station.id] = Node(station=station)

    known_trains = {train.id for train in trains}
    edge_count = 0

    for train_id, train_stops in group_stops_by_train(stops).items():
        if train_id not in known_trains:
            logger.warning(f"Stops reference unknown train {train_id}, keeping its edges")

        for stop in train_stops:
            if stop.station_id not in nodes:
                raise UnknownStationError(stop.station_id, stop.id)

        for current, following in zip(train_stops, train_stops[1:]):
            weight = segment_weight(current, following)
            if weight < 0:
                logger.warning(
                    f"Train {train_id} has negative travel time {weight}s "
                    f"between stops {current.id} and {following.id}"
                )

            nodes[current.station_id].edges.append(
                Edge(target=following.station_id, train_id=train_id, weight=weight)
            )
            edge_count += 1

        logger.debug(f"Train {train_id}: {len(train_stops)} stops")

    logger.info(f"Built graph with {len(nodes)} nodes and {edge_count} edges")
    return nodes


def group_stops_by_train(stops: list[Stop]) -> dict[str, list[Stop]]:
    """Group stops by train, each group sorted by departure (stable)."""
    stops_by_train: dict[str, list[Stop]] = {}
    for stop in stops:
        if stop.train_id not in stops_by_train:
            stops_by_train[stop.train_id] = []
        stops_by_train[stop.train_id].append(stop)

    for train_stops in stops_by_train.values():
        train_stops.sort(key=lambda stop: stop.departure)

    return stops_by_train


def segment_weight(current: Stop, following: Stop) -> int:
    """Seconds from departing `current` to arriving at `following`."""
    return int((following.arrival - current.departure).total_seconds())
