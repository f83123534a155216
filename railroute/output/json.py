"""JSON output for travels and routes."""

import json
import logging
from pathlib import Path
from typing import Any

from railroute.schedule.models import RouteResult, Station, Travel

logger = logging.getLogger(__name__)


def write_travels_json(output_path: Path, travels: list[Travel]) -> Path:
    """Write travel records, one object per train stop."""
    logger.info(f"Writing {len(travels)} travels to {output_path}")

    travels_data = []
    for travel in travels:
        travels_data.append(
            {
                "from": _station_data(travel.from_station),
                "to": _station_data(travel.to_station) if travel.to_station else None,
                "weight": travel.weight,
                "train_id": travel.train_id,
            }
        )

    _dump(output_path, travels_data)
    return output_path


def write_route_json(output_path: Path, result: RouteResult) -> Path:
    """Write a resolved route."""
    route_data = {
        "departure": result.departure,
        "destination": result.destination,
        "found": result.found,
        "stations": [_station_data(station) for station in result.stations],
        "travel_time": result.travel_time,
    }

    _dump(output_path, route_data)
    logger.info(f"Wrote {output_path}")
    return output_path


def _station_data(station: Station) -> dict[str, str]:
    return {
        "id": station.id,
        "name": station.name,
        "display_name": station.display_name,
        "lat": station.lat,
        "lon": station.lon,
        "available": station.available,
    }


def _dump(output_path: Path, data: Any) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)
