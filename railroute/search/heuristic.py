"""Great-circle distance used to guide the route search."""

import math

from railroute.schedule.models import Node

# Statute miles per degree of arc is 60 nautical miles * 1.1515
MILES_PER_DEGREE = 60 * 1.1515
UNIT_FACTORS = {"M": 1.0, "K": 1.609344, "N": 0.8684}


def distance(lat1: float, lon1: float, lat2: float, lon2: float, unit: str = "K") -> float:
    """
    Great-circle distance by the spherical law of cosines.

    Args:
        lat1, lon1, lat2, lon2: coordinates in decimal degrees
        unit: "K" kilometers, "M" statute miles, "N" nautical miles
    """
    if unit not in UNIT_FACTORS:
        raise ValueError(f"Unknown distance unit: {unit}")

    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon1 - lon2)

    cosine = math.sin(phi1) * math.sin(phi2) + math.cos(phi1) * math.cos(phi2) * math.cos(
        delta_lambda
    )
    cosine = max(-1.0, min(1.0, cosine))

    arc_degrees = math.degrees(math.acos(cosine))
    return arc_degrees * MILES_PER_DEGREE * UNIT_FACTORS[unit]


def heuristic(a: Node, b: Node) -> float:
    """Distance in kilometers between the stations of two nodes."""
    return distance(
        a.station.latitude,
        a.station.longitude,
        b.station.latitude,
        b.station.longitude,
    )


def travel_time_estimate(a: Node, b: Node, average_speed_kmh: float) -> float:
    """Seconds needed to cover the distance between two nodes at a given speed."""
    if average_speed_kmh <= 0:
        raise ValueError(f"Average speed must be positive: {average_speed_kmh}")
    return heuristic(a, b) / average_speed_kmh * 3600
