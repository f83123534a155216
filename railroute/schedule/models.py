"""Data models for schedule records and the station graph."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Station:
    """Railway station, coordinates kept as they appear in the source file."""

    id: str
    name: str
    display_name: str
    lat: str
    lon: str
    available: str = ""

    @property
    def latitude(self) -> float:
        return float(self.lat)

    @property
    def longitude(self) -> float:
        return float(self.lon)


@dataclass(frozen=True)
class Train:
    """Scheduled train."""

    id: str
    headsign: str
    name: str
    date: str
    line_id: str


@dataclass(frozen=True)
class Stop:
    """Scheduled visit of a train at a station."""

    id: str
    train_id: str
    station_id: str
    departure: datetime
    arrival: datetime


@dataclass(frozen=True)
class Edge:
    """Directed train segment to the station keyed by `target`."""

    target: str  # station id of the next stop
    train_id: str
    weight: int  # seconds


@dataclass
class Node:
    """Graph vertex for one station with its outgoing edges."""

    station: Station
    edges: list[Edge] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.station.id


@dataclass(frozen=True)
class Travel:
    """Flattened segment between two consecutive stops of a train."""

    from_station: Station
    to_station: Station | None  # None for the terminus
    weight: int  # seconds, 0 for the terminus
    train_id: str


@dataclass
class ValidationReport:
    """Report from validation process."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


@dataclass
class SearchConfig:
    """Configuration for a route query."""

    input_path: str
    departure: str
    destination: str
    cost: str = "distance"  # distance, time
    average_speed_kmh: float = 300.0
    validate: bool = True


@dataclass
class RouteResult:
    """Resolved route with timing information."""

    departure: str
    destination: str
    stations: list[Station]
    travel_time: int | None  # seconds along scheduled edges, None when no route
    elapsed: float  # seconds spent reading, building and searching

    @property
    def found(self) -> bool:
        return bool(self.stations)
