"""Errors raised while building the station graph or resolving a route."""


class RailRouteError(Exception):
    """Base class for railroute errors."""


class UnknownStationError(RailRouteError):
    """A stop references a station id absent from the loaded stations."""

    def __init__(self, station_id: str, stop_id: str | None = None) -> None:
        self.station_id = station_id
        self.stop_id = stop_id
        if stop_id is None:
            message = f"No station associated to station id {station_id}"
        else:
            message = f"No station associated to stop {stop_id} (station id {station_id})"
        super().__init__(message)


class EndpointNotFoundError(RailRouteError):
    """A departure or destination name matches no station."""

    def __init__(self, name: str, role: str = "endpoint") -> None:
        self.name = name
        self.role = role
        super().__init__(f"Could not find {role} station: {name!r}")
