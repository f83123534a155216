"""railroute - Shortest routes between railway stations from scheduled train stops."""

from railroute.api import export_travels, find_route, validate
from railroute.exceptions import EndpointNotFoundError, RailRouteError, UnknownStationError
from railroute.graph.builder import build_graph
from railroute.search.astar import search
from railroute.search.heuristic import heuristic
from railroute.version import VERSION

__version__ = VERSION
__all__ = [
    "VERSION",
    "EndpointNotFoundError",
    "RailRouteError",
    "UnknownStationError",
    "build_graph",
    "export_travels",
    "find_route",
    "heuristic",
    "search",
    "validate",
]
