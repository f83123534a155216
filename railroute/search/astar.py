"""A* route search over the station graph."""

import heapq
import itertools
import logging
import math
from collections import defaultdict

from railroute.exceptions import EndpointNotFoundError
from railroute.schedule.models import Edge, Node
from railroute.search.heuristic import heuristic, travel_time_estimate

logger = logging.getLogger(__name__)

COST_MODES = ("distance", "time")


def search(
    departure: str,
    destination: str,
    nodes: dict[str, Node],
    cost: str = "distance",
    average_speed_kmh: float = 300.0,
) -> list[Node]:
    """
    Find a route between two stations given by name.

    Args:
        departure: Name of the departure station
        destination: Name of the destination station
        nodes: Station graph keyed by station id
        cost: "distance" scores each step by the great-circle distance between
            adjacent stations; "time" scores it by the edge's scheduled travel
            time and estimates the remainder at `average_speed_kmh`
        average_speed_kmh: Speed used by the "time" estimate

    Returns:
        Nodes from departure to destination inclusive, or an empty list when
        the destination cannot be reached

    Raises:
        EndpointNotFoundError: no station carries one of the names
    """
    if cost not in COST_MODES:
        raise ValueError(f"Unknown cost mode: {cost} (expected one of {', '.join(COST_MODES)})")

    start = find_node(nodes, departure, role="departure")
    goal = find_node(nodes, destination, role="destination")

    def step_cost(current: Node, neighbor: Node, edge: Edge) -> float:
        if cost == "time":
            return edge.weight
        return heuristic(current, neighbor)

    def estimate(node: Node) -> float:
        if cost == "time":
            return travel_time_estimate(node, goal, average_speed_kmh)
        return heuristic(node, goal)

    logger.debug(f"Searching route {start.station.name} -> {goal.station.name} by {cost}")

    g_score: defaultdict[str, float] = defaultdict(lambda: math.inf)
    f_score: defaultdict[str, float] = defaultdict(lambda: math.inf)
    came_from: dict[str, str] = {}
    closed_set: set[str] = set()

    # Frontier entries keep the position a node got when it was first opened,
    # so equal f-scores pop in insertion order. Only a node's latest push is live.
    counter = itertools.count()
    pushes = itertools.count()
    insertion_order: dict[str, int] = {start.id: next(counter)}
    latest_push: dict[str, int] = {start.id: next(pushes)}
    open_set: set[str] = {start.id}

    g_score[start.id] = 0.0
    f_score[start.id] = estimate(start)
    frontier: list[tuple[float, int, int, str]] = [
        (f_score[start.id], insertion_order[start.id], latest_push[start.id], start.id)
    ]

    expanded = 0
    while frontier:
        _, _, push, current_id = heapq.heappop(frontier)
        if current_id not in open_set or push != latest_push[current_id]:
            continue  # stale entry

        open_set.remove(current_id)
        current = nodes[current_id]

        if current_id == goal.id:
            path = reconstruct_path(came_from, nodes, current_id)
            logger.info(
                f"Found route of {len(path)} stations after expanding {expanded} nodes"
            )
            return path

        closed_set.add(current_id)
        expanded += 1

        for edge in current.edges:
            if edge.target in closed_set:
                continue

            neighbor = nodes[edge.target]
            tentative = g_score[current_id] + step_cost(current, neighbor, edge)

            if edge.target not in open_set:
                open_set.add(edge.target)
                insertion_order[edge.target] = next(counter)
            elif tentative >= g_score[edge.target]:
                continue

            came_from[edge.target] = current_id
            g_score[edge.target] = tentative
            f_score[edge.target] = tentative + estimate(neighbor)
            latest_push[edge.target] = next(pushes)
            heapq.heappush(
                frontier,
                (
                    f_score[edge.target],
                    insertion_order[edge.target],
                    latest_push[edge.target],
                    edge.target,
                ),
            )

    logger.info(
        f"No route from {start.station.name} to {goal.station.name} "
        f"after expanding {expanded} nodes"
    )
    return []


def find_node(nodes: dict[str, Node], name: str, role: str = "endpoint") -> Node:
    """Return the first node whose station name is exactly `name`."""
    for node in nodes.values():
        if node.station.name == name:
            return node
    raise EndpointNotFoundError(name, role)


def reconstruct_path(
    came_from: dict[str, str], nodes: dict[str, Node], current: str
) -> list[Node]:
    """Follow predecessor links back to the start and return them start-first."""
    path = [nodes[current]]
    while current in came_from:
        current = came_from[current]
        path.append(nodes[current])
    path.reverse()
    return path


def path_travel_time(path: list[Node]) -> int:
    """Scheduled seconds along a path, taking the fastest edge between each pair."""
    total = 0
    for current, following in zip(path, path[1:]):
        weights = [edge.weight for edge in current.edges if edge.target == following.id]
        if not weights:
            raise ValueError(f"No edge from {current.id} to {following.id}")
        total += min(weights)
    return total
