"""Single-source shortest travel times (Dijkstra)."""

from __future__ import annotations

import math
from typing import Optional

from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import Graph
from trip_optimizer.planner.priority_queue import MinPriorityQueue


def shortest_travel_times(
    graph: Graph, start_id: str
) -> tuple[dict[str, float], dict[str, Optional[str]]]:
    """Return (travel hours from start, predecessor) for every node."""
    if start_id not in graph.nodes:
        raise InvalidArgument("start_id", f"unknown start node {start_id!r}")

    distances = {node_id: math.inf for node_id in graph.nodes}
    previous: dict[str, Optional[str]] = {node_id: None for node_id in graph.nodes}
    distances[start_id] = 0.0

    queue: MinPriorityQueue[str] = MinPriorityQueue()
    queue.push(start_id, 0.0)
    settled: set[str] = set()

    while not queue.is_empty():
        current, cost = queue.pop_min()
        if current in settled:
            continue
        settled.add(current)
        for edge in graph.adjacency[current]:
            candidate = cost + edge.travel_time_hours
            if candidate < distances[edge.target]:
                distances[edge.target] = candidate
                previous[edge.target] = current
                queue.push(edge.target, candidate)

    return distances, previous
