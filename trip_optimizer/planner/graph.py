"""Complete, symmetric POI graph."""

from __future__ import annotations

from trip_optimizer.domain.constants import DEFAULT_SPEED_KMH, FALLBACK_DISTANCE_KM
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import Edge, Graph, POI
from trip_optimizer.planner.distance import distance_km


def build_graph(
    pois: list[POI],
    *,
    speed_kmh: float = DEFAULT_SPEED_KMH,
    fallback_km: float = FALLBACK_DISTANCE_KM,
) -> Graph:
    """Connect every pair of distinct POIs in both directions.

    Quadratic in the number of POIs. Adjacency lists follow the input order,
    which the greedy tour relies on for deterministic tie-breaking.
    """
    if not speed_kmh > 0:
        raise InvalidArgument("speed_kmh", f"must be positive, got {speed_kmh!r}")

    graph = Graph()
    for poi in pois:
        if poi.id in graph.nodes:
            raise InvalidArgument("pois", f"duplicate POI id {poi.id!r}")
        graph.nodes[poi.id] = poi
        graph.adjacency[poi.id] = []

    for i, origin in enumerate(pois):
        for destination in pois[i + 1 :]:
            dist = distance_km(origin.location, destination.location, fallback_km=fallback_km)
            hours = dist / speed_kmh
            graph.adjacency[origin.id].append(
                Edge(source=origin.id, target=destination.id, distance_km=dist, travel_time_hours=hours)
            )
            graph.adjacency[destination.id].append(
                Edge(source=destination.id, target=origin.id, distance_km=dist, travel_time_hours=hours)
            )

    # Restore input order on every adjacency list.
    position = {poi.id: idx for idx, poi in enumerate(pois)}
    for edges in graph.adjacency.values():
        edges.sort(key=lambda edge: position[edge.target])
    return graph
