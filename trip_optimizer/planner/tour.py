"""Tour construction over a complete POI graph.

The default constructor is a greedy best-next-node heuristic: from the
current node it scores every unvisited neighbor on travel time, category
relevance and rating, and moves to the best one. There is no backtracking
or lookahead, so the resulting tour is explainable but not a shortest
Hamiltonian path.
"""

from __future__ import annotations

from typing import Optional

from trip_optimizer.domain.enums import TourStrategy, TripCategory
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import Edge, Graph, POI, WeightProfile
from trip_optimizer.planner.scoring import RelevanceScorer, hop_score
from trip_optimizer.planner.shortest_path import shortest_travel_times


def _check_start(graph: Graph, start_id: str) -> None:
    if start_id not in graph.nodes:
        raise InvalidArgument("start_id", f"unknown start node {start_id!r}")


def weighted_greedy_tour(
    graph: Graph,
    start_id: str,
    category: TripCategory,
    *,
    weights: WeightProfile,
    scorer: RelevanceScorer,
) -> list[POI]:
    if graph.is_empty():
        return []
    _check_start(graph, start_id)

    visited = {start_id}
    tour = [graph.nodes[start_id]]
    current = start_id

    while len(visited) < len(graph.nodes):
        best: Optional[Edge] = None
        best_score = 0.0
        for edge in graph.adjacency[current]:
            if edge.target in visited:
                continue
            poi = graph.nodes[edge.target]
            score = hop_score(
                edge.travel_time_hours,
                scorer.relevance(poi, category),
                poi.rating,
                weights,
            )
            if best is None or score > best_score:
                best, best_score = edge, score
        if best is None:
            break
        graph.nodes[current].travel_time_to_next = best.travel_time_hours
        visited.add(best.target)
        tour.append(graph.nodes[best.target])
        current = best.target

    return tour


def nearest_neighbor_tour(graph: Graph, start_id: str) -> list[POI]:
    if graph.is_empty():
        return []
    _check_start(graph, start_id)

    visited = {start_id}
    tour = [graph.nodes[start_id]]
    current = start_id

    while len(visited) < len(graph.nodes):
        nearest: Optional[Edge] = None
        for edge in graph.adjacency[current]:
            if edge.target in visited:
                continue
            if nearest is None or edge.travel_time_hours < nearest.travel_time_hours:
                nearest = edge
        if nearest is None:
            break
        graph.nodes[current].travel_time_to_next = nearest.travel_time_hours
        visited.add(nearest.target)
        tour.append(graph.nodes[nearest.target])
        current = nearest.target

    return tour


def shortest_path_tour(graph: Graph, start_id: str) -> list[POI]:
    """Visit nodes by increasing shortest-path travel time from the start."""
    if graph.is_empty():
        return []
    distances, _previous = shortest_travel_times(graph, start_id)
    order = {node_id: idx for idx, node_id in enumerate(graph.nodes)}
    ranked = sorted(graph.nodes, key=lambda node_id: (distances[node_id], order[node_id]))
    tour = [graph.nodes[node_id] for node_id in ranked]
    for here, there in zip(tour, tour[1:]):
        here.travel_time_to_next = graph.edge(here.id, there.id).travel_time_hours
    return tour


def construct_tour(
    graph: Graph,
    start_id: str,
    category: TripCategory,
    *,
    strategy: TourStrategy,
    weights: WeightProfile,
    scorer: RelevanceScorer,
) -> list[POI]:
    if strategy == TourStrategy.WEIGHTED_GREEDY:
        return weighted_greedy_tour(graph, start_id, category, weights=weights, scorer=scorer)
    if strategy == TourStrategy.NEAREST_NEIGHBOR:
        return nearest_neighbor_tour(graph, start_id)
    if strategy == TourStrategy.SHORTEST_PATH:
        return shortest_path_tour(graph, start_id)
    raise InvalidArgument("strategy", f"unsupported tour strategy {strategy!r}")


__all__ = [
    "construct_tour",
    "nearest_neighbor_tour",
    "shortest_path_tour",
    "weighted_greedy_tour",
]
