"""Slice an ordered tour into day buckets under a per-day time budget."""

from __future__ import annotations

from trip_optimizer.domain.constants import (
    MAX_BUDGET_OVERRUN,
    RATING_IMPORTANCE_WEIGHT,
    RELEVANCE_IMPORTANCE_WEIGHT,
)
from trip_optimizer.domain.enums import TripCategory
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import POI
from trip_optimizer.planner.scoring import RelevanceScorer


def total_time(tour: list[POI]) -> float:
    return sum(poi.visit_duration + (poi.travel_time_to_next or 0.0) for poi in tour)


def importance_of(
    relevance: float,
    rating: float,
    *,
    relevance_weight: float = RELEVANCE_IMPORTANCE_WEIGHT,
    rating_weight: float = RATING_IMPORTANCE_WEIGHT,
) -> float:
    return relevance_weight * relevance + rating_weight * rating


def partition_days(
    tour: list[POI],
    days: int,
    category: TripCategory,
    *,
    scorer: RelevanceScorer,
    max_overrun: float = MAX_BUDGET_OVERRUN,
    relevance_weight: float = RELEVANCE_IMPORTANCE_WEIGHT,
    rating_weight: float = RATING_IMPORTANCE_WEIGHT,
) -> list[list[POI]]:
    """Walk the tour and close a day once its budget would be exceeded.

    A day's budget is the average time per day, stretched by up to
    ``max_overrun`` for important POIs. A day is never closed empty, so a
    single POI longer than the budget still gets its own bucket. The result
    may hold more or fewer buckets than ``days``; the balancer reconciles.
    """
    if days < 1:
        raise InvalidArgument("days", f"must be at least 1, got {days!r}")
    if not tour:
        return [[] for _ in range(days)]

    avg_time_per_day = total_time(tour) / days
    buckets: list[list[POI]] = []
    current: list[POI] = []
    current_time = 0.0

    for poi in tour:
        importance = importance_of(
            scorer.relevance(poi, category),
            poi.rating,
            relevance_weight=relevance_weight,
            rating_weight=rating_weight,
        )
        factor = min(max_overrun, 1 + importance / 10)
        poi.importance = importance
        poi.time_required = poi.visit_duration + (poi.travel_time_to_next or 0.0)

        if current and current_time + poi.time_required > avg_time_per_day * factor:
            buckets.append(current)
            current = [poi]
            current_time = poi.time_required
        else:
            current.append(poi)
            current_time += poi.time_required

    if current:
        buckets.append(current)
    return buckets
