"""Reconcile the day count and even out day loads.

Both passes are bounded: merging joins neighbouring days until the count
matches, and rebalancing is one sweep over the buckets with at most one move
per overloaded day.
"""

from __future__ import annotations

from typing import Mapping, Optional

from trip_optimizer.domain.constants import OVERLOAD_RATIO, UNDERLOAD_RATIO
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import POI


def tour_positions(buckets: list[list[POI]]) -> dict[str, int]:
    """Index of every POI in the concatenated buckets."""
    return {poi.id: idx for idx, poi in enumerate(poi for bucket in buckets for poi in bucket)}


def bucket_hours(bucket: list[POI]) -> float:
    return sum(poi.hours_required() for poi in bucket)


def _in_tour_order(pois: list[POI], positions: Mapping[str, int]) -> list[POI]:
    return sorted(pois, key=lambda poi: positions.get(poi.id, len(positions)))


def reconcile_day_count(buckets: list[list[POI]], days: int) -> list[list[POI]]:
    if days < 1:
        raise InvalidArgument("days", f"must be at least 1, got {days!r}")
    result = [list(bucket) for bucket in buckets]

    while len(result) < days:
        result.append([])

    while len(result) > days:
        # Only neighbouring days merge, so the days still read as the tour.
        first = min(range(len(result) - 1), key=lambda i: len(result[i]) + len(result[i + 1]))
        result[first] = result[first] + result[first + 1]
        del result[first + 1]

    return result


def rebalance_load(
    buckets: list[list[POI]],
    *,
    positions: Optional[Mapping[str, int]] = None,
    overload_ratio: float = OVERLOAD_RATIO,
    underload_ratio: float = UNDERLOAD_RATIO,
) -> list[list[POI]]:
    positions = positions if positions is not None else tour_positions(buckets)
    result = [list(bucket) for bucket in buckets]
    if not result:
        return result

    hours = [bucket_hours(bucket) for bucket in result]
    mean = sum(hours) / len(hours)
    if mean <= 0:
        return result

    for i, bucket in enumerate(result):
        if hours[i] <= overload_ratio * mean or len(bucket) < 2:
            continue
        targets = [j for j in range(len(result)) if j != i and hours[j] < underload_ratio * mean]
        if not targets:
            continue
        target = min(targets, key=lambda j: hours[j])
        victim = min(bucket, key=lambda poi: poi.importance if poi.importance is not None else 0.0)

        bucket.remove(victim)
        result[target] = _in_tour_order(result[target] + [victim], positions)
        hours[i] -= victim.hours_required()
        hours[target] += victim.hours_required()

    return result


def balance_days(
    buckets: list[list[POI]],
    days: int,
    *,
    overload_ratio: float = OVERLOAD_RATIO,
    underload_ratio: float = UNDERLOAD_RATIO,
) -> list[list[POI]]:
    positions = tour_positions(buckets)
    reconciled = reconcile_day_count(buckets, days)
    return rebalance_load(
        reconciled,
        positions=positions,
        overload_ratio=overload_ratio,
        underload_ratio=underload_ratio,
    )
