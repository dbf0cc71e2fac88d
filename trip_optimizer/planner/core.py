"""Deterministic itinerary optimizer."""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional

from trip_optimizer.config.settings import (
    OptimizerConfig,
    load_config,
    resolve_category,
    resolve_strategy,
)
from trip_optimizer.domain.constants import OPTIMIZATION_METHODS
from trip_optimizer.domain.enums import TourStrategy, TripCategory
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import Graph, OptimizationMetadata, OptimizationResult, POI
from trip_optimizer.infrastructure.logging import StructuredLogger, get_logger
from trip_optimizer.planner.balance import balance_days, bucket_hours
from trip_optimizer.planner.graph import build_graph
from trip_optimizer.planner.partition import partition_days
from trip_optimizer.planner.scoring import RelevanceScorer, start_score
from trip_optimizer.planner.tour import construct_tour


def _validate_days(days: Any) -> int:
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidArgument("days", f"expected an integer, got {days!r}")
    if days < 1:
        raise InvalidArgument("days", f"must be at least 1, got {days}")
    return days


def _prepare_pois(pois: Iterable[POI | dict]) -> list[POI]:
    """Fresh, annotation-free copies; the caller's records are left untouched."""
    prepared: list[POI] = []
    seen: set[str] = set()
    for raw in pois:
        poi = raw if isinstance(raw, POI) else POI.model_validate(raw)
        if poi.id in seen:
            raise InvalidArgument("pois", f"duplicate POI id {poi.id!r}")
        if not math.isfinite(poi.visit_duration) or poi.visit_duration <= 0:
            raise InvalidArgument(
                "visit_duration", f"POI {poi.id!r} must take a positive time, got {poi.visit_duration!r}"
            )
        seen.add(poi.id)
        prepared.append(poi.clear_annotations())
    return prepared


class ItineraryOptimizer:
    """Orders POIs into a tour and spreads it over the requested days."""

    def __init__(
        self,
        config: Optional[OptimizerConfig] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.config = config or load_config()
        self.logger = logger
        self.scorer = RelevanceScorer(self.config.category_keywords)

    def select_start(self, graph: Graph, category: TripCategory) -> POI:
        weights = self.config.weights_for(category)
        best: Optional[POI] = None
        best_score = 0.0
        for poi in graph.nodes.values():
            score = start_score(self.scorer.relevance(poi, category), poi.rating, weights)
            if best is None or score > best_score:
                best, best_score = poi, score
        return best

    def optimize(
        self,
        pois: Iterable[POI | dict],
        days: int,
        trip_category: TripCategory | str,
        *,
        strategy: TourStrategy | str | None = None,
    ) -> OptimizationResult:
        logger = self.logger or get_logger()
        days = _validate_days(days)
        category = resolve_category(trip_category)
        tour_strategy = resolve_strategy(strategy) if strategy is not None else self.config.strategy
        prepared = _prepare_pois(pois)
        method = OPTIMIZATION_METHODS[tour_strategy]

        if not prepared:
            logger.summary(total_pois=0, days=days, trip_category=category.value)
            return OptimizationResult(
                daily_itineraries=[[] for _ in range(days)],
                metadata=OptimizationMetadata(
                    trip_category=category.value,
                    starting_point=None,
                    total_pois=0,
                    optimization_method=method,
                    strategy=tour_strategy.value,
                    day_hours=[0.0] * days,
                ),
            )

        logger.step_start("build_graph", total_pois=len(prepared))
        graph = build_graph(
            prepared,
            speed_kmh=self.config.speed_kmh,
            fallback_km=self.config.fallback_distance_km,
        )
        logger.step_end("build_graph", nodes=len(graph.nodes))

        start = self.select_start(graph, category)

        logger.step_start("construct_tour", strategy=tour_strategy.value, start=start.id)
        tour = construct_tour(
            graph,
            start.id,
            category,
            strategy=tour_strategy,
            weights=self.config.weights_for(category),
            scorer=self.scorer,
        )
        logger.step_end("construct_tour", tour_length=len(tour))

        logger.step_start("partition_days", days=days)
        buckets = partition_days(
            tour,
            days,
            category,
            scorer=self.scorer,
            max_overrun=self.config.max_budget_overrun,
            relevance_weight=self.config.relevance_importance_weight,
            rating_weight=self.config.rating_importance_weight,
        )
        logger.step_end("partition_days", buckets=len(buckets))

        logger.step_start("balance_days", buckets=len(buckets))
        daily = balance_days(
            buckets,
            days,
            overload_ratio=self.config.overload_ratio,
            underload_ratio=self.config.underload_ratio,
        )
        day_hours = [round(bucket_hours(bucket), 2) for bucket in daily]
        logger.step_end("balance_days", day_hours=day_hours)

        logger.summary(
            total_pois=len(tour),
            days=days,
            trip_category=category.value,
            starting_point=start.name,
        )
        return OptimizationResult(
            daily_itineraries=daily,
            metadata=OptimizationMetadata(
                trip_category=category.value,
                starting_point=start.name,
                total_pois=len(tour),
                optimization_method=method,
                strategy=tour_strategy.value,
                day_hours=day_hours,
            ),
        )


def optimize_itinerary(
    pois: Iterable[POI | dict],
    days: int,
    trip_category: TripCategory | str,
    *,
    strategy: TourStrategy | str | None = None,
    config: Optional[OptimizerConfig] = None,
    logger: Optional[StructuredLogger] = None,
) -> OptimizationResult:
    return ItineraryOptimizer(config=config, logger=logger).optimize(
        pois, days, trip_category, strategy=strategy
    )
