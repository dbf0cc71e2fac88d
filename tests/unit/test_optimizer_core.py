"""Itinerary optimizer 测试"""

from __future__ import annotations

import io
import json

import pytest

from trip_optimizer.config.settings import OptimizerConfig
from trip_optimizer.domain.constants import OPTIMIZATION_METHODS
from trip_optimizer.domain.enums import TourStrategy, TripCategory
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import POI
from trip_optimizer.infrastructure.logging import StructuredLogger
from trip_optimizer.planner.core import ItineraryOptimizer, optimize_itinerary


def _flatten(result):
    return [poi.id for bucket in result.daily_itineraries for poi in bucket]


def test_empty_pois_give_free_days():
    result = optimize_itinerary([], 3, "Nature")
    assert result.daily_itineraries == [[], [], []]
    assert result.metadata.total_pois == 0
    assert result.metadata.starting_point is None
    assert result.metadata.trip_category == "Nature"
    assert result.metadata.day_hours == [0.0, 0.0, 0.0]


@pytest.mark.parametrize("days", [1, 2, 3, 4, 5, 7])
def test_every_poi_lands_in_exactly_one_of_the_requested_days(jaipur_pois, days):
    result = optimize_itinerary(jaipur_pois, days, TripCategory.HISTORICAL)
    assert len(result.daily_itineraries) == days
    assert sorted(_flatten(result)) == sorted(poi.id for poi in jaipur_pois)
    assert result.metadata.total_pois == len(jaipur_pois)


def test_single_day_takes_the_whole_tour(jaipur_pois):
    result = optimize_itinerary(jaipur_pois, 1, "Historical")
    assert len(result.daily_itineraries) == 1
    assert len(result.daily_itineraries[0]) == 5


def test_repeated_runs_are_identical(jaipur_pois):
    first = optimize_itinerary(jaipur_pois, 2, "Historical").to_payload()
    second = optimize_itinerary(jaipur_pois, 2, "Historical").to_payload()
    assert first == second


def test_caller_records_are_not_annotated(jaipur_pois):
    optimize_itinerary(jaipur_pois, 2, "Historical")
    for poi in jaipur_pois:
        assert poi.travel_time_to_next is None
        assert poi.importance is None
        assert poi.time_required is None


def test_stale_annotations_are_ignored(jaipur_pois):
    dirty = [poi.model_copy(update={"travel_time_to_next": 9.0}) for poi in jaipur_pois]
    clean = optimize_itinerary(jaipur_pois, 2, "Historical").to_payload()
    assert optimize_itinerary(dirty, 2, "Historical").to_payload() == clean


def test_every_output_poi_is_annotated(jaipur_pois):
    result = optimize_itinerary(jaipur_pois, 2, "Historical")
    for bucket in result.daily_itineraries:
        for poi in bucket:
            assert poi.importance is not None
            assert poi.time_required == pytest.approx(poi.visit_duration + (poi.travel_time_to_next or 0.0))


def test_raw_dicts_are_accepted():
    pois = [
        {"id": "a", "name": "Amber Fort", "location": {"lat": 26.9855, "lng": 75.8513},
         "visitDuration": 2.5, "rating": 4.6},
        {"id": "b", "name": "Hawa Mahal", "location": {"lat": 26.9239, "lng": 75.8267},
         "visitDuration": 1, "rating": 4.4, "description": "Palace of winds"},
    ]
    result = optimize_itinerary(pois, 1, "Historical")
    assert _flatten(result) == ["a", "b"]
    assert result.metadata.starting_point == "Amber Fort"


def test_start_is_best_relevance_and_rating_blend():
    pois = [
        POI(id="low", name="Low", visit_duration=1, rating=3.0, relevance_score=1),
        POI(id="high", name="High", visit_duration=1, rating=4.0, relevance_score=6),
        POI(id="also_high", name="Also High", visit_duration=1, rating=4.0, relevance_score=6),
    ]
    optimizer = ItineraryOptimizer(OptimizerConfig())
    result = optimizer.optimize(pois, 1, "Religious")
    assert result.metadata.starting_point == "High"
    assert _flatten(result)[0] == "high"


def test_unknown_category_falls_back_to_historical(jaipur_pois):
    fallback = optimize_itinerary(jaipur_pois, 2, "Culinary")
    historical = optimize_itinerary(jaipur_pois, 2, "Historical")
    assert fallback.metadata.trip_category == "Historical"
    assert fallback.to_payload() == historical.to_payload()


def test_category_names_are_case_insensitive(jaipur_pois):
    assert optimize_itinerary(jaipur_pois, 2, " romantic ").metadata.trip_category == "Romantic"


@pytest.mark.parametrize("days", [0, -1, 1.5, True, "2", None])
def test_invalid_days_are_rejected(jaipur_pois, days):
    with pytest.raises(InvalidArgument):
        optimize_itinerary(jaipur_pois, days, "Historical")


@pytest.mark.parametrize("hours", [0, -1.5, float("nan")])
def test_non_positive_visit_duration_is_rejected(jaipur_pois, hours):
    broken = jaipur_pois[:2] + [jaipur_pois[2].model_copy(update={"visit_duration": hours})]
    with pytest.raises(InvalidArgument):
        optimize_itinerary(broken, 2, "Historical")


def test_duplicate_ids_are_rejected(jaipur_pois):
    with pytest.raises(InvalidArgument):
        optimize_itinerary(jaipur_pois + [jaipur_pois[0]], 2, "Historical")


@pytest.mark.parametrize("category", [None, 3, "", "   "])
def test_malformed_category_is_rejected(jaipur_pois, category):
    with pytest.raises(InvalidArgument):
        optimize_itinerary(jaipur_pois, 2, category)


def test_unknown_strategy_is_rejected(jaipur_pois):
    with pytest.raises(InvalidArgument):
        optimize_itinerary(jaipur_pois, 2, "Historical", strategy="simulated_annealing")


def test_validation_happens_before_empty_shortcut():
    with pytest.raises(InvalidArgument):
        optimize_itinerary([], 0, "Historical")


@pytest.mark.parametrize("strategy", list(TourStrategy))
def test_metadata_names_the_strategy(jaipur_pois, strategy):
    result = optimize_itinerary(jaipur_pois, 2, "Historical", strategy=strategy.value)
    assert result.metadata.strategy == strategy.value
    assert result.metadata.optimization_method == OPTIMIZATION_METHODS[strategy]
    assert sorted(_flatten(result)) == sorted(poi.id for poi in jaipur_pois)


def test_configured_strategy_is_the_default(monkeypatch, jaipur_pois):
    monkeypatch.setenv("TRIP_OPTIMIZER_STRATEGY", "nearest_neighbor")
    result = ItineraryOptimizer().optimize(jaipur_pois, 1, "Historical")
    assert result.metadata.strategy == "nearest_neighbor"
    assert _flatten(result) == ["amber", "city_palace", "jantar_mantar", "hawa_mahal", "albert_hall"]


def test_steps_are_logged(jaipur_pois):
    sink = io.StringIO()
    logger = StructuredLogger(trace_id="t-1", output=sink)
    optimize_itinerary(jaipur_pois, 2, "Historical", logger=logger)

    events = [json.loads(line) for line in sink.getvalue().splitlines()]
    steps = [(e["event"], e.get("step")) for e in events if e["event"] in ("step_start", "step_end")]
    assert steps == [
        ("step_start", "build_graph"),
        ("step_end", "build_graph"),
        ("step_start", "construct_tour"),
        ("step_end", "construct_tour"),
        ("step_start", "partition_days"),
        ("step_end", "partition_days"),
        ("step_start", "balance_days"),
        ("step_end", "balance_days"),
    ]
    assert events[-1]["event"] == "summary"
    assert events[-1]["starting_point"] == "Amber Fort"
    assert all(e["trace_id"] == "t-1" for e in events)
