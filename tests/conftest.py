"""pytest global fixtures: environment isolation and shared POI sets."""

import pytest

from trip_optimizer.domain.models import Location, POI


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Tests never pick up optimizer settings from the developer's shell."""
    monkeypatch.delenv("TRIP_OPTIMIZER_SPEED_KMH", raising=False)
    monkeypatch.delenv("TRIP_OPTIMIZER_STRATEGY", raising=False)
    monkeypatch.setenv("TRIP_OPTIMIZER_LOG_EVENTS", "false")
    from trip_optimizer.infrastructure.logging import reset_logger

    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def jaipur_pois() -> list[POI]:
    # Relevance drops in steps of 2 so it dominates hop scores inside the city.
    return [
        POI(id="amber", name="Amber Fort", location=Location(lat=26.9855, lng=75.8513),
            visit_duration=2.5, rating=4.5, relevance_score=10),
        POI(id="city_palace", name="City Palace", location=Location(lat=26.9258, lng=75.8237),
            visit_duration=2.0, rating=4.5, relevance_score=8),
        POI(id="hawa_mahal", name="Hawa Mahal", location=Location(lat=26.9239, lng=75.8267),
            visit_duration=1.5, rating=4.5, relevance_score=6),
        POI(id="jantar_mantar", name="Jantar Mantar", location=Location(lat=26.9248, lng=75.8246),
            visit_duration=1.0, rating=4.5, relevance_score=4),
        POI(id="albert_hall", name="Albert Hall Museum", location=Location(lat=26.9117, lng=75.8195),
            visit_duration=2.0, rating=4.5, relevance_score=2),
    ]
