"""Pydantic domain models."""

from __future__ import annotations

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Location(BaseModel):
    lat: Optional[float] = None
    lng: Optional[float] = None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _drop_non_numeric(cls, value: Any) -> Any:
        # Unusable coordinates become None; distance estimation falls back to a fixed hop.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value


class POI(_CamelModel):
    id: str
    name: str
    location: Optional[Location] = None
    visit_duration: float
    rating: float = 0.0
    relevance_score: Optional[float] = None
    description: str = ""
    # Annotations written by the optimizer.
    travel_time_to_next: Optional[float] = None
    importance: Optional[float] = None
    time_required: Optional[float] = None

    @field_validator("location", mode="before")
    @classmethod
    def _drop_malformed_location(cls, value: Any) -> Any:
        if value is None or isinstance(value, (dict, Location)):
            return value
        return None

    def clear_annotations(self) -> "POI":
        return self.model_copy(
            update={"travel_time_to_next": None, "importance": None, "time_required": None}
        )

    def hours_required(self) -> float:
        if self.time_required is not None:
            return self.time_required
        return self.visit_duration + (self.travel_time_to_next or 0.0)


class Edge(BaseModel):
    source: str
    target: str
    distance_km: float
    travel_time_hours: float


class Graph(BaseModel):
    nodes: dict[str, POI] = Field(default_factory=dict)
    adjacency: dict[str, list[Edge]] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        return not self.nodes

    def edge(self, source: str, target: str) -> Edge:
        for candidate in self.adjacency.get(source, []):
            if candidate.target == target:
                return candidate
        raise KeyError(f"no edge {source} -> {target}")


class WeightProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    travel_time: float
    relevance: float
    rating: float

    @model_validator(mode="after")
    def _check_sum(self) -> "WeightProfile":
        total = self.travel_time + self.relevance + self.rating
        if not math.isclose(total, 1.0, abs_tol=1e-6):
            raise ValueError(f"weights must sum to 1.0, got {total}")
        return self

    @classmethod
    def of(cls, weights: tuple[float, float, float]) -> "WeightProfile":
        travel_time, relevance, rating = weights
        return cls(travel_time=travel_time, relevance=relevance, rating=rating)


class OptimizationMetadata(_CamelModel):
    trip_category: str
    starting_point: Optional[str] = None
    total_pois: int = Field(default=0, alias="totalPOIs")
    optimization_method: str
    strategy: str
    day_hours: list[float] = Field(default_factory=list)


class OptimizationResult(_CamelModel):
    daily_itineraries: list[list[POI]] = Field(default_factory=list)
    metadata: OptimizationMetadata

    def to_payload(self) -> dict[str, Any]:
        """Camel-cased output; the last POI of a day carries no onward travel time."""
        days: list[list[dict[str, Any]]] = []
        for bucket in self.daily_itineraries:
            rendered = [poi.model_dump(by_alias=True, exclude_none=True) for poi in bucket]
            if rendered:
                rendered[-1].pop("travelTimeToNext", None)
            days.append(rendered)
        return {
            "dailyItineraries": days,
            "metadata": self.metadata.model_dump(by_alias=True),
        }
