"""Domain package exports."""

from trip_optimizer.domain.constants import (
    CATEGORY_KEYWORDS,
    DEFAULT_SPEED_KMH,
    DEFAULT_WEIGHTS,
    EARTH_RADIUS_KM,
    FALLBACK_DISTANCE_KM,
    OPTIMIZATION_METHODS,
    WEIGHT_PROFILES,
)
from trip_optimizer.domain.enums import TourStrategy, TripCategory
from trip_optimizer.domain.exceptions import DomainError, InvalidArgument
from trip_optimizer.domain.models import (
    Edge,
    Graph,
    Location,
    OptimizationMetadata,
    OptimizationResult,
    POI,
    WeightProfile,
)

__all__ = [
    "DomainError",
    "Edge",
    "Graph",
    "InvalidArgument",
    "Location",
    "OptimizationMetadata",
    "OptimizationResult",
    "POI",
    "TourStrategy",
    "TripCategory",
    "WeightProfile",
    "CATEGORY_KEYWORDS",
    "DEFAULT_SPEED_KMH",
    "DEFAULT_WEIGHTS",
    "EARTH_RADIUS_KM",
    "FALLBACK_DISTANCE_KM",
    "OPTIMIZATION_METHODS",
    "WEIGHT_PROFILES",
]
