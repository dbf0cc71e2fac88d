"""Domain constants shared by deterministic logic."""

from trip_optimizer.domain.enums import TourStrategy, TripCategory

EARTH_RADIUS_KM = 6371.0
DEFAULT_SPEED_KMH = 30.0
FALLBACK_DISTANCE_KM = 1.0

# (travel_time, relevance, rating)
WEIGHT_PROFILES = {
    TripCategory.HISTORICAL: (0.4, 0.5, 0.1),
    TripCategory.RELIGIOUS: (0.3, 0.6, 0.1),
    TripCategory.NATURE: (0.5, 0.3, 0.2),
    TripCategory.ADVENTURE: (0.3, 0.5, 0.2),
    TripCategory.ROMANTIC: (0.4, 0.3, 0.3),
}

DEFAULT_WEIGHTS = (0.6, 0.3, 0.1)

CATEGORY_KEYWORDS = {
    TripCategory.HISTORICAL: ("historic", "fort", "palace", "monument", "museum"),
    TripCategory.RELIGIOUS: ("temple", "mosque", "church", "shrine", "religious"),
    TripCategory.NATURE: ("park", "garden", "nature", "lake", "mountain", "viewpoint"),
    TripCategory.ADVENTURE: ("adventure", "trek", "safari", "hiking", "climbing"),
    TripCategory.ROMANTIC: ("romantic", "cafe", "restaurant", "viewpoint", "sunset"),
}

RELEVANCE_BASE_SCORE = 1
NAME_KEYWORD_BONUS = 2
DESCRIPTION_KEYWORD_BONUS = 1

MAX_BUDGET_OVERRUN = 1.3
RELEVANCE_IMPORTANCE_WEIGHT = 0.7
RATING_IMPORTANCE_WEIGHT = 0.3
OVERLOAD_RATIO = 1.3
UNDERLOAD_RATIO = 0.8

OPTIMIZATION_METHODS = {
    TourStrategy.WEIGHTED_GREEDY: "Multi-criteria greedy tour with importance-weighted day partitioning",
    TourStrategy.NEAREST_NEIGHBOR: "Nearest-neighbor tour with importance-weighted day partitioning",
    TourStrategy.SHORTEST_PATH: "Shortest-path ordered tour with importance-weighted day partitioning",
}
