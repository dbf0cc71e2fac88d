"""Domain enums."""

from enum import Enum


class TripCategory(str, Enum):
    HISTORICAL = "Historical"
    ADVENTURE = "Adventure"
    RELIGIOUS = "Religious"
    NATURE = "Nature"
    ROMANTIC = "Romantic"


class TourStrategy(str, Enum):
    WEIGHTED_GREEDY = "weighted_greedy"
    NEAREST_NEIGHBOR = "nearest_neighbor"
    SHORTEST_PATH = "shortest_path"
