"""Optimizer configuration and runtime resolvers."""

from __future__ import annotations

import math
import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from trip_optimizer.domain.constants import (
    CATEGORY_KEYWORDS,
    DEFAULT_SPEED_KMH,
    DEFAULT_WEIGHTS,
    FALLBACK_DISTANCE_KM,
    MAX_BUDGET_OVERRUN,
    OVERLOAD_RATIO,
    RATING_IMPORTANCE_WEIGHT,
    RELEVANCE_IMPORTANCE_WEIGHT,
    UNDERLOAD_RATIO,
    WEIGHT_PROFILES,
)
from trip_optimizer.domain.enums import TourStrategy, TripCategory
from trip_optimizer.domain.exceptions import InvalidArgument
from trip_optimizer.domain.models import WeightProfile

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _as_category(value: Any) -> TripCategory | None:
    if isinstance(value, TripCategory):
        return value
    try:
        return TripCategory(value)
    except ValueError:
        return None


def _default_weight_profiles() -> dict[TripCategory, WeightProfile]:
    return {category: WeightProfile.of(weights) for category, weights in WEIGHT_PROFILES.items()}


def _default_keywords() -> dict[TripCategory, tuple[str, ...]]:
    return dict(CATEGORY_KEYWORDS)


class OptimizerConfig(BaseModel):
    """Immutable tables and tuning knobs injected into the optimizer."""

    model_config = ConfigDict(frozen=True)

    weight_profiles: dict[TripCategory, WeightProfile] = Field(default_factory=_default_weight_profiles)
    default_weights: WeightProfile = Field(default_factory=lambda: WeightProfile.of(DEFAULT_WEIGHTS))
    category_keywords: dict[TripCategory, tuple[str, ...]] = Field(default_factory=_default_keywords)
    speed_kmh: float = DEFAULT_SPEED_KMH
    fallback_distance_km: float = FALLBACK_DISTANCE_KM
    max_budget_overrun: float = MAX_BUDGET_OVERRUN
    relevance_importance_weight: float = RELEVANCE_IMPORTANCE_WEIGHT
    rating_importance_weight: float = RATING_IMPORTANCE_WEIGHT
    overload_ratio: float = OVERLOAD_RATIO
    underload_ratio: float = UNDERLOAD_RATIO
    strategy: TourStrategy = TourStrategy.WEIGHTED_GREEDY

    def weights_for(self, category: TripCategory | str) -> WeightProfile:
        profile = self.weight_profiles.get(_as_category(category))
        return profile if profile is not None else self.default_weights


def resolve_category(value: Any) -> TripCategory:
    """Map a caller-supplied category onto the closed set; unknown names fall back to Historical."""
    if isinstance(value, TripCategory):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument("trip_category", f"expected a category name, got {value!r}")
    wanted = value.strip().lower()
    for category in TripCategory:
        if category.value.lower() == wanted:
            return category
    return TripCategory.HISTORICAL


def resolve_strategy(value: Any) -> TourStrategy:
    if isinstance(value, TourStrategy):
        return value
    mode = str(value or "").strip().lower()
    for strategy in TourStrategy:
        if strategy.value == mode:
            return strategy
    choices = ", ".join(s.value for s in TourStrategy)
    raise InvalidArgument("strategy", f"unknown tour strategy {value!r} (expected one of: {choices})")


def _resolve_speed(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_SPEED_KMH
    try:
        speed = float(raw)
    except ValueError:
        raise InvalidArgument("TRIP_OPTIMIZER_SPEED_KMH", f"not a number: {raw!r}") from None
    if not math.isfinite(speed) or speed <= 0:
        raise InvalidArgument("TRIP_OPTIMIZER_SPEED_KMH", f"must be a positive number, got {raw!r}")
    return speed


def log_events_enabled() -> bool:
    raw = str(os.getenv("TRIP_OPTIMIZER_LOG_EVENTS") or "").strip().lower()
    if raw in _FALSY:
        return False
    return raw in _TRUTHY or not raw


def load_config(**overrides: Any) -> OptimizerConfig:
    values: dict[str, Any] = {
        "speed_kmh": _resolve_speed(os.getenv("TRIP_OPTIMIZER_SPEED_KMH")),
    }
    raw_strategy = os.getenv("TRIP_OPTIMIZER_STRATEGY")
    if raw_strategy and raw_strategy.strip():
        values["strategy"] = resolve_strategy(raw_strategy)
    values.update({k: v for k, v in overrides.items() if v is not None})
    return OptimizerConfig(**values)


__all__ = [
    "OptimizerConfig",
    "load_config",
    "log_events_enabled",
    "resolve_category",
    "resolve_strategy",
]
