"""Category relevance and criteria blending."""

from __future__ import annotations

from typing import Mapping

from trip_optimizer.domain.constants import (
    CATEGORY_KEYWORDS,
    DESCRIPTION_KEYWORD_BONUS,
    NAME_KEYWORD_BONUS,
    RELEVANCE_BASE_SCORE,
)
from trip_optimizer.domain.enums import TripCategory
from trip_optimizer.domain.models import POI, WeightProfile


class RelevanceScorer:
    """Keyword affinity between a POI and a trip category."""

    def __init__(self, keywords: Mapping[TripCategory, tuple[str, ...]] | None = None):
        self._keywords = dict(keywords if keywords is not None else CATEGORY_KEYWORDS)

    def keywords_for(self, category: TripCategory | str) -> tuple[str, ...]:
        try:
            category = TripCategory(category)
        except ValueError:
            category = TripCategory.HISTORICAL
        keywords = self._keywords.get(category)
        if keywords is None:
            keywords = self._keywords.get(TripCategory.HISTORICAL, ())
        return keywords

    def score(self, poi: POI, category: TripCategory) -> int:
        name = poi.name.lower()
        description = (poi.description or "").lower()
        total = RELEVANCE_BASE_SCORE
        for keyword in self.keywords_for(category):
            keyword = keyword.lower()
            if keyword in name:
                total += NAME_KEYWORD_BONUS
            if keyword in description:
                total += DESCRIPTION_KEYWORD_BONUS
        return total

    def relevance(self, poi: POI, category: TripCategory) -> float:
        """Upstream relevance wins over the keyword score, even when it is zero."""
        if poi.relevance_score is not None:
            return poi.relevance_score
        return self.score(poi, category)


def start_score(relevance: float, rating: float, weights: WeightProfile) -> float:
    return weights.relevance * (relevance / 5) + weights.rating * (rating / 5)


def hop_score(travel_time: float, relevance: float, rating: float, weights: WeightProfile) -> float:
    travel_cost = 1 / (1 + travel_time)
    return (
        weights.travel_time * travel_cost
        + weights.relevance * (relevance / 10)
        + weights.rating * (rating / 5.0)
    )
