"""Deterministic planning algorithms."""

from __future__ import annotations

from trip_optimizer.planner.core import ItineraryOptimizer, optimize_itinerary

__all__ = ["ItineraryOptimizer", "optimize_itinerary"]
