"""Itinerary optimization engine: tour construction and day partitioning."""

from trip_optimizer.planner import ItineraryOptimizer, optimize_itinerary

__all__ = ["ItineraryOptimizer", "optimize_itinerary"]
