"""Service layer package."""

from .tour_query import build_tours_query
from .tour_service import Page, TourService

__all__ = [
    "Page",
    "TourService",
    "build_tours_query",
]
