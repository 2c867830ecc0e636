"""Models module exporting all database models."""

from .tour import Tour
from .travel import Travel

__all__ = [
    "Travel",
    "Tour",
]
