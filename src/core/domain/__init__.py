"""
Domain models and value objects.

Contains interpolation points and share document records.
"""

from src.core.domain.point import Point
from src.core.domain.share import ShareEntry, ThresholdKeys

__all__ = [
    # Point model
    "Point",
    # Share models
    "ShareEntry",
    "ThresholdKeys",
]
