"""Distance metrics for clustering algorithms."""

from .euclidean import (
    EuclideanDistance,
    squared_distance,
    squared_distances_to_center
)

__all__ = [
    'EuclideanDistance',
    'squared_distance',
    'squared_distances_to_center'
]
