"""
greedykmeans: K-means clustering with greedy D² seeding.

This package implements Lloyd's algorithm seeded with k-means++ as a pure,
in-memory computation, including:
- a roulette-wheel weighted sampler
- greedy D² (k-means++) seeding
- Lloyd refinement with explicit handling of empty clusters
- a `cluster(points, K, max_iterations)` entry point for query engines

Example usage:
    >>> from greedykmeans import cluster, KMeans
    >>>
    >>> points = [[0, 0], [0, 1], [10, 0], [10, 1]]
    >>> centers = cluster(points, 2, 10, random_state=0)
    >>>
    >>> kmeans = KMeans(n_clusters=2, random_state=0)
    >>> labels = kmeans.fit_predict(points)
"""

__version__ = '0.1.0'

from .exceptions import ClusteringError, InvalidK, DimensionMismatch, InvalidWeight

# Import main algorithms
from .algorithms.kmeans import KMeans
from .algorithms.builder import ClusteringBuilder, create_kmeans

# Functional interface
from .api import cluster, seed, refine
from .initialization.sampling import sample
from .distances.euclidean import squared_distance

# Convenience imports
from .base import (
    ClusterState,
    AssignmentMatrix,
    AlgorithmState
)

__all__ = [
    # Entry points
    'cluster',
    'seed',
    'refine',
    'sample',
    'squared_distance',

    # Algorithms
    'KMeans',
    'ClusteringBuilder',
    'create_kmeans',

    # Core data structures
    'ClusterState',
    'AssignmentMatrix',
    'AlgorithmState',

    # Errors
    'ClusteringError',
    'InvalidK',
    'DimensionMismatch',
    'InvalidWeight',

    # Version
    '__version__'
]
