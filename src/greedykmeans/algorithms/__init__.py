"""Clustering algorithm implementations."""

from .kmeans import KMeans, KMeansObjective
from .builder import ClusteringBuilder, CustomClusteringAlgorithm, create_kmeans

__all__ = [
    'KMeans',
    'KMeansObjective',
    'ClusteringBuilder',
    'CustomClusteringAlgorithm',
    'create_kmeans'
]
