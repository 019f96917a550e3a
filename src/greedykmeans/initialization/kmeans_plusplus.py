"""
K-means++ initialization strategy.

Selects initial cluster centers using greedy D² sampling, which chooses
centers that are far apart to improve convergence speed and quality.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..representations.centroid import CentroidRepresentation
from ..distances.euclidean import squared_distances_to_center
from ..utils.validation import check_n_clusters
from .sampling import sample, uniform_index


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute squared distance from each point to nearest existing center
       - Choose next center with probability proportional to that distance
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize cluster centers using K-means++.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Random source; None uses torch's global generator

        Returns:
            List of initialized CentroidRepresentations, each owning a copy
            of the chosen point's coordinates
        """
        check_n_clusters(n_clusters)
        n_points, dimension = points.shape

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        first_idx = uniform_index(n_points, generator)
        center_indices = [first_idx]

        # Squared distance from each point to its nearest chosen center
        distances = squared_distances_to_center(points, points[first_idx])

        for c in range(1, n_clusters):
            weights = distances.clone()
            weights[center_indices] = 0.0
            new_idx = sample(weights, generator)
            center_indices.append(new_idx)

            new_center_distances = squared_distances_to_center(points, points[new_idx])
            distances = torch.minimum(distances, new_center_distances)

        representations = []
        for idx in center_indices:
            rep = CentroidRepresentation(dimension, points.device, points.dtype)
            rep.mean = points[idx]
            representations.append(rep)

        return representations
