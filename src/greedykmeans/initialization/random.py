"""
Random initialization strategy.

Selects random points from the dataset as initial cluster centers.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..representations.centroid import CentroidRepresentation
from ..utils.validation import check_n_clusters


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters random points (without replacement) as initial centers.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize clusters with random points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Random source; None uses torch's global generator

        Returns:
            List of initialized CentroidRepresentations
        """
        check_n_clusters(n_clusters)
        n_points, dimension = points.shape

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        # Permutation is drawn on CPU so a CPU generator works for any data device
        indices = torch.randperm(n_points, generator=generator)[:n_clusters]

        representations = []
        for idx in indices.tolist():
            rep = CentroidRepresentation(dimension, points.device, points.dtype)
            rep.mean = points[idx]
            representations.append(rep)

        return representations
