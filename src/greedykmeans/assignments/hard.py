"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster based on the distance metric.
"""

from typing import List
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, ClusterRepresentation


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance.
    Clusters are scanned in index order and a point only moves on a strict
    improvement, so ties go to the lowest cluster index.
    """

    def compute_assignments(self, points: Tensor,
                            representations: List[ClusterRepresentation],
                            **kwargs) -> Tensor:
        """Assign each point to nearest cluster.

        Args:
            points: (n, d) data points
            representations: List of K cluster representations
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) tensor of cluster indices
        """
        n_points = points.shape[0]

        assignments = torch.zeros(n_points, dtype=torch.long, device=points.device)
        best = representations[0].distance_to_point(points)

        for k in range(1, len(representations)):
            distances = representations[k].distance_to_point(points)
            closer = distances < best
            best = torch.where(closer, distances, best)
            assignments[closer] = k

        return assignments
