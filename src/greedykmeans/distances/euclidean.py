"""
Euclidean distance metric for clustering.

All distances here are squared: the sampler weights, the assignment step
and the inertia objective all work on ||x - μ||².
"""

from typing import Sequence, Union
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric, ClusterRepresentation
from ..exceptions import DimensionMismatch


def squared_distance(a: Union[Tensor, Sequence[float]],
                     b: Union[Tensor, Sequence[float]]) -> float:
    """Squared Euclidean distance between two equal-length coordinate sequences.

    Raises:
        DimensionMismatch: If the sequences differ in length
    """
    a = torch.as_tensor(a, dtype=torch.float64)
    b = torch.as_tensor(b, dtype=torch.float64, device=a.device)
    if a.shape != b.shape:
        raise DimensionMismatch(f"Cannot compare coordinates of shape "
                                f"{tuple(a.shape)} and {tuple(b.shape)}")
    diff = a - b
    return torch.sum(diff * diff).item()


def squared_distances_to_center(points: Tensor, center: Tensor) -> Tensor:
    """Squared distances from every point to one center.

    Args:
        points: (n, d) points
        center: (d,) center

    Returns:
        (n,) squared distances
    """
    if points.shape[1] != center.shape[0]:
        raise DimensionMismatch(f"Expected dimension {center.shape[0]}, got {points.shape[1]}")
    diff = points - center.unsqueeze(0)
    return torch.sum(diff * diff, dim=1)


class EuclideanDistance(DistanceMetric):
    """Squared Euclidean distance metric.

    Computes ||x - μ||² where μ is the cluster center.
    """

    def compute(self, points: Tensor, representation: ClusterRepresentation,
                **kwargs) -> Tensor:
        """Compute squared Euclidean distances from points to cluster center.

        Args:
            points: (n, d) tensor of points
            representation: Cluster representation with 'mean' parameter

        Returns:
            (n,) tensor of distances
        """
        params = representation.get_parameters()
        if 'mean' not in params:
            raise ValueError("Euclidean distance requires representation with 'mean' parameter")

        return squared_distances_to_center(points, params['mean'])
