"""
Centroid representation for K-means clustering.

The simplest cluster representation - just a mean point in space.
"""

from typing import Dict
from torch import Tensor

from .base_representation import BaseRepresentation
from ..distances.euclidean import squared_distances_to_center


class CentroidRepresentation(BaseRepresentation):
    """Cluster represented by a single centroid point."""

    def distance_to_point(self, points: Tensor) -> Tensor:
        """Compute squared Euclidean distance from points to centroid.

        Args:
            points: (n, d) tensor of data points

        Returns:
            (n,) tensor of squared Euclidean distances
        """
        self._check_points_shape(points)
        return squared_distances_to_center(points, self._mean)

    def update_from_points(self, points: Tensor) -> None:
        """Update centroid in place as the mean of assigned points.

        Args:
            points: (n, d) tensor of assigned points
        """
        self._check_points_shape(points)

        if len(points) == 0:
            # Empty cluster - keep current mean instead of dividing by zero
            return

        self._mean.copy_(points.mean(dim=0))

    def get_parameters(self) -> Dict[str, Tensor]:
        """Return parameters defining this centroid."""
        return {'mean': self._mean.clone()}

    def set_parameters(self, params: Dict[str, Tensor]) -> None:
        """Set centroid parameters."""
        if 'mean' in params:
            self.mean = params['mean']

    def __repr__(self) -> str:
        return f"CentroidRepresentation(dimension={self._dimension}, mean_norm={self._mean.norm():.3f})"
