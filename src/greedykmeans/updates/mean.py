"""
Mean update strategy for centroid-based clustering.
"""

from torch import Tensor

from ..base.interfaces import ParameterUpdater, ClusterRepresentation


class MeanUpdater(ParameterUpdater):
    """Updates cluster representation by computing mean of assigned points.

    A cluster with no assigned points keeps its previous center.
    """

    def update(self, representation: ClusterRepresentation,
               points: Tensor,
               **kwargs) -> None:
        """Update cluster mean.

        Args:
            representation: Cluster representation to update
            points: Points assigned to this cluster (already filtered)
            **kwargs: Ignored
        """
        if len(points) == 0:
            return
        representation.update_from_points(points)
