"""
Core data structures for the clustering engine.

Stores the cluster centers of one iteration, the assignment table with its
derived center counts, and the per-iteration history record.
"""

from typing import Dict, Any
import torch
from torch import Tensor
from dataclasses import dataclass, field


@dataclass
class ClusterState:
    """Snapshot of all cluster centers at a given iteration."""

    means: Tensor  # (K, d) cluster centers
    n_clusters: int
    dimension: int

    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        assert self.means.shape == (self.n_clusters, self.dimension)


class AssignmentMatrix:
    """Assignment table mapping each point index to one center index.

    Center counts are derived from the table on construction, so the two
    can never disagree.
    """

    def __init__(self, assignments: Tensor, n_clusters: int):
        """
        Args:
            assignments: (n,) hard assignments
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(assignments)

    def _validate_and_store(self, assignments: Tensor):
        assert assignments.dim() == 1
        if assignments.numel() > 0:
            assert assignments.max() < self.n_clusters
            assert assignments.min() >= 0
        self._assignments = assignments.long()
        self._counts = torch.bincount(self._assignments, minlength=self.n_clusters)

    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self._assignments.shape[0]

    @property
    def counts(self) -> Tensor:
        """(K,) number of points assigned to each center."""
        return self._counts

    def get_hard(self) -> Tensor:
        """Get the (n,) assignment table."""
        return self._assignments

    def get_cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get indices of points assigned to a specific cluster."""
        return torch.where(self._assignments == cluster_idx)[0]

    def empty_clusters(self) -> Tensor:
        """Indices of centers with no assigned points."""
        return torch.where(self._counts == 0)[0]


@dataclass
class AlgorithmState:
    """State of the refinement loop after one assignment step.

    Used for convergence checking, debugging, and inertia tracking.
    """
    iteration: int
    cluster_state: ClusterState
    assignments: AssignmentMatrix
    objective_value: float
    n_changed: int

    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)
