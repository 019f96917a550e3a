"""
K-means clustering algorithm.

Lloyd iteration with greedy D² (k-means++) seeding, implemented using the
modular framework.
"""

from typing import Optional, List, Union
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import ClusterRepresentation, ClusteringObjective
from ..assignments.hard import HardAssignment
from ..distances.euclidean import EuclideanDistance
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..utils.convergence import ChangeInAssignments
from ..utils.metrics import inertia
from ..updates.mean import MeanUpdater


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of squared distances to centroids."""

    def __init__(self):
        self.distance = EuclideanDistance()

    def compute(self, points: Tensor, representations: List[ClusterRepresentation],
                assignments: Tensor) -> Tensor:
        """Compute within-cluster sum of squares."""
        total = torch.zeros((), dtype=points.dtype, device=points.device)

        for k, rep in enumerate(representations):
            cluster_points_mask = (assignments == k)
            if cluster_points_mask.any():
                cluster_points = points[cluster_points_mask]
                total = total + self.distance.compute(cluster_points, rep).sum()

        return total

    @property
    def minimize(self) -> bool:
        return True


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions data into K clusters by minimizing within-cluster sum of
    squared distances. Iteration stops as soon as an assignment step leaves
    every point where it was.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str or array-like, default='k-means++'
        Initialization method:
        - 'k-means++' : greedy D² seeding
        - 'random' : K distinct points chosen uniformly
        - array of shape (n_clusters, n_features) : Use as initial centers
    max_iter : int, default=100
        Maximum number of iterations
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed or generator for reproducibility
    device : str or torch.device, optional
        Device for computation (CPU/GPU)

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Sum of squared distances to assigned cluster centers
    n_iter_ : int
        Number of update steps run
    converged_ : bool
        Whether the assignments stopped changing within max_iter
    """

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, Tensor, list] = 'k-means++',
                 max_iter: int = 100,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[Union[str, torch.device]] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state,
            device=device
        )
        if isinstance(init, str) and init not in ('k-means++', 'random'):
            raise ValueError(f"Unknown init method: {init}")
        self.init = init

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.assignment_strategy = HardAssignment()
        self.update_strategy = MeanUpdater()

        if isinstance(self.init, str):
            if self.init == 'k-means++':
                self.initialization_strategy = KMeansPlusPlusInit()
            else:
                from ..initialization.random import RandomInit
                self.initialization_strategy = RandomInit()
        else:
            # Custom initial centers provided
            from ..initialization.from_previous import FromPreviousInit
            from ..utils.validation import validate_points
            initial_centers = validate_points(self.init, device=self.device)
            self.initialization_strategy = FromPreviousInit(initial_centers)

        self.convergence_criterion = ChangeInAssignments()
        self.objective = KMeansObjective()

    def score(self, X, y=None) -> float:
        """Opposite of the value of X on the K-means objective.

        Parameters
        ----------
        X : array-like of shape (n_samples, n_features)
            New data
        y : Ignored
            Not used

        Returns
        -------
        score : float
            Negative of sum of squared distances to nearest centers
        """
        labels = self.predict(X)
        X = self._validate_data(X)
        return -inertia(X, labels, self.cluster_centers_)
