"""
Base class for clustering algorithms.

Provides the algorithmic skeleton of Lloyd iteration: an assignment step,
a convergence check against the previous assignment table, and an update
step, repeated until convergence or until the iteration budget runs out.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List, Union
import torch
from torch import Tensor
import time
import warnings

from .interfaces import (
    ClusterRepresentation, AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion, ClusteringObjective
)
from .data_structures import ClusterState, AssignmentMatrix, AlgorithmState
from ..utils.validation import (
    validate_points, check_n_clusters, check_max_iter, check_random_state
)
from ..utils.device import parse_device


class BaseClusteringAlgorithm:
    """Base class implementing the alternating optimization framework.

    Subclasses need to specify:
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Convergence criterion
    - Objective function

    When there are fewer points than requested clusters no clustering is
    attempted: every point becomes its own center.
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[Union[str, torch.device]] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum iterations; a negative budget counts as zero
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Seed or torch.Generator for reproducibility
            device: Torch device (None for auto-detect)
        """
        check_n_clusters(n_clusters)
        max_iter = check_max_iter(max_iter)

        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state
        self.device = parse_device(device)

        self.representations: Optional[List[ClusterRepresentation]] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None
        self.objective: Optional[ClusteringObjective] = None

        # Algorithm state
        self.fitted_ = False
        self.converged_ = False
        self.n_iter_ = 0
        self.history_: List[AlgorithmState] = []
        self.labels_: Optional[Tensor] = None
        self._inertia = 0.0

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.convergence_criterion
        - self.objective
        """
        pass

    def fit(self, X, y=None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: (n, d) points
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        return self._fit(X)

    def fit_predict(self, X, y=None) -> Tensor:
        """Fit and return the final assignment table.

        Args:
            X: (n, d) points
            y: Ignored

        Returns:
            (n,) tensor of cluster assignments
        """
        self._fit(X)
        return self.labels_

    def predict(self, X) -> Tensor:
        """Assign new data to the nearest fitted center.

        Args:
            X: (n, d) points

        Returns:
            (n,) tensor of cluster assignments
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        X = self._validate_data(X)
        return self.assignment_strategy.compute_assignments(X, self.representations)

    def _fit(self, X) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing Lloyd iteration."""
        # Validate everything before touching any state
        X = self._validate_data(X)
        n_points, dimension = X.shape
        self._create_components()
        generator = check_random_state(self.random_state)

        self.n_iter_ = 0
        self.history_ = []
        self.converged_ = False
        self.convergence_criterion.reset()

        start_time = time.time()

        if n_points < self.n_clusters:
            if self.verbose:
                print(f"Only {n_points} points for {self.n_clusters} clusters; "
                      f"returning the points as centers")
            self.representations = self._passthrough_representations(X)
            self.labels_ = torch.arange(n_points, device=X.device)
            self.converged_ = True
            self._inertia = 0.0
            self.fitted_ = True
            return self

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        self.representations = self.initialization_strategy.initialize(
            X, self.n_clusters, generator=generator
        )
        self.labels_ = None

        for iteration in range(self.max_iter):
            iter_start_time = time.time()

            # Assignment step
            assignments = self.assignment_strategy.compute_assignments(
                X, self.representations
            )
            assignment_matrix = AssignmentMatrix(assignments, self.n_clusters)
            self.labels_ = assignment_matrix.get_hard()

            objective_value = self.objective.compute(
                X, self.representations, assignments
            )

            # Convergence check happens before the update, so a converged
            # run returns the centers that produced the final assignments
            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'objective': float(objective_value),
                'assignments': assignments
            })
            n_changed = getattr(self.convergence_criterion, 'last_n_changed', n_points)

            self.history_.append(AlgorithmState(
                iteration=iteration,
                cluster_state=self._extract_cluster_state(),
                assignments=assignment_matrix,
                objective_value=float(objective_value),
                n_changed=n_changed,
                converged=converged
            ))

            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                iter_time = time.time() - iter_start_time
                print(f"Iteration {iteration:3d}: inertia = {float(objective_value):.6f} "
                      f"changed = {n_changed} ({iter_time:.3f}s)")

            if converged:
                self.converged_ = True
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

            # Update step
            if self.verbose >= 2:
                for k in assignment_matrix.empty_clusters().tolist():
                    warnings.warn(f"Cluster {k} has no points; keeping its previous center")

            for k, representation in enumerate(self.representations):
                cluster_indices = assignment_matrix.get_cluster_indices(k)
                self.update_strategy.update(representation, X[cluster_indices])

            self.n_iter_ = iteration + 1

        total_time = time.time() - start_time

        if self.verbose:
            if not self.converged_ and self.max_iter > 0:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        if self.labels_ is None:
            # No iteration ran; label against the seeded centers
            self.labels_ = self.assignment_strategy.compute_assignments(
                X, self.representations
            )
            self._inertia = float(self.objective.compute(X, self.representations, self.labels_))
        else:
            self._inertia = self.history_[-1].objective_value

        self.fitted_ = True
        return self

    def _validate_data(self, X) -> Tensor:
        """Validate and prepare input data."""
        return validate_points(X, device=self.device)

    def _passthrough_representations(self, X: Tensor) -> List[ClusterRepresentation]:
        """One center per point, in input order."""
        from ..representations.centroid import CentroidRepresentation

        representations = []
        for point in X:
            rep = CentroidRepresentation(X.shape[1], X.device, X.dtype)
            rep.mean = point
            representations.append(rep)
        return representations

    def _extract_cluster_state(self) -> ClusterState:
        """Extract current cluster parameters into ClusterState object."""
        means = torch.stack([
            rep.get_parameters()['mean']
            for rep in self.representations
        ])

        return ClusterState(
            means=means,
            n_clusters=len(self.representations),
            dimension=means.shape[1]
        )

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centers/means."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        if not self.representations:
            return torch.zeros(0, 0, dtype=torch.float64, device=self.device)
        return self._extract_cluster_state().means

    @property
    def inertia_(self) -> float:
        """Sum of squared distances from points to their assigned centers.

        This is the value of the last assignment step, measured before the
        update that followed it.
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self._inertia

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            setattr(self, key, value)
        return self
