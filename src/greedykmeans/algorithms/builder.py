"""
Builder pattern for constructing clustering algorithms.

Provides a fluent interface for configuring the K-means engine by
combining seeding, assignment, update and convergence components.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import (
    AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion, ClusteringObjective
)
from ..assignments import HardAssignment
from ..updates import MeanUpdater
from ..initialization import RandomInit, KMeansPlusPlusInit, FromPreviousInit
from ..utils.convergence import ChangeInAssignments
from ..utils.validation import validate_points
from .kmeans import KMeansObjective


class CustomClusteringAlgorithm(BaseClusteringAlgorithm):
    """Custom clustering algorithm built from components."""

    def __init__(self,
                 n_clusters: int,
                 assignment_strategy: AssignmentStrategy,
                 update_strategy: ParameterUpdater,
                 initialization_strategy: InitializationStrategy,
                 convergence_criterion: ConvergenceCriterion,
                 objective: ClusteringObjective,
                 max_iter: int = 100,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 device: Optional[Union[str, torch.device]] = None):
        """Initialize custom algorithm with provided components."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state,
            device=device
        )

        self.assignment_strategy = assignment_strategy
        self.update_strategy = update_strategy
        self.initialization_strategy = initialization_strategy
        self.convergence_criterion = convergence_criterion
        self.objective = objective

    def _create_components(self) -> None:
        """Components are already provided."""
        pass


class ClusteringBuilder:
    """Fluent builder for creating clustering algorithms.

    Examples
    --------
    >>> algorithm = (ClusteringBuilder()
    ...     .with_kmeans_plusplus_init()
    ...     .with_assignment_convergence(tol=0.0)
    ...     .with_max_iter(20)
    ...     .with_random_state(0)
    ...     .build(n_clusters=5))
    """

    def __init__(self):
        """Initialize builder with K-means defaults."""
        self._assignment_strategy = HardAssignment()
        self._update_strategy = MeanUpdater()
        self._initialization_strategy = KMeansPlusPlusInit()
        self._convergence_criterion = ChangeInAssignments()
        self._objective = None

        # Algorithm parameters
        self._max_iter = 100
        self._verbose = 0
        self._random_state = None
        self._device = None

    def with_assignment_strategy(self, strategy: AssignmentStrategy) -> 'ClusteringBuilder':
        """Set the assignment strategy."""
        self._assignment_strategy = strategy
        return self

    def with_update_strategy(self, strategy: ParameterUpdater) -> 'ClusteringBuilder':
        """Set the parameter update strategy."""
        self._update_strategy = strategy
        return self

    def with_initialization(self, strategy: InitializationStrategy) -> 'ClusteringBuilder':
        """Set initialization strategy."""
        self._initialization_strategy = strategy
        return self

    def with_random_init(self) -> 'ClusteringBuilder':
        """Use random initialization."""
        return self.with_initialization(RandomInit())

    def with_kmeans_plusplus_init(self) -> 'ClusteringBuilder':
        """Use K-means++ initialization."""
        return self.with_initialization(KMeansPlusPlusInit())

    def with_initial_centers(self, centers: Union[Tensor, list]) -> 'ClusteringBuilder':
        """Start from explicit centers instead of seeding."""
        return self.with_initialization(FromPreviousInit(validate_points(centers)))

    def with_convergence_criterion(self, criterion: ConvergenceCriterion) -> 'ClusteringBuilder':
        """Set convergence criterion."""
        self._convergence_criterion = criterion
        return self

    def with_assignment_convergence(self, tol: float = 0.0,
                                    patience: int = 1) -> 'ClusteringBuilder':
        """Use convergence based on assignment changes."""
        return self.with_convergence_criterion(
            ChangeInAssignments(min_change_fraction=tol, patience=patience)
        )

    def with_objective(self, objective: ClusteringObjective) -> 'ClusteringBuilder':
        """Set the objective function."""
        self._objective = objective
        return self

    def with_max_iter(self, max_iter: int) -> 'ClusteringBuilder':
        """Set maximum iterations."""
        self._max_iter = max_iter
        return self

    def with_verbose(self, verbose: int) -> 'ClusteringBuilder':
        """Set verbosity level."""
        self._verbose = verbose
        return self

    def with_random_state(self, random_state: Union[int, torch.Generator]) -> 'ClusteringBuilder':
        """Set random seed or generator."""
        self._random_state = random_state
        return self

    def with_device(self, device: Union[str, torch.device]) -> 'ClusteringBuilder':
        """Set computation device."""
        self._device = device
        return self

    def build(self, n_clusters: int) -> CustomClusteringAlgorithm:
        """Build the clustering algorithm.

        Parameters
        ----------
        n_clusters : int
            Number of clusters

        Returns
        -------
        algorithm : CustomClusteringAlgorithm
            The configured clustering algorithm
        """
        objective = self._objective if self._objective is not None else KMeansObjective()

        return CustomClusteringAlgorithm(
            n_clusters=n_clusters,
            assignment_strategy=self._assignment_strategy,
            update_strategy=self._update_strategy,
            initialization_strategy=self._initialization_strategy,
            convergence_criterion=self._convergence_criterion,
            objective=objective,
            max_iter=self._max_iter,
            verbose=self._verbose,
            random_state=self._random_state,
            device=self._device
        )


def create_kmeans(n_clusters: int, **kwargs) -> CustomClusteringAlgorithm:
    """Create a K-means algorithm using the builder.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    **kwargs : dict
        Builder settings by name, e.g. ``max_iter=20`` calls ``with_max_iter(20)``

    Returns
    -------
    algorithm : CustomClusteringAlgorithm
        K-means algorithm
    """
    builder = ClusteringBuilder()
    builder.with_kmeans_plusplus_init()
    builder.with_assignment_convergence()

    for key, value in kwargs.items():
        method = getattr(builder, f'with_{key}', None)
        if method is None:
            raise TypeError(f"Unknown K-means option: {key}")
        method(value)

    return builder.build(n_clusters)
