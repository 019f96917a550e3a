"""
Functional entry points.

`cluster` is the single call a host query engine makes: points in, centers
out, as plain Python lists. `seed` and `refine` expose the two halves of
the computation on their own.
"""

from typing import List, Optional, Sequence, Union
import torch
from torch import Tensor

from .algorithms.kmeans import KMeans
from .initialization.kmeans_plusplus import KMeansPlusPlusInit
from .utils.validation import (
    validate_points, check_n_clusters, check_random_state, check_centers
)
from .utils.device import parse_device


def seed(points, n_clusters: int,
         random_state: Optional[Union[int, torch.Generator]] = None,
         device: Optional[Union[str, torch.device]] = None) -> Tensor:
    """Choose initial centers with greedy D² seeding.

    Args:
        points: (n, d) points
        n_clusters: Number of centers K, at most n
        random_state: Seed or torch.Generator
        device: Torch device (None for auto-detect)

    Returns:
        (K, d) tensor of centers copied from the chosen points
    """
    check_n_clusters(n_clusters)
    X = validate_points(points, device=parse_device(device))
    generator = check_random_state(random_state)

    representations = KMeansPlusPlusInit().initialize(X, n_clusters, generator=generator)
    return torch.stack([rep.mean for rep in representations])


def refine(points, initial_centers, max_iterations: int,
           verbose: int = 0,
           device: Optional[Union[str, torch.device]] = None) -> Tensor:
    """Run Lloyd iteration from the given centers.

    If there are fewer points than centers the points themselves are
    returned.

    Args:
        points: (n, d) points
        initial_centers: (K, d) starting centers, left untouched
        max_iterations: Iteration budget; zero or less skips refinement
        verbose: Verbosity level
        device: Torch device (None for auto-detect)

    Returns:
        (K, d) tensor of refined centers
    """
    X = validate_points(points, device=parse_device(device))
    centers = validate_points(initial_centers, device=X.device)
    check_n_clusters(centers.shape[0])
    if X.shape[0] > 0:
        check_centers(centers, X.shape[1])

    model = KMeans(
        n_clusters=centers.shape[0],
        init=centers,
        max_iter=max_iterations,
        verbose=verbose,
        device=X.device
    )
    model.fit(X)
    return model.cluster_centers_


def cluster(points: Union[Tensor, Sequence[Sequence[float]]],
            n_clusters: int,
            max_iterations: int,
            random_state: Optional[Union[int, torch.Generator]] = None,
            device: Optional[Union[str, torch.device]] = None) -> List[List[float]]:
    """Perform K-means clustering on a collection of tuples.

    Args:
        points: N points of equal length M
        n_clusters: Number of clusters K
        max_iterations: Iteration budget; zero or less skips refinement
        random_state: Seed or torch.Generator for the seeding draws
        device: Torch device (None for auto-detect)

    Returns:
        K centers, each a list of M floats. If N < K the input points are
        returned unchanged, in order.

    Raises:
        InvalidK: If n_clusters is not positive
        DimensionMismatch: If the points differ in length
    """
    model = KMeans(
        n_clusters=n_clusters,
        max_iter=max_iterations,
        random_state=random_state,
        device=device
    )
    model.fit(points)
    return model.cluster_centers_.tolist()
