"""
Input validation utilities.

Converts user supplied point collections to tensors and checks the
clustering arguments before any work is done, so a failed call never
leaves partial state behind.
"""

from typing import Optional, Union, Sequence
import numbers
import torch
from torch import Tensor
import numpy as np

from ..exceptions import InvalidK, DimensionMismatch


def validate_points(X: Union[Tensor, np.ndarray, Sequence[Sequence[float]]],
                    dtype: torch.dtype = torch.float64,
                    device: Optional[torch.device] = None,
                    ensure_finite: bool = True) -> Tensor:
    """Validate a point collection and convert it to an (n, d) tensor.

    Args:
        X: Points as a tensor, numpy array, or sequence of sequences
        dtype: Target data type
        device: Target device
        ensure_finite: Whether to reject inf/nan coordinates

    Returns:
        (n, d) tensor. An empty collection gives a (0, 0) tensor.

    Raises:
        DimensionMismatch: If the points do not all share the length of the first point
        TypeError: If X cannot be interpreted as a point collection
        ValueError: If X has the wrong rank or contains non-finite values
    """
    if isinstance(X, Tensor):
        X = X.to(dtype=dtype, device=device)
    elif isinstance(X, np.ndarray):
        if X.dtype == object:
            X = _from_rows(list(X), dtype, device)
        else:
            X = torch.from_numpy(X).to(dtype=dtype, device=device)
    elif isinstance(X, (list, tuple)):
        X = _from_rows(X, dtype, device)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if X.dim() == 1 and X.numel() == 0:
        X = X.reshape(0, 0)
    if X.dim() != 2:
        raise ValueError(f"Expected 2D array of points, got {X.dim()}D")

    if ensure_finite and X.numel() > 0:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def _from_rows(rows, dtype: torch.dtype, device: Optional[torch.device]) -> Tensor:
    """Build a tensor from ragged-checked rows."""
    if len(rows) == 0:
        return torch.zeros(0, 0, dtype=dtype, device=device)

    dimension = None
    for i, row in enumerate(rows):
        if isinstance(row, Tensor):
            length = row.numel() if row.dim() == 1 else -1
        elif isinstance(row, (list, tuple, np.ndarray)):
            length = len(row)
        else:
            raise TypeError(f"Point {i} is not a sequence: {type(row)}")

        if dimension is None:
            dimension = length
        elif length != dimension:
            raise DimensionMismatch(
                f"Point {i} has {length} coordinates, expected {dimension}"
            )

    rows = [r.tolist() if isinstance(r, (Tensor, np.ndarray)) else list(r) for r in rows]
    return torch.tensor(rows, dtype=dtype, device=device)


def check_n_clusters(n_clusters: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters

    Raises:
        TypeError: If not an integer
        InvalidK: If not positive
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise InvalidK(f"n_clusters must be positive, got {n_clusters}")


def check_max_iter(max_iter: int) -> int:
    """Validate the iteration budget.

    A budget of zero or less runs no refinement and leaves the seeds as
    they are, so negative values are clamped to zero.

    Returns:
        The budget as a non-negative int
    """
    if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral):
        raise TypeError(f"max_iter must be int, got {type(max_iter)}")

    return max(int(max_iter), 0)


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator, or None to use torch's global generator
    """
    if random_state is None:
        return None
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, numbers.Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def check_centers(centers: Tensor, dimension: int) -> None:
    """Check that a (K, d) center tensor matches the data dimension."""
    if centers.dim() != 2:
        raise ValueError(f"Expected 2D array of centers, got {centers.dim()}D")
    if centers.shape[0] == 0:
        raise InvalidK("At least one initial center is required")
    if centers.shape[1] != dimension:
        raise DimensionMismatch(f"Centers have dimension {centers.shape[1]}, "
                                f"but data has dimension {dimension}")
