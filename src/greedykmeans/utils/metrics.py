"""
Evaluation metrics for K-means results.
"""

import torch
from torch import Tensor

from ..exceptions import DimensionMismatch


def inertia(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Sum of squared distances from each point to its assigned center.

    Args:
        X: (n, d) data points
        labels: (n,) center index of each point
        centers: (k, d) cluster centers

    Returns:
        Total inertia (lower is better); 0.0 for no points
    """
    if X.shape[0] == 0:
        return 0.0
    if X.shape[1] != centers.shape[1]:
        raise DimensionMismatch(f"Points have dimension {X.shape[1]}, "
                                f"centers have dimension {centers.shape[1]}")

    diff = X - centers[labels.long()]
    return torch.sum(diff * diff).item()
