"""
Weighted index sampling used by the seeding strategies.

Every random draw in the package goes through `uniform`, so passing the
same generator reproduces the same centers.
"""

from typing import Optional, Sequence, Union
import torch
from torch import Tensor

from ..exceptions import InvalidWeight


def uniform(generator: Optional[torch.Generator] = None) -> float:
    """Draw one float uniformly from [0, 1).

    Args:
        generator: Random source; None uses torch's global generator
    """
    return torch.rand(1, generator=generator, dtype=torch.float64).item()


def uniform_index(n: int, generator: Optional[torch.Generator] = None) -> int:
    """Draw an index uniformly from range(n) using a single draw."""
    return min(int(uniform(generator) * n), n - 1)


def sample(weights: Union[Tensor, Sequence[float]],
           generator: Optional[torch.Generator] = None) -> int:
    """Draw an index with probability proportional to its weight.

    Roulette-wheel selection: one uniform draw r is compared against the
    cumulative normalized weights and the first index whose cumulative
    probability exceeds r is returned. If all weights are zero the index is
    drawn uniformly instead. Weights of +inf, as produced by squared
    distances that overflow, outweigh every finite weight: the index is
    then drawn uniformly among the infinite entries.

    Args:
        weights: (n,) non-negative weights
        generator: Random source; None uses torch's global generator

    Returns:
        Sampled index in [0, n)

    Raises:
        InvalidWeight: If any weight is negative or NaN, or there are no weights
    """
    weights = torch.as_tensor(weights, dtype=torch.float64)
    if weights.dim() != 1 or weights.numel() == 0:
        raise InvalidWeight(f"Expected a non-empty 1D weight vector, got shape {tuple(weights.shape)}")

    bad = torch.nonzero(torch.isnan(weights) | (weights < 0))
    if bad.numel() > 0:
        idx = bad[0, 0].item()
        raise InvalidWeight(f"Weight at index {idx} is invalid: {weights[idx].item()}")

    n = weights.numel()
    r = uniform(generator)

    infinite = torch.nonzero(torch.isinf(weights))
    if infinite.numel() > 0:
        m = infinite.shape[0]
        return infinite[min(int(r * m), m - 1), 0].item()

    total = weights.sum().item()
    if total == float('inf'):
        # finite weights whose sum overflows
        weights = weights / weights.max()
        total = weights.sum().item()

    if total == 0.0:
        return min(int(r * n), n - 1)

    cumulative = torch.cumsum(weights / total, dim=0)
    crossed = torch.nonzero(cumulative > r)
    if crossed.numel() > 0:
        return crossed[0, 0].item()

    # Rounding left the cumulative sum at or below r: fall back to the last
    # index that can legitimately be drawn.
    return torch.nonzero(weights > 0)[-1, 0].item()
