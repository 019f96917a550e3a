"""
Base representation class with common functionality for cluster representations.
"""

import torch
from torch import Tensor

from ..base.interfaces import ClusterRepresentation
from ..exceptions import DimensionMismatch


class BaseRepresentation(ClusterRepresentation):
    """Base class providing common functionality for cluster representations.

    The mean is an owned buffer: values assigned to it are copied, never
    aliased, so a center seeded from a data point cannot write back into
    the dataset.
    """

    def __init__(self, dimension: int, device: torch.device,
                 dtype: torch.dtype = torch.float64):
        """
        Args:
            dimension: Ambient dimension d of the data
            device: Torch device for tensor allocation
            dtype: Floating point type of the center coordinates
        """
        self._dimension = dimension
        self._device = device
        self._dtype = dtype
        self._mean = torch.zeros(dimension, device=device, dtype=dtype)

    @property
    def dimension(self) -> int:
        """Ambient dimension of the data."""
        return self._dimension

    @property
    def device(self) -> torch.device:
        """Device where tensors are stored."""
        return self._device

    @property
    def mean(self) -> Tensor:
        """Cluster mean/centroid."""
        return self._mean

    @mean.setter
    def mean(self, value: Tensor):
        """Set cluster mean from a copy of value."""
        if value.shape != (self._dimension,):
            raise DimensionMismatch(f"Expected center of shape ({self._dimension},), "
                                    f"got {tuple(value.shape)}")
        self._mean = value.detach().to(device=self._device, dtype=self._dtype).clone()

    def to(self, device: torch.device) -> 'BaseRepresentation':
        """Move representation to specified device."""
        new_repr = self.__class__(self._dimension, device, self._dtype)

        params = self.get_parameters()
        new_params = {k: v.to(device) for k, v in params.items()}
        new_repr.set_parameters(new_params)

        return new_repr

    def _check_points_shape(self, points: Tensor):
        """Validate shape of input points."""
        if points.dim() != 2:
            raise ValueError(f"Expected 2D tensor, got {points.dim()}D")
        if points.shape[1] != self._dimension:
            raise DimensionMismatch(f"Expected dimension {self._dimension}, got {points.shape[1]}")
