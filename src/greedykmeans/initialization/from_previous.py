"""
Initialization from previous solution or custom centers.

Used for warm starts and by `refine`, which runs the refinement loop from
caller supplied centers.
"""

from typing import List, Optional, Union
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, ClusterRepresentation
from ..representations.centroid import CentroidRepresentation
from ..base.data_structures import ClusterState
from ..exceptions import InvalidK, DimensionMismatch
from ..utils.validation import check_centers


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous cluster centers or custom starting points.

    Accepts either:
    - A tensor of shape (n_clusters, dimension) with initial centers
    - A ClusterState object from a previous run
    - A list of ClusterRepresentation objects
    """

    def __init__(self, initial_state: Union[Tensor, ClusterState, List[ClusterRepresentation]]):
        """
        Args:
            initial_state: Previous solution to use for initialization
        """
        self.initial_state = initial_state

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[ClusterRepresentation]:
        """Initialize from previous state.

        Args:
            points: (n, d) data points (used for validation)
            n_clusters: Expected number of clusters
            generator: Ignored, no randomness involved

        Returns:
            List of initialized representations, each owning a copy of its center
        """
        dimension = points.shape[1]
        device = points.device

        if isinstance(self.initial_state, ClusterState):
            centers = self.initial_state.means
        elif isinstance(self.initial_state, list):
            centers = None
        elif isinstance(self.initial_state, Tensor):
            centers = self.initial_state
        else:
            raise TypeError(f"Unknown initial_state type: {type(self.initial_state)}")

        if centers is not None:
            centers = centers.to(device=device, dtype=points.dtype)
            check_centers(centers, dimension)
            if centers.shape[0] != n_clusters:
                raise InvalidK(f"Initial centers has {centers.shape[0]} clusters, "
                               f"but n_clusters={n_clusters}")

            representations = []
            for k in range(n_clusters):
                rep = CentroidRepresentation(dimension, device, points.dtype)
                rep.mean = centers[k]
                representations.append(rep)
            return representations

        if len(self.initial_state) != n_clusters:
            raise InvalidK(f"Provided {len(self.initial_state)} representations, "
                           f"but n_clusters={n_clusters}")

        representations = []
        for rep in self.initial_state:
            if rep.dimension != dimension:
                raise DimensionMismatch(f"Representation has dimension {rep.dimension}, "
                                        f"but data has dimension {dimension}")
            representations.append(rep.to(device))

        return representations
