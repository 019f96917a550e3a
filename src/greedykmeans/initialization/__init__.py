"""Initialization strategies and the weighted sampler they share."""

from .sampling import sample, uniform, uniform_index
from .random import RandomInit
from .kmeans_plusplus import KMeansPlusPlusInit
from .from_previous import FromPreviousInit

__all__ = [
    'sample',
    'uniform',
    'uniform_index',
    'RandomInit',
    'KMeansPlusPlusInit',
    'FromPreviousInit'
]
