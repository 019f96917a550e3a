"""
Exception types raised by the clustering engine.

All of them derive from ValueError so that code catching the generic
validation error keeps working.
"""


class ClusteringError(ValueError):
    """Base class for errors raised by greedykmeans."""


class InvalidK(ClusteringError):
    """Requested number of clusters is not positive."""


class DimensionMismatch(ClusteringError):
    """Points or centers do not share a common dimensionality."""


class InvalidWeight(ClusteringError):
    """A sampling weight is negative or not a finite number.

    Weights passed by the seeding procedure are squared distances, so this
    signals a bug in distance computation rather than a caller error.
    """
