"""Utility functions for the clustering engine."""

from .convergence import ChangeInAssignments

from .metrics import (
    inertia
)

from .validation import (
    validate_points,
    check_n_clusters,
    check_max_iter,
    check_random_state,
    check_centers
)

from .device import (
    get_default_device,
    parse_device
)

__all__ = [
    # Convergence criteria
    'ChangeInAssignments',

    # Metrics
    'inertia',

    # Validation
    'validate_points',
    'check_n_clusters',
    'check_max_iter',
    'check_random_state',
    'check_centers',

    # Device management
    'get_default_device',
    'parse_device'
]
