"""
Convergence criteria for the refinement loop.

K-means stops as soon as an assignment step reproduces the previous
assignment table; from that point on every further iteration is a no-op.
"""

from typing import Dict, Any, Optional
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion


class ChangeInAssignments(ConvergenceCriterion):
    """Convergence based on fraction of points that change clusters.

    The first check always counts as a change (there is no previous table).
    """

    def __init__(self, min_change_fraction: float = 0.0,
                 patience: int = 1):
        """
        Args:
            min_change_fraction: Largest fraction of changed points still considered
                stable. The default of 0 requires identical assignments.
            patience: Number of stable checks in a row before declaring convergence
        """
        super().__init__()
        if min_change_fraction < 0:
            raise ValueError(f"min_change_fraction must be non-negative, got {min_change_fraction}")
        if patience < 1:
            raise ValueError(f"patience must be at least 1, got {patience}")
        self.min_change_fraction = min_change_fraction
        self.patience = patience
        self._prev_assignments: Optional[Tensor] = None
        self._stable_count = 0
        self.last_n_changed = 0

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if assignments have stabilized."""
        assignments = current_state['assignments']

        if isinstance(assignments, Tensor):
            current_assignments = assignments
        else:
            # AssignmentMatrix object
            current_assignments = assignments.get_hard()

        if self._prev_assignments is None:
            self._prev_assignments = current_assignments.clone()
            self.last_n_changed = len(current_assignments)
            return False

        n_changed = (current_assignments != self._prev_assignments).sum().item()
        n_total = len(current_assignments)
        change_fraction = n_changed / n_total if n_total else 0.0
        self.last_n_changed = n_changed

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed,
            'change_fraction': change_fraction
        })

        if change_fraction <= self.min_change_fraction:
            self._stable_count += 1
            converged = self._stable_count >= self.patience
        else:
            self._stable_count = 0
            converged = False

        self._prev_assignments = current_assignments.clone()

        return converged

    def reset(self):
        """Forget the previous assignment table."""
        super().reset()
        self._prev_assignments = None
        self._stable_count = 0
        self.last_n_changed = 0
