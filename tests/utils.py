# tests/utils.py
"""
Small, reusable helpers used across the greedykmeans test suite.

Functions:
- to_numpy(x): tensor/list → float64 numpy array.
- sorted_rows(C): rows sorted lexicographically, for order-free center comparison.
- labels_equal_up_to_perm(y1, y2, K): label vectors equal after relabelling.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import itertools
import json
import time
from contextlib import contextmanager
from typing import Any, Dict

import numpy as np
import torch


def to_numpy(x: Any) -> np.ndarray:
    """Convert a tensor or nested list to a float64 numpy array."""
    if isinstance(x, torch.Tensor):
        x = x.detach().cpu().numpy()
    return np.asarray(x, dtype=np.float64)


def sorted_rows(C: Any, decimals: int = 1) -> np.ndarray:
    """
    Sort the rows of a (k, d) array lexicographically.

    Keys are rounded to `decimals` places so that fitted centers which only
    differ from the true ones by noise still sort into the same order.
    """
    C = to_numpy(C)
    keys = np.round(C, decimals)
    order = np.lexsort(keys.T[::-1])
    return C[order]


def labels_equal_up_to_perm(y1: Any, y2: Any, K: int) -> bool:
    """Return True if y2 can be relabelled to equal y1 exactly."""
    y1 = np.asarray(to_numpy(y1), dtype=np.int64)
    y2 = np.asarray(to_numpy(y2), dtype=np.int64)
    for perm in itertools.permutations(range(K)):
        if np.array_equal(y1, np.array(perm)[y2]):
            return True
    return False


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Output
    ------
    [timing] fit {"n":400,"d":3,"K":2} 0.123s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """Print timing in a compact, machine-readable single line."""
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"))
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
