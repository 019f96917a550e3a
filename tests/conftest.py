"""
Global pytest fixtures for the greedykmeans test suite.

- Provides deterministic seeding across Python, NumPy, and PyTorch.
- Forces single-threaded torch to stabilize timings and reduce flakiness.
- Standardizes on CPU for all tests.
- Lets a test script the uniform draws consumed by seeding.
"""

from __future__ import annotations

import os
import random
import sys
from typing import Callable, Generator
from pathlib import Path

import numpy as np
import pytest
import torch

# Add the project's src directory to the Python path so tests can import the code
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from greedykmeans.initialization import sampling  # noqa: E402


def _get_seed() -> int:
    """Resolve the test seed from env or default."""
    env = os.getenv("TEST_RANDOM_SEED", "1337")
    try:
        return int(env)
    except ValueError:
        return 1337


@pytest.fixture(scope="session", autouse=True)
def seed_all() -> int:
    """
    Seed Python, NumPy, and PyTorch RNGs once per session.

    Seed value comes from TEST_RANDOM_SEED (default 1337).
    """
    seed = _get_seed()

    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)

    return seed


@pytest.fixture(scope="session", autouse=True)
def set_torch_threads() -> None:
    """
    Reduce PyTorch to a single thread for stability and consistent timing.
    """
    torch.set_num_threads(1)


@pytest.fixture(scope="function")
def rng(seed_all: int) -> Generator[np.random.Generator, None, None]:
    """
    Per-test NumPy Generator seeded from the session seed.
    """
    gen = np.random.default_rng(seed_all)
    yield gen


@pytest.fixture(scope="session")
def torch_device() -> torch.device:
    """
    Standard device for tests. We pin to CPU to avoid device drift.
    """
    return torch.device("cpu")


@pytest.fixture
def scripted_draws(monkeypatch) -> Callable[..., list]:
    """
    Replace the package's uniform draw with a fixed sequence of values.

    Usage:
        calls = scripted_draws(0.0, 0.999)

    Returns the list that records each draw as it is consumed. Running past
    the end of the script fails the test with StopIteration.
    """
    def install(*values: float) -> list:
        draws = iter(values)
        consumed = []

        def fake_uniform(generator=None):
            value = next(draws)
            consumed.append(value)
            return value

        monkeypatch.setattr(sampling, "uniform", fake_uniform)
        return consumed

    return install
