"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including a seeded
random generator and a fixed-value generator for deterministic jitter.
"""

import numpy as np
import pytest

from src.raytracing.core import vector


class FixedRandom:
    """A stand-in generator whose random() always returns the same value."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture(scope="session", autouse=True)
def seed_default_rng():
    """Seed the process-wide generator once for the entire test session."""
    vector.seed(42)
    yield


@pytest.fixture
def rng():
    """A freshly seeded NumPy generator."""
    return np.random.default_rng(42)


@pytest.fixture
def fixed_rng():
    """Factory for generators that always return the given value."""
    return FixedRandom
