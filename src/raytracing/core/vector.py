"""Three-component vector algebra and random sampling for Monte Carlo tracing.

This module provides the Vec3 value type used throughout the renderer as a
free vector, a point and an RGB color, together with the free functions
(dot, cross, unit_vector) and the random generators used by diffuse scattering.

Random draws come from a ``numpy.random.Generator``. Every helper accepts an
optional ``rng`` so that callers (and tests) can inject a controlled source;
when omitted, a process-wide default generator is used.

Example:
    >>> from src.raytracing.core.vector import Vec3, dot, cross, unit_vector
    >>> a = Vec3(1.0, 0.0, 0.0)
    >>> b = Vec3(0.0, 1.0, 0.0)
    >>> cross(a, b)
    Vec3(x=0.0, y=0.0, z=1.0)
    >>> dot(a, b)
    0.0
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1) from ``random()``."""

    def random(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable ordered triple of real components.

    Attributes:
        x: First component (red channel when used as a color).
        y: Second component (green channel when used as a color).
        z: Third component (blue channel when used as a color).
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vec3:
        """Return <0, 0, 0>."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3:
        """Return <1, 1, 1>."""
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def random(cls, rng: RandomSource | None = None) -> Vec3:
        """Return a vector with each component uniform in [0, 1)."""
        return cls(random(rng), random(rng), random(rng))

    @classmethod
    def random_range(cls, min_value: float, max_value: float, rng: RandomSource | None = None) -> Vec3:
        """Return a vector with each component uniform in [min_value, max_value)."""
        return cls(
            random_range(min_value, max_value, rng),
            random_range(min_value, max_value, rng),
            random_range(min_value, max_value, rng),
        )

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return self + other * -1.0

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> Vec3:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec3:
        # Raises ZeroDivisionError for scalar == 0
        return self * (1.0 / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.z}"

    def length(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        """Return the squared length, avoiding the square root."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def unit_vector(self) -> Vec3:
        """Return the vector scaled to unit length.

        Raises:
            ZeroDivisionError: If the vector has zero length.
        """
        return self / self.length()


# A position in world space
Point = Vec3

# Linear RGB radiance; channels may exceed 1 while accumulating samples
Color = Vec3


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product a . b (|a||b| cos theta).

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The sum of the component-wise products.
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the right-handed cross product a x b.

    The result is perpendicular to both inputs with magnitude |a||b| sin theta.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The cross product a x b.
    """
    return Vec3(
        a.y * b.z - b.y * a.z,
        b.x * a.z - a.x * b.z,
        a.x * b.y - b.x * a.y,
    )


def unit_vector(v: Vec3) -> Vec3:
    """Return v / |v|. Callers must not pass a zero vector."""
    return v.unit_vector()


def clamp(x: float, min_value: float, max_value: float) -> float:
    """Clamp x into [min_value, max_value]."""
    if x < min_value:
        return min_value
    if x > max_value:
        return max_value
    return x


# =============================================================================
# Random Sampling Utilities for Monte Carlo
# =============================================================================

_default_rng: np.random.Generator = np.random.default_rng()


def seed(value: int | None) -> None:
    """Replace the process-wide generator with one seeded from value.

    Args:
        value: Seed for ``numpy.random.default_rng``. None draws fresh entropy.
    """
    global _default_rng
    _default_rng = np.random.default_rng(value)


def get_rng() -> np.random.Generator:
    """Return the process-wide default generator."""
    return _default_rng


def random(rng: RandomSource | None = None) -> float:
    """Return a uniform float in [0, 1).

    Args:
        rng: Optional generator to draw from instead of the default one.
    """
    source = rng if rng is not None else _default_rng
    return float(source.random())


def random_range(min_value: float, max_value: float, rng: RandomSource | None = None) -> float:
    """Return a uniform float in [min_value, max_value)."""
    return min_value + (max_value - min_value) * random(rng)


def random_in_unit_sphere(rng: RandomSource | None = None) -> Vec3:
    """Generate a random point inside the unit ball by rejection sampling.

    Candidates are drawn with every component uniform in [0, 1) and rejected
    while their squared length is >= 1. The accepted points therefore lie in
    the all-positive octant of the unit ball; scattering depends on exactly
    this distribution.

    Args:
        rng: Optional generator to draw from.

    Returns:
        The first accepted candidate.
    """
    while True:
        p = Vec3.random(rng)
        if p.length_squared() >= 1.0:
            continue
        return p


def random_unit_vector(rng: RandomSource | None = None) -> Vec3:
    """Return unit_vector(random_in_unit_sphere())."""
    return random_in_unit_sphere(rng).unit_vector()
