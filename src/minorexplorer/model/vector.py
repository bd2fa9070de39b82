"""
Vector Primitive
================
Immutable 2D vector used for node positions, velocities and forces.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

# Shared tolerance for zero tests and normalisation. The layout engine uses the
# same value so direction and equilibrium decisions stay consistent.
EPSILON: float = 1e-9


@dataclass(frozen=True)
class Vector2:
    """
    A vector in 2D space. All operations return new instances.
    """
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> Vector2:
        return Vector2(0.0, 0.0)

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def negate(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def subtract(self, other: Vector2) -> Vector2:
        return self.add(other.negate())

    def scale(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Vector2:
        return self.scale(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return self.negate()

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction, or the zero vector for tiny inputs."""
        mag = self.magnitude
        if mag < EPSILON:
            return Vector2.zero()
        return self.scale(1.0 / mag)

    def is_zero(self) -> bool:
        """Component-wise test against EPSILON (not a magnitude test)."""
        return abs(self.x) < EPSILON and abs(self.y) < EPSILON

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    @staticmethod
    def from_array(values: npt.ArrayLike) -> Vector2:
        x, y = np.asarray(values, dtype=np.float64)[:2]
        return Vector2(float(x), float(y))
