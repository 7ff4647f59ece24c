"""
Immutable 3D positions used by every node of the mesh graph.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
import math

import numpy as np

from meshgraph.config import DEFAULT_ROTATION_STEP
from meshgraph.model.geometry_utils import rotation_matrix

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Coordinates:
    """
    A point in 3D space.

    Equality is exact and component-wise; two coordinates are "the same point"
    only if all three floats match.
    """
    x: float
    y: float
    z: float = 0.0

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Coordinates:
        x, y, z = np.asarray(values, dtype=np.float64).reshape(3)
        return cls(float(x), float(y), float(z))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def distance_to(self, other: Coordinates) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def rotate(self, pitch: float, yaw: float, roll: float) -> Coordinates:
        """
        Rotate about the origin.

        Args:
            pitch: Rotation about the Y axis in radians.
            yaw: Rotation about the Z axis in radians.
            roll: Rotation about the X axis in radians.

        Returns:
            New, rotated coordinates. `self` is left untouched.
        """
        return Coordinates.from_array(rotation_matrix(pitch, yaw, roll) @ self.to_array())

    def inverse_rotate(self, pitch: float, yaw: float, roll: float) -> Coordinates:
        """Undo `rotate(pitch, yaw, roll)`. The inverse of an orthonormal matrix is its transpose."""
        return Coordinates.from_array(rotation_matrix(pitch, yaw, roll).T @ self.to_array())

    def get_rotation(self) -> Coordinates:
        """Rotate by the default animation increment."""
        return self.rotate(*DEFAULT_ROTATION_STEP)
