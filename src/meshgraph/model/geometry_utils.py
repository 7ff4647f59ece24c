from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

    from meshgraph.model.coordinates import Coordinates


def rotation_matrix(pitch: float, yaw: float, roll: float) -> npt.NDArray[np.float64]:
    """
    Compose the Euler rotation R = Rz(yaw) @ Ry(pitch) @ Rx(roll).

    Args:
        pitch: Rotation about the Y axis in radians.
        yaw: Rotation about the Z axis in radians.
        roll: Rotation about the X axis in radians.

    Returns:
        A (3, 3) orthonormal matrix acting on column vectors.
    """
    cos_r, sin_r = np.cos(roll), np.sin(roll)
    cos_p, sin_p = np.cos(pitch), np.sin(pitch)
    cos_y, sin_y = np.cos(yaw), np.sin(yaw)

    r_x = np.array([
        [1.0, 0.0, 0.0],
        [0.0, cos_r, -sin_r],
        [0.0, sin_r, cos_r],
    ], dtype=np.float64)
    r_y = np.array([
        [cos_p, 0.0, sin_p],
        [0.0, 1.0, 0.0],
        [-sin_p, 0.0, cos_p],
    ], dtype=np.float64)
    r_z = np.array([
        [cos_y, -sin_y, 0.0],
        [sin_y, cos_y, 0.0],
        [0.0, 0.0, 1.0],
    ], dtype=np.float64)

    return r_z @ r_y @ r_x


def inline_determinant(a: Coordinates, b: Coordinates, c: Coordinates) -> float:
    """
    Signed volume spanned by three position vectors.

    The points are stacked as rows:
        | a.x, a.y, a.z |
        | b.x, b.y, b.z |
        | c.x, c.y, c.z |
    A (near) zero determinant means the three vectors are coplanar with the
    origin, which for points on a common line through the segment is used as
    the collinearity test.
    """
    return (
        a.x * b.y * c.z
        + a.y * b.z * c.x
        + a.z * b.x * c.y
        - a.z * b.y * c.x
        - a.x * b.z * c.y
        - a.y * b.x * c.z
    )


def within_xy_bounds(point: Coordinates, first: Coordinates, second: Coordinates) -> bool:
    """Check whether `point` lies in the (inclusive) XY bounding rectangle of `first` and `second`."""
    return (
        min(first.x, second.x) <= point.x <= max(first.x, second.x)
        and min(first.y, second.y) <= point.y <= max(first.y, second.y)
    )
