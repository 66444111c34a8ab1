"""Central module containing point types, constants and the 2D/3D point bridge."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

###############################################################################
# Types
###############################################################################


PointLike = Union[Sequence[float], NDArray[np.float64]]  # (x, y) or (x, y, z)
Point = NDArray[np.float64]  # shape (2,) or (3,)


###############################################################################
# Consts
###############################################################################


PARAMETER_LOWER_BOUND: float = 0.0
PARAMETER_UPPER_BOUND: float = 1.0

# Default tolerances for approx_equal comparisons of control points
DEFAULT_RTOL: float = 1e-9
DEFAULT_ATOL: float = 1e-9


###############################################################################
# PointMath
###############################################################################


class PointMath:
    """Static helpers to coerce points and move them between 2D and 3D."""

    @staticmethod
    def as_point(point: PointLike, dim: int) -> Point:
        """Return *point* as a float64 array of length *dim*.

        Raises:
            ValueError: If the point does not have exactly *dim* components.
        """
        array = np.asarray(point, dtype=np.float64)
        if array.shape != (dim,):
            raise ValueError(f"Expected a {dim}D point, got shape {array.shape}")
        return array

    @staticmethod
    def dimension(*points: PointLike) -> int:
        """Return the common dimension (2 or 3) of the given points.

        Raises:
            ValueError: If the points are not all 2D or all 3D.
        """
        dims = {np.shape(point) for point in points}
        if len(dims) != 1:
            raise ValueError(f"Control points must share one dimension, got shapes {sorted(dims)}")
        shape = dims.pop()
        if shape not in ((2,), (3,)):
            raise ValueError(f"Control points must be 2D or 3D, got shape {shape}")
        return shape[0]

    @staticmethod
    def lift(point: PointLike) -> Point:
        """Lift a 2D point (x, y) to the 3D point (x, y, 0)."""
        x, y = PointMath.as_point(point, 2)
        return np.array([x, y, 0.0], dtype=np.float64)

    @staticmethod
    def project(point: PointLike) -> Point:
        """Drop the z component of a 3D point."""
        return PointMath.as_point(point, 3)[:2].copy()

    @staticmethod
    def as_tuple(point: PointLike, dim: int) -> tuple:
        """Return *point* as a hashable tuple of *dim* floats."""
        return tuple(float(value) for value in PointMath.as_point(point, dim))
