"""Immutable Bezier curve value objects binding control points to the evaluators."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from curve.bezier import CubicBezier2D, CubicBezier3D, QuadraticBezier2D, QuadraticBezier3D
from curve.common import DEFAULT_ATOL, DEFAULT_RTOL, Point, PointMath


###############################################################################
# _BezierCurve
###############################################################################


@dataclass(frozen=True)
class _BezierCurve:
    """Common behavior of the curve value objects.

    Control points are stored as tuples of floats, so instances are immutable
    and hashable, and compare equal iff all corresponding control points are equal.
    """

    DIM = 3

    def __post_init__(self):
        for field in fields(self):
            object.__setattr__(self, field.name, PointMath.as_tuple(getattr(self, field.name), self.DIM))

    @property
    def control_points(self) -> NDArray[np.float64]:
        """Control points as array of shape (n, DIM)."""
        return np.array([getattr(self, field.name) for field in fields(self)], dtype=np.float64)

    def approx_equal(self, other: _BezierCurve, rtol: float = DEFAULT_RTOL, atol: float = DEFAULT_ATOL) -> bool:
        """Check if two curves are approximately equal within numerical tolerances.

        Args:
            other: Another curve to compare with
            rtol: Relative tolerance for floating point comparison
            atol: Absolute tolerance for floating point comparison

        Returns:
            True if both curves are of the same type and all control points match, False otherwise
        """
        if type(other) is not type(self):
            return False
        return bool(np.allclose(self.control_points, other.control_points, rtol=rtol, atol=atol))


###############################################################################
# Cubic curves
###############################################################################


@dataclass(frozen=True)
class CubicBezierCurve3D(_BezierCurve):
    """
    A 3-dimensional Bezier curve defined by 4 points.

    Attributes:
        p0: The start point.
        p1: The first control point.
        p2: The second control point.
        p3: The end point.
    """

    p0: Tuple[float, float, float]
    p1: Tuple[float, float, float]
    p2: Tuple[float, float, float]
    p3: Tuple[float, float, float]

    def point(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the curve coordinate at *t* (in [0, 1] or in [start_time, end_time])."""
        return CubicBezier3D.point(self.p0, self.p1, self.p2, self.p3, t, start_time, end_time)

    def velocity(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the instantaneous velocity at *t* (in [0, 1] or in [start_time, end_time])."""
        return CubicBezier3D.velocity(self.p0, self.p1, self.p2, self.p3, t, start_time, end_time)


@dataclass(frozen=True)
class CubicBezierCurve2D(_BezierCurve):
    """
    A 2-dimensional Bezier curve defined by 4 points.

    Attributes:
        p0: The start point.
        p1: The first control point.
        p2: The second control point.
        p3: The end point.
    """

    DIM = 2

    p0: Tuple[float, float]
    p1: Tuple[float, float]
    p2: Tuple[float, float]
    p3: Tuple[float, float]

    def point(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the curve coordinate at *t* (in [0, 1] or in [start_time, end_time])."""
        return CubicBezier2D.point(self.p0, self.p1, self.p2, self.p3, t, start_time, end_time)

    def velocity(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the instantaneous velocity at *t* (in [0, 1] or in [start_time, end_time])."""
        return CubicBezier2D.velocity(self.p0, self.p1, self.p2, self.p3, t, start_time, end_time)


###############################################################################
# Quadratic curves
###############################################################################


@dataclass(frozen=True)
class QuadraticBezierCurve3D(_BezierCurve):
    """
    A 3-dimensional Bezier curve defined by 3 points.

    Attributes:
        p0: The start point.
        p1: The control point.
        p2: The end point.
    """

    p0: Tuple[float, float, float]
    p1: Tuple[float, float, float]
    p2: Tuple[float, float, float]

    def point(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the curve coordinate at *t* (in [0, 1] or in [start_time, end_time])."""
        return QuadraticBezier3D.point(self.p0, self.p1, self.p2, t, start_time, end_time)

    def velocity(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the instantaneous velocity at *t* (in [0, 1] or in [start_time, end_time])."""
        return QuadraticBezier3D.velocity(self.p0, self.p1, self.p2, t, start_time, end_time)

    def as_cubic(self) -> CubicBezierCurve3D:
        """Perform degree elevation, returning the same curve expressed as a cubic curve."""
        return CubicBezierCurve3D(*QuadraticBezier3D.as_cubic(self.p0, self.p1, self.p2))


@dataclass(frozen=True)
class QuadraticBezierCurve2D(_BezierCurve):
    """
    A 2-dimensional Bezier curve defined by 3 points.

    Attributes:
        p0: The start point.
        p1: The control point.
        p2: The end point.
    """

    DIM = 2

    p0: Tuple[float, float]
    p1: Tuple[float, float]
    p2: Tuple[float, float]

    def point(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the curve coordinate at *t* (in [0, 1] or in [start_time, end_time])."""
        return QuadraticBezier2D.point(self.p0, self.p1, self.p2, t, start_time, end_time)

    def velocity(self, t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> Point:
        """Return the instantaneous velocity at *t* (in [0, 1] or in [start_time, end_time])."""
        return QuadraticBezier2D.velocity(self.p0, self.p1, self.p2, t, start_time, end_time)

    def as_cubic(self) -> CubicBezierCurve2D:
        """Perform degree elevation, returning the same curve expressed as a cubic curve."""
        return CubicBezierCurve2D(*QuadraticBezier2D.as_cubic(self.p0, self.p1, self.p2))
