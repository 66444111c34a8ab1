"""Closed-form evaluation of quadratic and cubic Bezier curves in 2D and 3D.

The cubic 3D evaluator holds the only polynomial code. Quadratic curves are
degree-elevated to cubic ones, and 2D points are lifted to z=0, evaluated in
3D and projected back to (x, y).
"""

from __future__ import annotations

from typing import Optional, Tuple

from curve.common import Point, PointLike, PointMath
from curve.parameter import TimeParameter

CubicControlPoints = Tuple[Point, Point, Point, Point]


###############################################################################
# CubicBezier3D
###############################################################################


class CubicBezier3D:
    """Position and velocity of a 3D cubic Bezier curve given by 4 control points."""

    @classmethod
    def point(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        p3: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        """
        Return the curve coordinate at *t*.

        B(t) = (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            t: A value in [0, 1], or in [start_time, end_time] if a window is given
            start_time: Optional window start, mapped to curve parameter 0
            end_time: Optional window end, mapped to curve parameter 1

        Returns:
            NDArray[np.float64] of shape (3,)

        Raises:
            InvalidParameterError: If *t* lies outside its bounds.
        """
        if start_time is not None or end_time is not None:
            t = TimeParameter.resolve(t, start_time, end_time)
        TimeParameter.check(t)

        pt0, pt1, pt2, pt3 = cls._control_points(p0, p1, p2, p3)
        omt = 1.0 - t
        omt2 = omt * omt
        t2 = t * t
        return omt2 * omt * pt0 + 3.0 * omt2 * t * pt1 + 3.0 * omt * t2 * pt2 + t2 * t * pt3

    @classmethod
    def velocity(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        p3: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        """
        Return the instantaneous velocity (first derivative) at *t*.

        B'(t) = 3*(1-t)^2*(P1-P0) + 6*(1-t)*t*(P2-P1) + 3*t^2*(P3-P2)

        The derivative is taken with respect to the curve parameter, also for
        windowed calls.

        Args:
            p0: Start point
            p1: First control point
            p2: Second control point
            p3: End point
            t: A value in [0, 1], or in [start_time, end_time] if a window is given
            start_time: Optional window start, mapped to curve parameter 0
            end_time: Optional window end, mapped to curve parameter 1

        Returns:
            NDArray[np.float64] of shape (3,)

        Raises:
            InvalidParameterError: If *t* lies outside its bounds.
        """
        if start_time is not None or end_time is not None:
            t = TimeParameter.resolve(t, start_time, end_time)
        TimeParameter.check(t)

        pt0, pt1, pt2, pt3 = cls._control_points(p0, p1, p2, p3)
        omt = 1.0 - t
        return 3.0 * omt * omt * (pt1 - pt0) + 6.0 * omt * t * (pt2 - pt1) + 3.0 * t * t * (pt3 - pt2)

    @staticmethod
    def _control_points(p0: PointLike, p1: PointLike, p2: PointLike, p3: PointLike) -> CubicControlPoints:
        return (
            PointMath.as_point(p0, 3),
            PointMath.as_point(p1, 3),
            PointMath.as_point(p2, 3),
            PointMath.as_point(p3, 3),
        )


###############################################################################
# CubicBezier2D
###############################################################################


class CubicBezier2D:
    """2D cubic Bezier evaluation on top of CubicBezier3D with z=0."""

    @staticmethod
    def point(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        p3: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        """Return the 2D curve coordinate at *t*, see CubicBezier3D.point."""
        lifted = [PointMath.lift(p) for p in (p0, p1, p2, p3)]
        return PointMath.project(CubicBezier3D.point(*lifted, t, start_time, end_time))

    @staticmethod
    def velocity(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        p3: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        """Return the 2D velocity at *t*, see CubicBezier3D.velocity."""
        lifted = [PointMath.lift(p) for p in (p0, p1, p2, p3)]
        return PointMath.project(CubicBezier3D.velocity(*lifted, t, start_time, end_time))


###############################################################################
# QuadraticBezier3D
###############################################################################


class QuadraticBezier3D:
    """3D quadratic Bezier evaluation via degree elevation to a cubic curve."""

    DIM = 3

    @classmethod
    def as_cubic(cls, p0: PointLike, p1: PointLike, p2: PointLike) -> CubicControlPoints:
        """
        Given quadratic control points, return the control points of the same curve as a cubic.

        C0 = P0, C1 = 2/3*P1 + 1/3*P0, C2 = 2/3*P1 + 1/3*P2, C3 = P2

        Returns:
            Tuple of 4 NDArray[np.float64] points
        """
        pt0 = PointMath.as_point(p0, cls.DIM)
        pt1 = PointMath.as_point(p1, cls.DIM)
        pt2 = PointMath.as_point(p2, cls.DIM)
        return (
            pt0.copy(),
            2.0 / 3.0 * pt1 + 1.0 / 3.0 * pt0,
            2.0 / 3.0 * pt1 + 1.0 / 3.0 * pt2,
            pt2.copy(),
        )

    @classmethod
    def point(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        """Return the curve coordinate at *t*; window arguments are forwarded to the cubic evaluator."""
        return CubicBezier3D.point(*cls.as_cubic(p0, p1, p2), t, start_time, end_time)

    @classmethod
    def velocity(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        """Return the instantaneous velocity at *t*; window arguments are forwarded to the cubic evaluator."""
        return CubicBezier3D.velocity(*cls.as_cubic(p0, p1, p2), t, start_time, end_time)


###############################################################################
# QuadraticBezier2D
###############################################################################


class QuadraticBezier2D(QuadraticBezier3D):
    """2D quadratic Bezier evaluation; elevates in 2D and evaluates with CubicBezier2D."""

    DIM = 2

    @classmethod
    def point(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        return CubicBezier2D.point(*cls.as_cubic(p0, p1, p2), t, start_time, end_time)

    @classmethod
    def velocity(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        cls,
        p0: PointLike,
        p1: PointLike,
        p2: PointLike,
        t: float,
        start_time: Optional[float] = None,
        end_time: Optional[float] = None,
    ) -> Point:
        return CubicBezier2D.velocity(*cls.as_cubic(p0, p1, p2), t, start_time, end_time)


###############################################################################
# Functions
###############################################################################


_CUBIC = {2: CubicBezier2D, 3: CubicBezier3D}
_QUADRATIC = {2: QuadraticBezier2D, 3: QuadraticBezier3D}


def cubic_point(
    # pylint: disable=too-many-arguments,too-many-positional-arguments
    p0: PointLike,
    p1: PointLike,
    p2: PointLike,
    p3: PointLike,
    t: float,
    start_time: Optional[float] = None,
    end_time: Optional[float] = None,
) -> Point:
    """Cubic curve coordinate at *t* for 2D or 3D control points."""
    evaluator = _CUBIC[PointMath.dimension(p0, p1, p2, p3)]
    return evaluator.point(p0, p1, p2, p3, t, start_time, end_time)


def cubic_velocity(
    # pylint: disable=too-many-arguments,too-many-positional-arguments
    p0: PointLike,
    p1: PointLike,
    p2: PointLike,
    p3: PointLike,
    t: float,
    start_time: Optional[float] = None,
    end_time: Optional[float] = None,
) -> Point:
    """Cubic curve velocity at *t* for 2D or 3D control points."""
    evaluator = _CUBIC[PointMath.dimension(p0, p1, p2, p3)]
    return evaluator.velocity(p0, p1, p2, p3, t, start_time, end_time)


def quadratic_point(
    p0: PointLike,
    p1: PointLike,
    p2: PointLike,
    t: float,
    start_time: Optional[float] = None,
    end_time: Optional[float] = None,
) -> Point:
    """Quadratic curve coordinate at *t* for 2D or 3D control points."""
    evaluator = _QUADRATIC[PointMath.dimension(p0, p1, p2)]
    return evaluator.point(p0, p1, p2, t, start_time, end_time)


def quadratic_velocity(
    p0: PointLike,
    p1: PointLike,
    p2: PointLike,
    t: float,
    start_time: Optional[float] = None,
    end_time: Optional[float] = None,
) -> Point:
    """Quadratic curve velocity at *t* for 2D or 3D control points."""
    evaluator = _QUADRATIC[PointMath.dimension(p0, p1, p2)]
    return evaluator.velocity(p0, p1, p2, t, start_time, end_time)


def quadratic_as_cubic(p0: PointLike, p1: PointLike, p2: PointLike) -> CubicControlPoints:
    """Degree-elevate 2D or 3D quadratic control points to cubic ones."""
    return _QUADRATIC[PointMath.dimension(p0, p1, p2)].as_cubic(p0, p1, p2)
