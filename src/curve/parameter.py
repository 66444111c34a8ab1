"""Validation and normalization of curve time parameters."""

from __future__ import annotations

import logging
from typing import Optional

from curve.common import PARAMETER_LOWER_BOUND, PARAMETER_UPPER_BOUND

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when a time parameter lies outside its allowed bounds."""


###############################################################################
# TimeParameter
###############################################################################


class TimeParameter:
    """Static methods to check a time value and map it onto the curve parameter [0, 1]."""

    @staticmethod
    def check(t: float, lower_bound: float = PARAMETER_LOWER_BOUND, upper_bound: float = PARAMETER_UPPER_BOUND) -> None:
        """Raise InvalidParameterError if *t* is not inside [lower_bound, upper_bound].

        NaN is rejected as well since it compares false against both bounds.
        """
        if not lower_bound <= t <= upper_bound:
            logger.debug("Rejected time parameter %r outside [%r, %r]", t, lower_bound, upper_bound)
            raise InvalidParameterError(
                f"{t} is not a valid value for t. Must be between {lower_bound} and {upper_bound}."
            )

    @staticmethod
    def normalize(t: float, start_time: float, end_time: float) -> float:
        """
        Map *t* from the window [start_time, end_time] onto the curve parameter.

        The result is (t - start_time) / (end_time - start_time). It is not
        clamped, so values of *t* outside the window map outside [0, 1].

        Args:
            t: Time value
            start_time: Time mapped to curve parameter 0
            end_time: Time mapped to curve parameter 1

        Returns:
            float: the normalized curve parameter

        Raises:
            InvalidParameterError: If start_time equals end_time (empty window).
        """
        span = end_time - start_time
        if span == 0:
            logger.debug("Rejected empty time window [%r, %r]", start_time, end_time)
            raise InvalidParameterError(f"Time window [{start_time}, {end_time}] is empty.")
        return (t - start_time) / span

    @staticmethod
    def resolve(t: float, start_time: Optional[float] = None, end_time: Optional[float] = None) -> float:
        """Validate *t* and return the curve parameter in [0, 1].

        Without a window, *t* is checked against [0, 1] and returned as is.
        With a window, *t* is checked against [start_time, end_time] first
        and then normalized.

        Raises:
            ValueError: If only one of start_time and end_time is given.
            InvalidParameterError: If *t* lies outside its bounds.
        """
        if start_time is None and end_time is None:
            TimeParameter.check(t)
            return t
        if start_time is None or end_time is None:
            raise ValueError("start_time and end_time must be given together")
        TimeParameter.check(t, start_time, end_time)
        return TimeParameter.normalize(t, start_time, end_time)
