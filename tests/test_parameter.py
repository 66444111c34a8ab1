"""Test module for curve.parameter

The tests are run using pytest.
"""

import logging
import math

import pytest

from curve.parameter import InvalidParameterError, TimeParameter

###############################################################################
# TimeParameter.check Tests
###############################################################################


class TestTimeParameterCheck:
    """Test class for the bounds check."""

    @pytest.mark.parametrize("t", [0.0, 0.25, 1.0, 0, 1])
    def test_check_inside_default_bounds(self, t):
        """Values in [0, 1] including the bounds are accepted."""
        TimeParameter.check(t)

    @pytest.mark.parametrize("t", [-0.001, 1.5, -3.0, math.nan])
    def test_check_outside_default_bounds(self, t):
        """Values outside [0, 1] and NaN are rejected."""
        with pytest.raises(InvalidParameterError):
            TimeParameter.check(t)

    def test_check_custom_bounds(self):
        """Custom bounds replace [0, 1]."""
        TimeParameter.check(15.0, 15.0, 17.0)
        TimeParameter.check(3.0, 2.0, 5.0)
        with pytest.raises(InvalidParameterError):
            TimeParameter.check(15.0, 2.0, 5.0)

    def test_error_is_value_error(self):
        """InvalidParameterError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Must be between 0.0 and 1.0"):
            TimeParameter.check(1.5)

    def test_rejection_is_logged(self, caplog):
        """Rejected values are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="curve.parameter"):
            with pytest.raises(InvalidParameterError):
                TimeParameter.check(2.0)
        assert "Rejected time parameter" in caplog.text


###############################################################################
# TimeParameter.normalize Tests
###############################################################################


class TestTimeParameterNormalize:
    """Test class for time normalization."""

    def test_normalize_inside_window(self):
        """Window values map linearly onto [0, 1]."""
        assert TimeParameter.normalize(3.0, 2.0, 4.0) == pytest.approx(0.5)
        assert TimeParameter.normalize(2.0, 1.0, 5.0) == pytest.approx(0.25)
        assert TimeParameter.normalize(11.0, 2.0, 14.0) == pytest.approx(0.75)

    def test_normalize_window_bounds(self):
        """Window start maps to 0 and window end to 1."""
        assert TimeParameter.normalize(15.0, 15.0, 17.0) == 0.0
        assert TimeParameter.normalize(1.0, -8.0, 1.0) == 1.0

    def test_normalize_does_not_clamp(self):
        """Values outside the window pass through unclamped."""
        assert TimeParameter.normalize(15.0, 2.0, 5.0) == pytest.approx(13.0 / 3.0)
        assert TimeParameter.normalize(0.0, 2.0, 4.0) == pytest.approx(-1.0)

    def test_normalize_reversed_window(self):
        """A reversed window is not reordered."""
        assert TimeParameter.normalize(1.0, 2.0, 0.0) == pytest.approx(0.5)

    def test_normalize_empty_window(self):
        """An empty window raises instead of dividing by zero."""
        with pytest.raises(InvalidParameterError):
            TimeParameter.normalize(3.0, 3.0, 3.0)


###############################################################################
# TimeParameter.resolve Tests
###############################################################################


class TestTimeParameterResolve:
    """Test class for combined validation and normalization."""

    def test_resolve_without_window(self):
        """Without a window the value is checked against [0, 1] and returned."""
        assert TimeParameter.resolve(0.25) == 0.25
        with pytest.raises(InvalidParameterError):
            TimeParameter.resolve(1.5)

    def test_resolve_with_window(self):
        """With a window the raw value is checked against the window, then normalized."""
        assert TimeParameter.resolve(8.0, 2.0, 10.0) == pytest.approx(0.75)
        with pytest.raises(InvalidParameterError):
            TimeParameter.resolve(15.0, 2.0, 5.0)

    def test_resolve_half_window(self):
        """Giving only one window bound is a usage error."""
        with pytest.raises(ValueError, match="together"):
            TimeParameter.resolve(0.5, start_time=0.0)
        with pytest.raises(ValueError, match="together"):
            TimeParameter.resolve(0.5, end_time=1.0)
