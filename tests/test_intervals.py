"""Tests for as_interval and the predefined transforms."""

import math

import numpy as np
import pytest

from scalar_transforms import (
    INF,
    REAL,
    POSITIVE_REAL,
    NEGATIVE_REAL,
    UNIT_INTERVAL,
    Identity,
    IntervalError,
    ScaledShiftedLogistic,
    ShiftedExp,
    as_interval,
    as_negative_real,
    as_positive_real,
    as_real,
    as_unit_interval,
)


class TestDispatch:
    """Tests for selecting the transform variant from the interval ends."""

    def test_real_line_is_identity(self):
        transform = as_interval(-INF, INF)

        assert isinstance(transform, Identity)
        assert transform.forward(0) == 0
        assert transform.forward_and_log_jacobian(0.0) == (0.0, 0.0)

    def test_positive_half_line(self):
        transform = as_interval(0, INF)

        assert transform == ShiftedExp(True, 0, 1)
        assert transform.forward(0) == 1.0
        assert transform.inverse(1) == 0.0

    def test_negative_half_line(self):
        transform = as_interval(-INF, 0)

        assert transform == ShiftedExp(False, 0, 1)
        assert transform.forward(0) == -1.0
        assert transform.inverse(-1) == 0.0

    def test_bounded_interval(self):
        transform = as_interval(0, 1)

        assert transform == ScaledShiftedLogistic(1, 0)
        assert transform.forward(0) == 0.5
        assert transform.inverse(0.5) == 0.0

    def test_bounded_interval_scale_and_shift(self):
        transform = as_interval(-2.0, 6.0)

        assert transform.scale == 8.0
        assert transform.shift == -2.0
        assert transform.image == (-2.0, 6.0)

    def test_half_line_scale(self):
        transform = as_interval(0, INF, scale=10)

        assert transform.scale == 10
        assert transform.forward(0) == 1.0
        assert transform.forward(10) == pytest.approx(math.e)

        assert as_interval(-INF, 3, scale=0.5) == ShiftedExp(False, 3, 0.5)

    def test_logs_selected_variant(self, debug_logs):
        as_interval(1, INF)

        assert "Selected ShiftedExp for interval (1, ∞)" in debug_logs.text


class TestInvalidIntervals:
    """Tests for intervals the dispatcher rejects."""

    def test_empty_finite_interval(self):
        with pytest.raises(IntervalError, match=r"the interval \(5, 3\) is empty"):
            as_interval(5, 3)
        with pytest.raises(IntervalError, match="is empty"):
            as_interval(2.0, 2.0)

    def test_infinite_ends_in_wrong_places(self):
        for left, right in [(INF, 1), (1, -INF), (INF, INF), (-INF, -INF), (INF, -INF)]:
            with pytest.raises(IntervalError, match="must be an interval"):
                as_interval(left, right)

    def test_wrong_infinite_end_message_names_markers(self):
        with pytest.raises(IntervalError) as excinfo:
            as_interval(INF, 1)
        assert str(excinfo.value) == "(INF, 1) must be an interval"

    def test_integer_ends_beyond_float_range(self):
        with pytest.raises(IntervalError, match="left end is an integer beyond the float range"):
            as_interval(10**400, INF)
        with pytest.raises(IntervalError, match="right end is an integer beyond the float range"):
            as_interval(0, -(10**400))

    def test_large_integer_ends_within_float_range(self):
        transform = as_interval(10**300, INF)

        assert transform.forward(0.0) == pytest.approx(1e300)

    def test_width_overflowing_float(self):
        """Test a non-empty interval whose width is not representable."""
        with pytest.raises(IntervalError, match="too wide"):
            as_interval(-1e308, 1e308)

        assert as_interval(-1e307, 1e307).scale == 2e307

    def test_float_infinity_is_not_a_marker(self):
        with pytest.raises(IntervalError, match="use INF or -INF"):
            as_interval(0, math.inf)
        with pytest.raises(IntervalError, match="use INF or -INF"):
            as_interval(-np.inf, 0)

    def test_nan_end(self):
        with pytest.raises(IntervalError, match="cannot be NaN"):
            as_interval(float("nan"), 1)

    def test_non_numeric_end(self):
        for left in ["0", None, True]:
            with pytest.raises(IntervalError, match="must be a real number"):
                as_interval(left, 1)

    def test_scale_only_for_half_lines(self):
        with pytest.raises(IntervalError, match="half-infinite"):
            as_interval(0, 1, scale=2)
        with pytest.raises(IntervalError, match="half-infinite"):
            as_interval(-INF, INF, scale=2)

    def test_non_positive_scale(self):
        for scale in [0, -10.0]:
            with pytest.raises(IntervalError, match="scale must be positive"):
                as_interval(0, INF, scale=scale)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            as_interval(1, 0)


class TestPromotionThroughDispatch:
    """Tests that finite ends take part in numeric promotion."""

    def test_integer_ends_keep_float32(self):
        assert as_interval(0, INF, scale=10).forward(np.float32(0)).dtype == np.float32
        assert as_interval(0, 1).forward(np.float32(0)).dtype == np.float32

    def test_float_ends_give_float64(self):
        assert as_interval(0.0, INF).forward(np.float32(0)).dtype == np.float64
        assert as_interval(0.0, 1.0).forward(np.float32(0)).dtype == np.float64


class TestPredefined:
    """Tests for the predefined transforms."""

    def test_constants(self):
        assert REAL == Identity()
        assert POSITIVE_REAL == as_interval(0, INF)
        assert NEGATIVE_REAL == as_interval(-INF, 0)
        assert UNIT_INTERVAL == as_interval(0, 1)

    def test_constructors(self):
        assert as_real() is REAL
        assert as_positive_real() is POSITIVE_REAL
        assert as_negative_real() is NEGATIVE_REAL
        assert as_unit_interval() is UNIT_INTERVAL

    def test_images(self):
        assert REAL.image == (-math.inf, math.inf)
        assert POSITIVE_REAL.image == (0.0, math.inf)
        assert NEGATIVE_REAL.image == (-math.inf, 0.0)
        assert UNIT_INTERVAL.image == (0.0, 1.0)


class TestRendering:
    """Tests for repr of transforms."""

    def test_predefined_names(self):
        assert repr(REAL) == "REAL"
        assert repr(POSITIVE_REAL) == "POSITIVE_REAL"
        assert repr(NEGATIVE_REAL) == "NEGATIVE_REAL"
        assert repr(UNIT_INTERVAL) == "UNIT_INTERVAL"

    def test_names_belong_to_the_constants_only(self):
        """Test other instances render as the call that builds them."""
        assert repr(Identity()) == "as_interval(-INF, INF)"
        assert repr(as_interval(0, INF)) == "as_interval(0, INF, scale=1)"
        assert repr(as_interval(0.0, INF)) == "as_interval(0.0, INF, scale=1)"

    def test_float_ends_differ_from_integer_constant(self):
        """Test transforms that promote differently are not equal."""
        transform = as_interval(0.0, INF)

        assert transform != POSITIVE_REAL
        assert transform.forward(np.float32(0.1)).dtype == np.float64
        assert POSITIVE_REAL.forward(np.float32(0.1)).dtype == np.float32

        assert as_interval(0.0, 1.0) != UNIT_INTERVAL
        assert as_interval(0.0, 1.0) == as_interval(0.0, 1.0)
        assert hash(as_interval(0, INF)) == hash(POSITIVE_REAL)

    def test_half_lines(self):
        assert repr(as_interval(0, INF, scale=10)) == "as_interval(0, INF, scale=10)"
        assert repr(as_interval(-INF, 2.5)) == "as_interval(-INF, 2.5, scale=1)"

    def test_bounded(self):
        assert repr(as_interval(1, 3)) == "as_interval(1, 3)"
        assert repr(as_interval(np.float32(0.5), np.float32(1.5))) == "as_interval(0.5, 1.5)"
