"""Construction of scalar transforms from interval ends.

``as_interval(left, right)`` returns the transform onto the open interval
``(left, right)``. Either end may be the boundary marker ``INF`` / ``-INF``:

- (-INF, INF) → Identity
- (a, INF) → ShiftedExp(True, a, scale)
- (-INF, b) → ShiftedExp(False, b, scale)
- (a, b) → ScaledShiftedLogistic(b - a, a)

Finite ends affect numeric promotion: ``as_interval(0, INF)`` keeps float32
inputs in float32, ``as_interval(0.0, INF)`` computes in float64.
"""

import logging
import math
from numbers import Integral
from typing import Any, Optional, Union

from .constants import DEFAULT_SCALE
from .errors import IntervalError
from .infinity import INF, Infinity, is_infinity
from .numeric import fits_float, is_real
from .transforms import (
    Identity,
    ScalarTransform,
    ScaledShiftedLogistic,
    ShiftedExp,
    register_constant_name,
)

logger = logging.getLogger(__name__)

Bound = Union[int, float, Infinity]


def _check_bound(name: str, value: Any) -> None:
    """Validate a finite interval end."""
    if is_infinity(value):
        return
    if not is_real(value):
        raise IntervalError(
            f"{name} end must be a real number or INF/-INF, got {type(value).__name__}"
        )
    if isinstance(value, Integral):
        if not fits_float(value):
            raise IntervalError(f"{name} end is an integer beyond the float range")
        return
    if math.isnan(value):
        raise IntervalError(f"{name} end cannot be NaN")
    if math.isinf(value):
        raise IntervalError(f"{name} end {value} is infinite, use INF or -INF instead")


def as_interval(left: Bound, right: Bound, scale: Optional[Any] = None) -> ScalarTransform:
    """Return the transform of a real number onto the open interval (left, right).

    Args:
        left: Lower end, a finite real or -INF
        right: Upper end, a finite real or INF
        scale: Scale of the unconstrained coordinate; only accepted when
            exactly one end is infinite (default 1)

    Returns:
        Identity, ShiftedExp or ScaledShiftedLogistic

    Raises:
        IntervalError: If (left, right) is not a non-empty interval, or
            scale is given for a fully finite or fully infinite interval

    Example:
        >>> t = as_interval(0, INF, scale=10)
        >>> float(t.forward(10.0))  # 0 + exp(10 / 10)
        2.718281828459045
    """
    _check_bound("left", left)
    _check_bound("right", right)

    if is_infinity(left, positive=False) and is_infinity(right, positive=True):
        if scale is not None:
            raise IntervalError("scale is only supported for half-infinite intervals")
        transform = Identity()
    elif is_infinity(left) or is_infinity(right):
        if is_infinity(left, positive=True) or is_infinity(right, positive=False):
            raise IntervalError(f"({left!r}, {right!r}) must be an interval")
        scale = DEFAULT_SCALE if scale is None else scale
        if is_infinity(right):
            transform = ShiftedExp(True, left, scale)
        else:
            transform = ShiftedExp(False, right, scale)
    else:
        if scale is not None:
            raise IntervalError("scale is only supported for half-infinite intervals")
        if not left < right:
            raise IntervalError(f"the interval ({left}, {right}) is empty")
        width = right - left
        if not fits_float(width):
            raise IntervalError(
                f"the interval ({left}, {right}) is too wide, its width overflows a float"
            )
        transform = ScaledShiftedLogistic(width, left)

    logger.debug(f"Selected {type(transform).__name__} for interval ({left}, {right})")
    return transform


REAL = as_interval(-INF, INF)
"""Transform to the real line (identity)."""

POSITIVE_REAL = as_interval(0, INF)
"""Transform to the positive half-line (0, ∞)."""

NEGATIVE_REAL = as_interval(-INF, 0)
"""Transform to the negative half-line (-∞, 0)."""

UNIT_INTERVAL = as_interval(0, 1)
"""Transform to the unit interval (0, 1)."""

register_constant_name(REAL, "REAL")
register_constant_name(POSITIVE_REAL, "POSITIVE_REAL")
register_constant_name(NEGATIVE_REAL, "NEGATIVE_REAL")
register_constant_name(UNIT_INTERVAL, "UNIT_INTERVAL")


def as_real() -> ScalarTransform:
    """Transform to the real line, see ``REAL``."""
    return REAL


def as_positive_real() -> ScalarTransform:
    """Transform to (0, ∞), see ``POSITIVE_REAL``."""
    return POSITIVE_REAL


def as_negative_real() -> ScalarTransform:
    """Transform to (-∞, 0), see ``NEGATIVE_REAL``."""
    return NEGATIVE_REAL


def as_unit_interval() -> ScalarTransform:
    """Transform to (0, 1), see ``UNIT_INTERVAL``."""
    return UNIT_INTERVAL
