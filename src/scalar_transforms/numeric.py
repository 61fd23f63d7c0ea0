"""Numeric promotion and numerically stable special functions.

Working precision rule: every transform output is computed in the widest
floating dtype among the input and the transform parameters. Integer
values never widen the result, so integer parameters combined with a
float32 input stay in float32, while float64 parameters promote a float32
input to float64 (and vice versa). Without any floating argument the
working precision is float64.
"""

import math
from numbers import Real
from typing import Any

import numpy as np
from scipy.special import expit, log_expit
from scipy.special import logit as _logit

# math.fma is only available on Python 3.13+
_fma = getattr(math, "fma", None)


def is_real(value: Any) -> bool:
    """Check that value is a real scalar (bools excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Real, np.integer, np.floating))


def fits_float(value: Any) -> bool:
    """Check that a real scalar converts to a finite float.

    Integers beyond the float range count as not fitting instead of
    raising OverflowError.
    """
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


def result_dtype(*values: Any) -> np.dtype:
    """Floating dtype a computation over ``values`` is carried out in.

    Args:
        *values: Real scalars (Python or numpy)

    Returns:
        Widest floating dtype among values, float64 when none is floating
    """
    floats = []
    for value in values:
        dtype = np.asarray(value).dtype
        if np.issubdtype(dtype, np.floating):
            floats.append(dtype)
    if not floats:
        return np.dtype(np.float64)
    return np.result_type(*floats)


def as_working(value: Any, dtype: np.dtype) -> np.floating:
    """Cast a real scalar to the working dtype."""
    return dtype.type(value)


def logistic(x):
    """Logistic function 1 / (1 + exp(-x))."""
    return expit(x)


def logit(z):
    """Inverse of the logistic function, log(z / (1 - z))."""
    return _logit(z)


def logistic_log_jacobian(x):
    """log(logistic(x)) + log(1 - logistic(x)).

    Evaluated as log_expit(x) + log_expit(-x), which does not cancel for
    large |x|.
    """
    return log_expit(x) + log_expit(-x)


def logit_log_jacobian(z):
    """Log derivative of logit at z, -log(z) - log(1 - z)."""
    return -np.log(z) - np.log1p(-z)


def fused_multiply_add(a, b, c):
    """a * b + c, with a single rounding for float64 operands when possible."""
    dtype = result_dtype(a, b, c)
    if _fma is not None and dtype == np.float64:
        return np.float64(_fma(float(a), float(b), float(c)))
    return as_working(a, dtype) * as_working(b, dtype) + as_working(c, dtype)
