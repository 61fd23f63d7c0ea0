"""Public API for scalar-transforms.

This module collects the boundary marker, the transform variants, the
interval dispatcher and the predefined transforms.
"""

# Boundary marker
from .infinity import INF, Infinity

# Transforms
from .transforms import (
    ScalarTransform,
    Identity,
    ShiftedExp,
    ScaledShiftedLogistic,
)

# Interval construction
from .intervals import (
    as_interval,
    REAL,
    POSITIVE_REAL,
    NEGATIVE_REAL,
    UNIT_INTERVAL,
    as_real,
    as_positive_real,
    as_negative_real,
    as_unit_interval,
)

# Errors
from .errors import TransformError, IntervalError, DomainError

# Version
try:
    from importlib.metadata import version
    __version__ = version("scalar-transforms")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Boundary marker
    "INF",
    "Infinity",

    # Transforms
    "ScalarTransform",
    "Identity",
    "ShiftedExp",
    "ScaledShiftedLogistic",

    # Interval construction
    "as_interval",
    "REAL",
    "POSITIVE_REAL",
    "NEGATIVE_REAL",
    "UNIT_INTERVAL",
    "as_real",
    "as_positive_real",
    "as_negative_real",
    "as_unit_interval",

    # Errors
    "TransformError",
    "IntervalError",
    "DomainError",

    # Version
    "__version__",
]
