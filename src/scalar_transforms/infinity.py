"""Boundary marker for interval ends.

``INF`` stands in for an infinite interval end when building transforms::

    >>> as_interval(0, INF)        # positive half-line
    >>> as_interval(-INF, 0)       # negative half-line

The marker is not a number: it only selects the interval topology and is
never stored inside a transform.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .constants import NEGATIVE_INFINITY_SYMBOL, POSITIVE_INFINITY_SYMBOL


@dataclass(frozen=True)
class Infinity:
    """Positive (``positive=True``) or negative infinity."""
    positive: bool = True

    def __post_init__(self):
        if not isinstance(self.positive, bool):
            raise TypeError(
                f"Infinity sign must be a bool, got {type(self.positive).__name__}"
            )

    def negate(self) -> "Infinity":
        """Return the marker with the opposite sign."""
        return Infinity(not self.positive)

    def __neg__(self) -> "Infinity":
        return self.negate()

    def __str__(self) -> str:
        return POSITIVE_INFINITY_SYMBOL if self.positive else NEGATIVE_INFINITY_SYMBOL

    def __repr__(self) -> str:
        return "INF" if self.positive else "-INF"


INF = Infinity(True)


def is_infinity(value: Any, positive: Optional[bool] = None) -> bool:
    """Check whether value is a boundary marker, optionally of a given sign."""
    if not isinstance(value, Infinity):
        return False
    return positive is None or value.positive is positive
