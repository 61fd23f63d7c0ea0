"""Scalar transforms from the real line to open intervals.

Each transform is a bijection from an unconstrained real number to a
constrained domain, together with the log of the absolute derivative
(log-Jacobian) used for change of variables:

- Identity: (-∞, ∞) → (-∞, ∞)
- ShiftedExp: (-∞, ∞) → (shift, ∞) or (-∞, shift)
- ScaledShiftedLogistic: (-∞, ∞) → (shift, shift + scale)

Transforms are immutable values. Construct them with ``as_interval``
rather than directly; the dispatcher picks the variant from the interval
ends.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from numbers import Integral
from typing import Any, List, MutableSequence, Optional, Sequence, Tuple

import numpy as np

from .constants import DEFAULT_SCALE, SCALAR_DIMENSION
from .errors import DomainError, IntervalError
from .numeric import (
    as_working,
    fits_float,
    fused_multiply_add,
    is_real,
    logistic,
    logistic_log_jacobian,
    logit,
    logit_log_jacobian,
    result_dtype,
)

logger = logging.getLogger(__name__)

# Display names of the predefined transforms, filled in by .intervals
_CONSTANT_NAMES: List[Tuple["ScalarTransform", str]] = []


def register_constant_name(transform: "ScalarTransform", name: str) -> None:
    """Render the instance ``transform`` as ``name``."""
    _CONSTANT_NAMES.append((transform, name))


def _format_number(value: Any) -> str:
    if isinstance(value, np.generic):
        value = value.item()
    return repr(value)


def _check_scale(scale: Any) -> None:
    if not is_real(scale):
        raise IntervalError(f"scale must be a real number, got {type(scale).__name__}")
    if isinstance(scale, Integral) and not fits_float(scale):
        raise IntervalError("scale must be positive and finite, got an integer beyond the float range")
    if not (scale > 0 and math.isfinite(scale)):
        raise IntervalError(f"scale must be positive and finite, got {scale}")


def _check_shift(owner: str, shift: Any) -> None:
    if not is_real(shift):
        raise IntervalError(f"{owner} shift must be a finite real, got {type(shift).__name__}")
    if isinstance(shift, Integral) and not fits_float(shift):
        raise IntervalError(f"{owner} shift must be a finite real, got an integer beyond the float range")
    if not math.isfinite(shift):
        raise IntervalError(f"{owner} shift must be a finite real, got {shift!r}")


def _domain_error(message: str) -> DomainError:
    logger.debug(f"Rejecting inverse argument: {message}")
    return DomainError(message)


class ScalarTransform(ABC):
    """Transform of a single real number to a (possibly bounded) open interval.

    Subclasses define ``forward``, ``forward_and_log_jacobian``, ``inverse``,
    ``inverse_and_log_jacobian`` and ``image``; the remaining methods are
    shared.
    """

    @abstractmethod
    def forward(self, x):
        """Map an unconstrained value into the image interval."""

    @abstractmethod
    def forward_and_log_jacobian(self, x) -> Tuple[Any, Any]:
        """Return ``(forward(x), log|d forward / dx|)``."""

    @abstractmethod
    def inverse(self, y):
        """Map a value of the image interval back to the real line.

        Raises:
            DomainError: If y is outside the open image interval
        """

    @abstractmethod
    def inverse_and_log_jacobian(self, y) -> Tuple[Any, Any]:
        """Return ``(inverse(y), log|d inverse / dy|)``.

        Raises:
            DomainError: If y is outside the open image interval
        """

    @property
    @abstractmethod
    def image(self) -> Tuple[float, float]:
        """Open interval (lower, upper) the forward map lands in."""

    @property
    def dimension(self) -> int:
        """Number of unconstrained coordinates consumed (always 1)."""
        return SCALAR_DIMENSION

    def transform_with(
        self, x: Sequence, index: int, log_jacobian: bool = False
    ) -> Tuple[Any, Optional[Any], int]:
        """Transform ``x[index]`` for a layer walking a coordinate vector.

        Args:
            x: Vector of unconstrained coordinates
            index: Position of this transform's coordinate in x
            log_jacobian: Also compute the log-Jacobian

        Returns:
            (value, log-Jacobian or None, next index)
        """
        value = x[index]
        if log_jacobian:
            y, logj = self.forward_and_log_jacobian(value)
            return y, logj, index + SCALAR_DIMENSION
        return self.forward(value), None, index + SCALAR_DIMENSION

    def inverse_at(self, out: MutableSequence, index: int, y) -> int:
        """Write ``inverse(y)`` into ``out[index]`` and return the next index."""
        out[index] = self.inverse(y)
        return index + SCALAR_DIMENSION

    def inverse_dtype(self, y) -> np.dtype:
        """Floating dtype of the unconstrained value ``inverse(y)``."""
        return result_dtype(y)

    def random_arg(self, rng: Optional[np.random.Generator] = None, scale: float = 1.0) -> float:
        """Draw a random unconstrained argument, normal with sd ``scale``."""
        if rng is None:
            rng = np.random.default_rng()
        return float(rng.normal(0.0, scale))

    def __contains__(self, y) -> bool:
        """Check whether y lies in the open image interval."""
        lower, upper = self.image
        return bool(lower < y < upper)

    def _key(self) -> Tuple[Tuple[type, Any], ...]:
        # parameter types take part: (0, INF) and (0.0, INF) promote differently
        return tuple((type(getattr(self, f.name)), getattr(self, f.name)) for f in fields(self))

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))

    def __repr__(self) -> str:
        for constant, name in _CONSTANT_NAMES:
            if constant is self:
                return name
        return self._describe()

    @abstractmethod
    def _describe(self) -> str:
        """Constructor call that produces this transform."""


@dataclass(frozen=True, repr=False, eq=False)
class Identity(ScalarTransform):
    """Identity ``x ↦ x`` on the whole real line."""

    def forward(self, x):
        return x

    def forward_and_log_jacobian(self, x):
        return x, result_dtype(x).type(0)

    def inverse(self, y):
        return y

    def inverse_and_log_jacobian(self, y):
        return y, result_dtype(y).type(0)

    @property
    def image(self) -> Tuple[float, float]:
        return (-math.inf, math.inf)

    def _describe(self) -> str:
        return "as_interval(-INF, INF)"


@dataclass(frozen=True, repr=False, eq=False)
class ShiftedExp(ScalarTransform):
    """Shifted exponential onto a half-line.

    With ``positive=True`` maps to ``(shift, ∞)`` using
    ``x ↦ shift + exp(x / scale)``, otherwise to ``(-∞, shift)`` using
    ``x ↦ shift - exp(x / scale)``.

    Attributes:
        positive: Direction of the half-line
        shift: Finite end of the half-line
        scale: Positive scale of the unconstrained coordinate
    """
    positive: bool
    shift: Any
    scale: Any = DEFAULT_SCALE

    def __post_init__(self):
        """Validate direction, shift and scale."""
        if not isinstance(self.positive, bool):
            raise IntervalError(
                f"ShiftedExp direction must be a bool, got {type(self.positive).__name__}"
            )
        _check_shift("ShiftedExp", self.shift)
        _check_scale(self.scale)

    def _working(self, value):
        dtype = result_dtype(value, self.shift, self.scale)
        return (
            as_working(value, dtype),
            as_working(self.shift, dtype),
            as_working(self.scale, dtype),
        )

    def forward(self, x):
        x, shift, scale = self._working(x)
        if self.positive:
            return shift + np.exp(x / scale)
        return shift - np.exp(x / scale)

    def forward_and_log_jacobian(self, x):
        # |d/dx exp(x/scale)| = exp(x/scale) / scale for either direction
        y = self.forward(x)
        x, _, scale = self._working(x)
        return y, x / scale - np.log(scale)

    def _distance(self, y):
        """Distance of y from the finite end, rejecting y outside the image."""
        y, shift, _ = self._working(y)
        if self.positive:
            if not y > shift:
                raise _domain_error(f"inverse of {self!r} requires y > {self.shift}, got {y}")
            return y - shift
        if not y < shift:
            raise _domain_error(f"inverse of {self!r} requires y < {self.shift}, got {y}")
        return shift - y

    def inverse(self, y):
        distance = self._distance(y)
        _, _, scale = self._working(y)
        return scale * np.log(distance)

    def inverse_and_log_jacobian(self, y):
        distance = self._distance(y)
        _, _, scale = self._working(y)
        return scale * np.log(distance), np.log(scale) - np.log(distance)

    @property
    def image(self) -> Tuple[float, float]:
        if self.positive:
            return (float(self.shift), math.inf)
        return (-math.inf, float(self.shift))

    def _describe(self) -> str:
        shift = _format_number(self.shift)
        scale = _format_number(self.scale)
        if self.positive:
            return f"as_interval({shift}, INF, scale={scale})"
        return f"as_interval(-INF, {shift}, scale={scale})"


@dataclass(frozen=True, repr=False, eq=False)
class ScaledShiftedLogistic(ScalarTransform):
    """Scaled and shifted logistic onto ``(shift, shift + scale)``.

    Maps ``x ↦ logistic(x) * scale + shift``.

    Attributes:
        scale: Width of the interval, must be positive
        shift: Lower end of the interval
    """
    scale: Any
    shift: Any

    def __post_init__(self):
        """Validate scale and shift."""
        _check_scale(self.scale)
        _check_shift("ScaledShiftedLogistic", self.shift)

    def _working(self, value):
        dtype = result_dtype(value, self.scale, self.shift)
        return (
            as_working(value, dtype),
            as_working(self.scale, dtype),
            as_working(self.shift, dtype),
        )

    def forward(self, x):
        x, scale, shift = self._working(x)
        return fused_multiply_add(logistic(x), scale, shift)

    def forward_and_log_jacobian(self, x):
        y = self.forward(x)
        x, scale, _ = self._working(x)
        return y, np.log(scale) + logistic_log_jacobian(x)

    def _unit(self, y):
        """Position of y in the unit interval, rejecting y outside the image."""
        y, scale, shift = self._working(y)
        if not y > shift:
            raise _domain_error(f"inverse of {self!r} requires y > {self.shift}, got {y}")
        if not y < scale + shift:
            raise _domain_error(
                f"inverse of {self!r} requires y < {self.shift + self.scale}, got {y}"
            )
        return (y - shift) / scale

    def inverse(self, y):
        return logit(self._unit(y))

    def inverse_and_log_jacobian(self, y):
        z = self._unit(y)
        _, scale, _ = self._working(y)
        return logit(z), logit_log_jacobian(z) - np.log(scale)

    @property
    def image(self) -> Tuple[float, float]:
        return (float(self.shift), float(self.shift + self.scale))

    def _describe(self) -> str:
        lower = _format_number(self.shift)
        upper = _format_number(self.shift + self.scale)
        return f"as_interval({lower}, {upper})"
