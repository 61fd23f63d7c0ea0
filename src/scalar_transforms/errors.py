"""Exceptions raised by scalar transforms.

Both error kinds subclass ValueError so callers that already guard
transform calls with ``except ValueError`` keep working.
"""


class TransformError(ValueError):
    """Base class for transform errors."""


class IntervalError(TransformError):
    """Invalid transform construction (empty interval, bad scale or bound)."""


class DomainError(TransformError):
    """Value outside the image of a transform passed to an inverse."""
