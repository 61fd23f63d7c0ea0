"""Constants used throughout scalar-transforms."""

# Scale of the half-line transforms when none is given
DEFAULT_SCALE: int = 1

# Number of unconstrained coordinates consumed by a scalar transform
SCALAR_DIMENSION: int = 1

# Rendering of the boundary markers
POSITIVE_INFINITY_SYMBOL: str = "∞"
NEGATIVE_INFINITY_SYMBOL: str = "-∞"
