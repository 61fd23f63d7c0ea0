"""scalar-transforms: bijections from the real line to open intervals.

Transforms map an unconstrained real number to a constrained domain and
report the log-Jacobian of the map, so that optimizers and samplers can
work in unconstrained coordinates while model parameters stay in their
domains (positive variances, probabilities in (0, 1), ...).
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
