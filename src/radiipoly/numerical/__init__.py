"""
Modules that perform numerical computations.
    - :mod:`interval.py` wraps the outward-rounded interval arithmetic of :mod:`mpmath.iv`.
    - :mod:`kind.py` defines the plain and interval numeric kinds every evaluator is written against.
    - :mod:`norms.py` contains vector norms and the induced matrix norms.
    - :mod:`linalg.py` contains float linear solves and the approximate inverse.
    - :mod:`newton.py` contains Newton's method.
"""

from .kind import NumericKind, PLAIN, INTERVAL, kind_of
from .interval import interval, upper, lower, is_interval
from .norms import Norm, InfinityNorm, WeightedEll1Norm
from .linalg import approximate_inverse, solve_linear
from .newton import newton, solve, NewtonResult

__all__ = [
    "NumericKind",
    "PLAIN",
    "INTERVAL",
    "kind_of",
    "interval",
    "upper",
    "lower",
    "is_interval",
    "Norm",
    "InfinityNorm",
    "WeightedEll1Norm",
    "approximate_inverse",
    "solve_linear",
    "newton",
    "solve",
    "NewtonResult",
]
