"""
Computer-assisted proofs of zeros of vector fields with the radii polynomial theorem.

    - :mod:`radiipoly.model` evaluates vector fields (Lorenz, truncated Fisher) and their Jacobians.
    - :mod:`radiipoly.numerical` contains intervals, numeric kinds, norms and Newton's method.
    - :mod:`radiipoly.proof` computes the Y0, Z0, Z2 bounds and certifies the radii polynomial.
"""

from radiipoly.errors import (
    ConvergenceError,
    InputShapeError,
    NoRootsError,
    ProofFailure,
    RadiiPolyError,
    SingularJacobianError,
)
from radiipoly.numerical import approximate_inverse, solve
from radiipoly.proof import RadiiProof, ProofResult, certify, compute_bounds, prove

__all__ = [
    "ConvergenceError",
    "InputShapeError",
    "NoRootsError",
    "ProofFailure",
    "RadiiPolyError",
    "SingularJacobianError",
    "approximate_inverse",
    "solve",
    "RadiiProof",
    "ProofResult",
    "certify",
    "compute_bounds",
    "prove",
]
