"""
Exceptions raised by radiipoly.

Two families are kept apart on purpose:
    - :class:`RadiiPolyError` means the run is broken (bad shapes, Newton failed, singular Jacobian).
    - :class:`ProofFailure` means the computation went fine but the radii polynomial
      does not establish a proof. The certifier turns these into a not-certified
      :class:`~radiipoly.proof.ProofResult` instead of raising.
"""


class RadiiPolyError(Exception):
    """Base class for errors that invalidate a run."""


class InputShapeError(RadiiPolyError, ValueError):
    """A vector, matrix or parameter tuple does not match the dimension of the problem."""


class ConvergenceError(RadiiPolyError):
    """Newton's method did not reach the tolerance within the allowed number of iterations."""


class SingularJacobianError(RadiiPolyError):
    """The Jacobian is singular, or too ill-conditioned to be solved or inverted."""


class ProofFailure(Exception):
    """Base class for legitimate "proof not established" outcomes."""


class NoRootsError(ProofFailure):
    """The radii polynomial has no real roots (negative discriminant)."""
