"""
Plain (float) linear algebra used to build the approximate zero and the approximate inverse.

Both functions refuse to return garbage: a singular or badly conditioned matrix raises
:class:`~radiipoly.errors.SingularJacobianError`.
"""

import warnings

import numpy as np
import scipy.linalg
from scipy.linalg import LinAlgError, LinAlgWarning

from radiipoly.errors import SingularJacobianError
from radiipoly.log import logger

# beyond this condition number a float inverse carries no correct digits:
MAX_CONDITION_NUMBER = 1 / np.finfo(np.float64).eps


def solve_linear(matrix: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Solves matrix @ u = rhs.

    Raises:
        SingularJacobianError: matrix is singular or scipy reports it as ill-conditioned.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("error", category=LinAlgWarning)
        try:
            return scipy.linalg.solve(matrix, rhs)
        except (LinAlgError, LinAlgWarning) as e:
            raise SingularJacobianError(f"Linear solve failed: {e}") from e


def condition_number(matrix: np.ndarray) -> float:
    return float(np.linalg.cond(matrix))


def approximate_inverse(matrix: np.ndarray, max_condition: float | None = None) -> np.ndarray:
    """
    Float inverse of the Jacobian at the approximate zero, the operator A of the radii polynomial.

    A is never computed with intervals. Its entries are later lifted to intervals as exact points,
    which keeps the bounds rigorous. Z0 is only small when matrix is well conditioned,
    so the condition number is checked first.

    Args:
        matrix (np.ndarray): square float matrix, typically Df(x_bar).
        max_condition (float | None, optional): largest accepted condition number. Defaults to 1 / machine epsilon.

    Raises:
        SingularJacobianError: the condition number is not finite or exceeds max_condition.
    """
    max_condition = max_condition or MAX_CONDITION_NUMBER
    cond = condition_number(matrix)
    logger.debug("condition number of the jacobian: %.3e", cond)

    if not np.isfinite(cond) or cond > max_condition:
        raise SingularJacobianError(f"Jacobian condition number {cond:.3e} exceeds {max_condition:.3e}")

    try:
        return scipy.linalg.inv(matrix)
    except LinAlgError as e:
        raise SingularJacobianError(f"Inversion failed: {e}") from e
