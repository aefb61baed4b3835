"""
Newton's method for computing a numerical approximate zero x_bar of a vector field.
"""

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

from radiipoly.errors import ConvergenceError
from radiipoly.log import logger
from radiipoly.numerical.linalg import solve_linear
from radiipoly.numerical.norms import InfinityNorm, Norm

DEFAULT_MAX_ITERATIONS = 100
DEFAULT_TOLERANCE = 1e-10


@dataclass(frozen=True)
class NewtonResult:
    x: np.ndarray
    iterations: int
    residual: float


def newton(
    f: Callable[[np.ndarray, Any], np.ndarray],
    df: Callable[[np.ndarray, Any], np.ndarray],
    x0,
    params,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    norm: Norm | None = None,
) -> NewtonResult:
    """
    Iterates x <- x - Df(x)^-1 f(x) until norm(f(x)) < tolerance.

    The stopping test is applied to x0 as well, a converged initial guess returns after 0 iterations.

    Args:
        f (Callable): f(x, params) -> vector.
        df (Callable): df(x, params) -> square matrix.
        x0: initial guess.
        params: passed as-is to f and df.
        max_iterations (int, optional): Defaults to 100.
        tolerance (float, optional): must be positive. Defaults to 1e-10.
        norm (Norm | None, optional): norm of the residual. Defaults to the infinity norm.

    Raises:
        ConvergenceError: no convergence within max_iterations, or the iterates left the floats.
        SingularJacobianError: a Newton step could not be solved.
    """
    if not tolerance > 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    if max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")

    norm = norm or InfinityNorm()
    x = np.array(x0, dtype=np.float64)

    fx = np.asarray(f(x, params), dtype=np.float64)
    residual = float(norm.vector(fx))
    logger.debug("newton: iteration 0, residual %.3e", residual)

    iterations = 0
    while not residual < tolerance:
        if iterations == max_iterations:
            raise ConvergenceError(
                f"Newton's method did not converge in {max_iterations} iterations (residual {residual:.3e})"
            )

        u = solve_linear(np.asarray(df(x, params), dtype=np.float64), fx)
        x = x - u
        iterations += 1

        if not np.all(np.isfinite(x)):
            raise ConvergenceError(f"Newton's method diverged after {iterations} iterations")

        fx = np.asarray(f(x, params), dtype=np.float64)
        residual = float(norm.vector(fx))
        logger.debug("newton: iteration %d, residual %.3e", iterations, residual)

    return NewtonResult(x=x, iterations=iterations, residual=residual)


def solve(
    model,
    x0,
    params,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    norm: Norm | None = None,
) -> np.ndarray:
    """
    Approximate zero of a :class:`~radiipoly.model.VectorField`, see :func:`newton`.

    Examples:
        >>> x_bar = solve(Lorenz(), [8, 8, 26], LorenzParameters(10, 28, Fraction(8, 3)))
    """
    x0 = model.check_vector(x0)
    result = newton(model.f, model.df, x0, params, max_iterations=max_iterations, tolerance=tolerance, norm=norm)
    logger.debug("newton converged in %d iterations, residual %.3e", result.iterations, result.residual)
    return result.x
