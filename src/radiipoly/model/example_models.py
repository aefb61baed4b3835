"""
A module containing ready-made problems: a vector field, its parameters and an initial guess.
"""

from fractions import Fraction

import numpy as np
from sympy import Rational, nsimplify, solve, symbols

from radiipoly.cache import persistent_cache
from radiipoly.model.fisher import Fisher, FisherParameters
from radiipoly.model.lorenz import Lorenz, LorenzParameters
from radiipoly.numerical.newton import solve as newton_solve

"""
Lorenz:
"""


def lorenz_example():
    """
    The classical chaotic Lorenz system (sigma, rho, beta) = (10, 28, 8/3),
    with an initial guess close to the equilibrium C+ = (sqrt(72), sqrt(72), 27).

    Returns:
        (model, params, x0)
    """
    params = LorenzParameters(sigma=10, rho=28, beta=Fraction(8, 3))
    x0 = np.array([8.0, 8.0, 26.0])
    return Lorenz(), params, x0


def _to_sympy(value):
    if isinstance(value, Fraction):
        return Rational(value.numerator, value.denominator)
    return nsimplify(value, rational=True)


def lorenz_equilibria(params: LorenzParameters) -> list[np.ndarray]:
    """
    All real equilibria of the Lorenz system, solved symbolically and rounded to floats.

    For rho > 1 these are the origin and C+-  = (+-sqrt(beta (rho - 1)), +-sqrt(beta (rho - 1)), rho - 1).
    Sorted by the first coordinate.
    """
    params = Lorenz().parameters(params)
    sigma, rho, beta = (_to_sympy(p) for p in (params.sigma, params.rho, params.beta))
    x1, x2, x3 = symbols("x1 x2 x3")

    solutions = solve(
        [
            sigma * (x2 - x1),
            rho * x1 - x2 - x1 * x3,
            x1 * x2 - beta * x3,
        ],
        [x1, x2, x3],
        dict=True,
    )

    points = []
    for s in solutions:
        values = [s[v] for v in (x1, x2, x3)]
        if all(v.is_real for v in values):
            points.append(np.array([float(v) for v in values]))

    return sorted(points, key=lambda p: p[0])


"""
Fisher:
"""


def fisher_example(lam: float = 50, N: int = 100):
    """
    Fisher steady state with initial guess u(t) ~ 1 + 0.6 cos(t), i.e x0 = [1.0, 0.3, 0, ..., 0].

    Returns:
        (model, params, x0)
    """
    x0 = np.zeros(N + 1)
    x0[0] = 1.0
    x0[1] = 0.3
    return Fisher(N), FisherParameters(lam=lam), x0


@persistent_cache
def fisher_approximate_zero(lam: float = 50, N: int = 100, tolerance: float = 1e-10) -> np.ndarray:
    """
    Newton solution of :func:`fisher_example`, cached on disk.
    """
    model, params, x0 = fisher_example(lam=lam, N=N)
    return newton_solve(model, x0, params, tolerance=tolerance, norm=model.default_norm())
