"""
The Y0, Z0, Z2 bounds of the radii polynomial.

    Y0 = ||A f(x_bar)||
    Z0 = ||I - A Df(x_bar)||
    Z2 = problem-specific bound on ||A (Df(x) - Df(y))|| / ||x - y||
"""

from typing import Any, NamedTuple

import numpy as np

from radiipoly.log import logger
from radiipoly.model import VectorField
from radiipoly.numerical.interval import interval
from radiipoly.numerical.kind import INTERVAL, PLAIN, kind_of
from radiipoly.numerical.norms import Norm


class RadiiBounds(NamedTuple):
    """
    The three radii polynomial coefficients, as floats or as intervals.
    """

    y0: Any
    z0: Any
    z2: Any

    @property
    def is_rigorous(self) -> bool:
        return kind_of(self.y0) is INTERVAL

    def upper(self) -> "RadiiBounds":
        """Float upper bounds, safe to use in inequalities that should hold for the true values."""
        kind = kind_of(self.y0)
        return RadiiBounds(*(kind.upper(b) for b in self))

    def intervals(self) -> "RadiiBounds":
        """Interval values. Float bounds become degenerate intervals."""
        return RadiiBounds(*(interval(b) for b in self))


def compute_bounds(
    model: VectorField,
    x_bar,
    A,
    params,
    norm: Norm | None = None,
    rigorous: bool = True,
) -> RadiiBounds:
    """
    Computes Y0, Z0, Z2 at the approximate zero x_bar.

    In rigorous mode x_bar, A and params are lifted to intervals, f and Df are evaluated
    in interval arithmetic, and the returned bounds are intervals containing the true values.
    Otherwise everything is computed with floats (fast, not a proof).

    Args:
        model (VectorField): the vector field.
        x_bar: approximate zero (floats).
        A: approximate inverse of Df(x_bar) (floats), see :func:`~radiipoly.numerical.approximate_inverse`.
        params: parameters of the vector field.
        norm (Norm | None, optional): Defaults to model.default_norm().
        rigorous (bool, optional): Defaults to True.

    Raises:
        ValueError: Z2 of model is not a bound in norm, see :meth:`VectorField.check_norm`.

    Returns:
        RadiiBounds: intervals if rigorous, otherwise floats.
    """
    kind = INTERVAL if rigorous else PLAIN
    norm = model.check_norm(norm or model.default_norm())

    x_bar = model.check_vector(x_bar, kind)
    A = model.check_matrix(A, kind)

    fx = model.f(x_bar, params, kind)
    dfx = model.df(x_bar, params, kind)

    y0 = norm.vector(A @ fx, kind)
    z0 = norm.matrix(kind.eye(model.dimension) - A @ dfx, kind)
    z2 = model.z2_bound(A, params, norm, kind)

    bounds = RadiiBounds(y0=y0, z0=z0, z2=z2)
    upper = bounds.upper()
    logger.debug("%s bounds: Y0 <= %.6e, Z0 <= %.6e, Z2 <= %.6e", kind.name, *upper)

    if not upper.z0 < 1:
        logger.warning("Z0 <= %.6e is not below 1, the radii polynomial can't be negative", upper.z0)

    return bounds


def residual_norm(model: VectorField, x, params, norm: Norm | None = None) -> float:
    """Float norm of f(x), the quantity Newton's method drives below its tolerance."""
    norm = norm or model.default_norm()
    return float(norm.vector(np.asarray(model.f(x, params), dtype=np.float64)))
