"""
The Lorenz vector field.

    f(x) = [sigma (x2 - x1), rho x1 - x2 - x1 x3, x1 x2 - beta x3]
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from radiipoly.model.model import VectorField
from radiipoly.numerical.kind import NumericKind, PLAIN
from radiipoly.numerical.norms import InfinityNorm, Norm


@dataclass(frozen=True)
class LorenzParameters:
    sigma: Any
    rho: Any
    beta: Any


class Lorenz(VectorField):
    """The 3d Lorenz system, zeros of f are its equilibria."""

    parameters_class = LorenzParameters

    def __init__(self) -> None:
        super().__init__(dimension=3)

    def _f(self, x: np.ndarray, params: tuple, kind: NumericKind) -> np.ndarray:
        sigma, rho, beta = params
        x1, x2, x3 = x
        return kind.asarray(
            [
                sigma * (x2 - x1),
                rho * x1 - x2 - x1 * x3,
                x1 * x2 - beta * x3,
            ]
        )

    def _df(self, x: np.ndarray, params: tuple, kind: NumericKind) -> np.ndarray:
        sigma, rho, beta = params
        x1, x2, x3 = x
        return kind.asarray(
            [
                [-sigma, sigma, 0],
                [rho - x3, -1, -x1],
                [x2, x1, -beta],
            ]
        )

    def z2_bound(self, A: np.ndarray, params, norm: Norm | None = None, kind: NumericKind = PLAIN):
        """
        2 max_i (|A_i2| + |A_i3|).

        Df(x) - Df(y) only has the entries -(x3 - y3), -(x1 - y1) in row 2 and x2 - y2, x1 - y1 in row 3,
        each bounded by ||x - y|| in the infinity norm, which is the norm this bound assumes.
        """
        self.check_norm(norm or self.default_norm())
        A = self.check_matrix(A, kind)
        row_sums = np.abs(A[:, 1]) + np.abs(A[:, 2])
        return kind.max(row_sums) * 2

    def default_norm(self) -> Norm:
        return InfinityNorm()

    def check_norm(self, norm: Norm) -> Norm:
        if not isinstance(norm, InfinityNorm):
            raise ValueError(f"the Lorenz Z2 bound holds in the infinity norm only, got {norm!r}")
        return norm
