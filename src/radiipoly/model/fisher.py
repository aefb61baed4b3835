"""
Steady states of the Fisher equation u_t = u_xx + lam u (1 - u), truncated to N cosine modes.

A symmetric 2pi-periodic u is stored as x = (x_0, ..., x_N), with the implicit reflection x_{-k} = x_k.
The steady state problem becomes

    f_k(x) = (lam - k^2) x_k - lam (x * x)_k,     k = 0..N

where (x * x)_k is the symmetric self-convolution restricted to modes |k| <= N.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from radiipoly.model.model import VectorField
from radiipoly.numerical.kind import NumericKind, PLAIN
from radiipoly.numerical.norms import Norm, WeightedEll1Norm


@dataclass(frozen=True)
class FisherParameters:
    lam: Any


def symmetric_convolution(x: np.ndarray) -> np.ndarray:
    """
    (x * x)_k = sum_{k1} x_{|k1|} x_{|k - k1|} for k = 0..N, over the k1 with |k1| <= N and |k - k1| <= N.

    Works for float and interval arrays.
    """
    N = x.shape[0] - 1
    # two-sided sequence, full[j] = x_{|j - N|}
    full = np.concatenate([x[:0:-1], x])

    # for mode k, k1 runs over k-N..N, i.e full[k:], paired with k-k1 running over N..k-N, i.e full[k:][::-1]
    return np.array([np.dot(full[k:], full[k:][::-1]) for k in range(N + 1)], dtype=x.dtype)


class Fisher(VectorField):
    """
    The truncated Fisher steady state operator with N + 1 cosine modes.
    """

    parameters_class = FisherParameters

    def __init__(self, N: int) -> None:
        super().__init__(dimension=N + 1)
        self.N = N

    def _f(self, x: np.ndarray, params: tuple, kind: NumericKind) -> np.ndarray:
        (lam,) = params
        return x * self._diagonal(lam, kind) - symmetric_convolution(x) * lam

    def _df(self, x: np.ndarray, params: tuple, kind: NumericKind) -> np.ndarray:
        """
        Df_{k,l} = delta_{kl} (lam - k^2) - 2 lam (x_{|k-l|} + [l > 0 and k + l <= N] x_{k+l})

        Index l > 0 enters the convolution through both modes l and -l. The reflected
        partner only contributes while k + l stays inside the truncation; x_0 has no partner.
        """
        (lam,) = params
        N = self.N
        k, l = np.indices((N + 1, N + 1))

        # x_{k+l} where it contributes, otherwise the zero appended at index N + 1:
        padded = np.concatenate([x, kind.zeros(1)])
        reflected = np.where((l > 0) & (k + l <= N), k + l, N + 1)

        jac = (x[np.abs(k - l)] + padded[reflected]) * (lam * -2)
        jac[np.diag_indices(N + 1)] += self._diagonal(lam, kind)
        return jac

    def _diagonal(self, lam, kind: NumericKind) -> np.ndarray:
        """lam - k^2 for k = 0..N"""
        return kind.asarray([lam - k * k for k in range(self.N + 1)])

    def z2_bound(self, A: np.ndarray, params, norm: Norm | None = None, kind: NumericKind = PLAIN):
        """
        2 |lam| ||A||.

        The nonlinearity is lam (x * x), so ||D^2 f|| <= 2 |lam| whenever the norm is a Banach algebra
        norm for the convolution (e.g :meth:`WeightedEll1Norm.symmetric`).
        """
        norm = self.check_norm(norm or self.default_norm())
        A = self.check_matrix(A, kind)
        (lam,) = self.lift_parameters(params, kind)
        return norm.matrix(A, kind) * abs(lam) * 2

    def default_norm(self) -> Norm:
        return WeightedEll1Norm.symmetric(self.dimension)

    def check_norm(self, norm: Norm) -> Norm:
        """Accepts weighted l1 norms in which the convolution is submultiplicative."""
        if not isinstance(norm, WeightedEll1Norm):
            raise ValueError(f"the Fisher Z2 bound needs a weighted l1 norm, got {norm!r}")
        norm.check_dimension(self.dimension)
        if not norm.is_convolution_algebra():
            raise ValueError(
                f"{norm!r} is not submultiplicative for the convolution, 2 |lam| ||A|| is not a bound in it"
            )
        return norm

    def __repr__(self):
        return f"Fisher(N={self.N})"
