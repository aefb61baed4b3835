"""
Vector norms and their induced matrix norms, for both numeric kinds.

All three radii polynomial bounds of a proof must be computed with the same norm.
"""

from abc import ABC, abstractmethod

import numpy as np

from radiipoly.errors import InputShapeError
from radiipoly.numerical.kind import NumericKind, PLAIN


class Norm(ABC):
    @abstractmethod
    def vector(self, v: np.ndarray, kind: NumericKind = PLAIN):
        raise NotImplementedError

    @abstractmethod
    def matrix(self, M: np.ndarray, kind: NumericKind = PLAIN):
        """The operator norm induced by :meth:`vector`."""
        raise NotImplementedError

    def __call__(self, v: np.ndarray, kind: NumericKind = PLAIN):
        if np.ndim(v) == 2:
            return self.matrix(v, kind)
        return self.vector(v, kind)


class InfinityNorm(Norm):
    """max |v_i| for vectors, max absolute row sum for matrices."""

    def vector(self, v: np.ndarray, kind: NumericKind = PLAIN):
        return kind.max(np.abs(kind.asarray(v)))

    def matrix(self, M: np.ndarray, kind: NumericKind = PLAIN):
        return kind.max(np.abs(kind.asarray(M)).sum(axis=1))

    def __repr__(self):
        return "InfinityNorm()"


class WeightedEll1Norm(Norm):
    r"""
    Weighted :math:`\ell^1` norm :math:`\|v\| = \sum_i \omega_i |v_i|`.

    The induced matrix norm is :math:`\max_j \omega_j^{-1} \sum_i \omega_i |M_{ij}|`.

    Use :meth:`symmetric` for the coefficients of a symmetric (cosine) series, where
    index k > 0 stands for both modes k and -k.
    """

    def __init__(self, weights) -> None:
        self.weights = np.asarray(weights, dtype=np.float64)
        if self.weights.ndim != 1 or np.any(self.weights <= 0):
            raise ValueError("weights must be a 1d array of positive numbers")

    @classmethod
    def symmetric(cls, n: int) -> "WeightedEll1Norm":
        """omega_0 = 1 and omega_k = 2 for k = 1..n-1."""
        weights = np.full(n, 2.0)
        weights[0] = 1.0
        return cls(weights)

    @classmethod
    def uniform(cls, n: int) -> "WeightedEll1Norm":
        """The plain l1 norm."""
        return cls(np.ones(n))

    def is_convolution_algebra(self) -> bool:
        """
        True if ||x * y|| <= ||x|| ||y|| for the symmetric convolution of :func:`~radiipoly.model.symmetric_convolution`.

        Index k > 0 carries both modes k and -k, so each of them has weight omega_k / 2. The truncated
        convolution is submultiplicative when nu_{|k + j|} <= nu_{|k|} nu_{|j|} for all |k|, |j|, |k + j| <= N,
        with nu_0 = omega_0 and nu_k = omega_k / 2.
        """
        N = self.weights.shape[0] - 1
        nu = self.weights / 2
        nu[0] = self.weights[0]

        k = np.arange(-N, N + 1)
        total = np.abs(k[:, np.newaxis] + k[np.newaxis, :])
        inside = total <= N

        lhs = nu[np.minimum(total, N)]
        rhs = nu[np.abs(k)][:, np.newaxis] * nu[np.abs(k)][np.newaxis, :]
        return bool(np.all(lhs[inside] <= rhs[inside]))

    def check_dimension(self, n: int):
        if n != self.weights.shape[0]:
            raise InputShapeError(f"norm has {self.weights.shape[0]} weights, got dimension {n}")

    def vector(self, v: np.ndarray, kind: NumericKind = PLAIN):
        v = kind.asarray(v)
        self.check_dimension(v.shape[0])
        return np.sum(np.abs(v) * kind.asarray(self.weights))

    def matrix(self, M: np.ndarray, kind: NumericKind = PLAIN):
        M = kind.asarray(M)
        self.check_dimension(M.shape[0])
        w = kind.asarray(self.weights)
        column_sums = (np.abs(M) * w[:, np.newaxis]).sum(axis=0)
        return kind.max(column_sums / w)

    def __repr__(self):
        return f"WeightedEll1Norm(n={self.weights.shape[0]})"
