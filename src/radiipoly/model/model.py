"""
Base class for all vector fields.

A VectorField evaluates f(x, params) and its Jacobian Df(x, params) under either numeric kind,
and knows the problem-specific Z2 bound of the radii polynomial.
"""

from abc import ABC, abstractmethod
from dataclasses import fields, is_dataclass
from typing import Any

import numpy as np

from radiipoly.errors import InputShapeError
from radiipoly.numerical.kind import NumericKind, PLAIN
from radiipoly.numerical.norms import Norm


class VectorField(ABC):
    """
    Base class for all vector fields.

    Subclasses implement :meth:`_f`, :meth:`_df` and :meth:`z2_bound`, which receive
    validated arrays and parameters already lifted to the requested kind.
    """

    #: the dataclass holding the parameters of the field (e.g LorenzParameters)
    parameters_class: Any = None

    def __init__(self, dimension: int) -> None:
        if dimension < 1:
            raise ValueError(f"dimension must be positive, got {dimension}")
        self._dimension = dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def f(self, x, params, kind: NumericKind = PLAIN) -> np.ndarray:
        """
        Evaluates the vector field.

        Args:
            x: vector of length self.dimension.
            params: a parameters dataclass or a tuple of the same length.
            kind (NumericKind, optional): PLAIN or INTERVAL. Defaults to PLAIN.
        """
        x = self.check_vector(x, kind)
        return self._f(x, self.lift_parameters(params, kind), kind)

    def df(self, x, params, kind: NumericKind = PLAIN) -> np.ndarray:
        """
        Evaluates the Jacobian of the vector field, a (dimension x dimension) matrix.
        """
        x = self.check_vector(x, kind)
        return self._df(x, self.lift_parameters(params, kind), kind)

    @abstractmethod
    def _f(self, x: np.ndarray, params: tuple, kind: NumericKind) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def _df(self, x: np.ndarray, params: tuple, kind: NumericKind) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def z2_bound(self, A: np.ndarray, params, norm: Norm, kind: NumericKind = PLAIN):
        """
        Bound on ||A (Df(x) - Df(y))|| / ||x - y||, the Z2 coefficient of the radii polynomial.
        """
        raise NotImplementedError

    @abstractmethod
    def default_norm(self) -> Norm:
        raise NotImplementedError

    @abstractmethod
    def check_norm(self, norm: Norm) -> Norm:
        """
        Returns norm if :meth:`z2_bound` is a valid bound in it.

        Raises:
            ValueError: Z2 can't be bounded this way in norm. Y0, Z0 and Z2 must share one norm.
        """
        raise NotImplementedError

    def parameters(self, params):
        """
        Coerces params to self.parameters_class.

        Raises:
            InputShapeError: a tuple / list of the wrong length.
        """
        if isinstance(params, self.parameters_class):
            return params
        if is_dataclass(params):
            raise TypeError(f"expected {self.parameters_class.__name__}, got {type(params).__name__}")

        params = tuple(np.atleast_1d(np.asarray(params, dtype=object)))
        n_expected = len(fields(self.parameters_class))
        if len(params) != n_expected:
            raise InputShapeError(
                f"{type(self).__name__} takes {n_expected} parameters, got {len(params)}"
            )
        return self.parameters_class(*params)

    def lift_parameters(self, params, kind: NumericKind = PLAIN) -> tuple:
        params = self.parameters(params)
        return tuple(kind.lift(getattr(params, field.name)) for field in fields(params))

    def check_vector(self, x, kind: NumericKind = PLAIN) -> np.ndarray:
        x = kind.asarray(x)
        if x.shape != (self.dimension,):
            raise InputShapeError(f"expected a vector of shape ({self.dimension},), got {x.shape}")
        return x

    def check_matrix(self, M, kind: NumericKind = PLAIN) -> np.ndarray:
        M = kind.asarray(M)
        if M.shape != (self.dimension, self.dimension):
            raise InputShapeError(
                f"expected a matrix of shape ({self.dimension}, {self.dimension}), got {M.shape}"
            )
        return M

    def __repr__(self):
        return f"{type(self).__name__}(dimension={self.dimension})"
