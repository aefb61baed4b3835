"""
Numeric kinds: the two code paths of a proof.

    - :data:`PLAIN` computes with float64 numpy arrays. Used for Newton's method,
      the approximate inverse, and anything that only needs to be accurate.
    - :data:`INTERVAL` computes with numpy object arrays of ``mpmath.iv`` intervals.
      Used for the bounds that must be rigorous.

Evaluators are written once using ordinary operators and receive the kind as an argument.
Values only cross between kinds through :meth:`NumericKind.lift` (point -> kind)
and :meth:`NumericKind.upper` (kind -> float upper bound).

Warning:
    For the interval kind keep numpy arrays on the left of binary operators
    (``x * lam`` rather than ``lam * x``), ``mpmath`` intervals don't defer to numpy arrays.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable

import numpy as np

from radiipoly.numerical.interval import (
    interval,
    interval_max,
    is_interval,
    strictly_less,
    upper,
)


class NumericKind(ABC):
    """Capabilities shared by plain floats and intervals."""

    name: str = ""
    dtype: Any = None

    @abstractmethod
    def lift(self, value) -> Any:
        """Converts a point value (int, float, Fraction) to a scalar of this kind."""
        raise NotImplementedError

    @abstractmethod
    def upper(self, value) -> float:
        """A float that bounds value from above."""
        raise NotImplementedError

    @abstractmethod
    def max(self, values: Iterable) -> Any:
        raise NotImplementedError

    @abstractmethod
    def lt(self, a, b) -> bool:
        """Certain strict comparison a < b."""
        raise NotImplementedError

    def asarray(self, values) -> np.ndarray:
        """Lifts every entry of values (any shape) to this kind."""
        values = np.asarray(values, dtype=object)
        out = np.empty(values.shape, dtype=self.dtype)
        for idx, v in np.ndenumerate(values):
            out[idx] = self.lift(v)
        return out

    def zeros(self, shape) -> np.ndarray:
        return np.full(shape, self.lift(0), dtype=self.dtype)

    def eye(self, n: int) -> np.ndarray:
        out = self.zeros((n, n))
        for i in range(n):
            out[i, i] = self.lift(1)
        return out

    def __repr__(self):
        return f"NumericKind({self.name})"


class PlainKind(NumericKind):
    name = "plain"
    dtype = np.float64

    def lift(self, value) -> float:
        if is_interval(value):
            raise TypeError("intervals can't be lifted to plain floats, use INTERVAL.upper()")
        return float(value)

    def asarray(self, values) -> np.ndarray:
        values = np.asarray(values)
        if values.dtype == object:
            return super().asarray(values)
        return values.astype(np.float64)

    def upper(self, value) -> float:
        return float(value)

    def max(self, values: Iterable) -> float:
        return float(np.max(np.asarray(list(values), dtype=np.float64)))

    def lt(self, a, b) -> bool:
        return bool(a < b)


class IntervalKind(NumericKind):
    name = "interval"
    dtype = object

    def lift(self, value):
        if isinstance(value, (tuple, list)):
            return interval(*value)
        return interval(value)

    def upper(self, value) -> float:
        return upper(self.lift(value))

    def max(self, values: Iterable):
        return interval_max(values)

    def lt(self, a, b) -> bool:
        return strictly_less(a, b)


PLAIN = PlainKind()
INTERVAL = IntervalKind()


def kind_of(value) -> NumericKind:
    """INTERVAL if value (a scalar or an array) holds intervals, otherwise PLAIN."""
    if isinstance(value, np.ndarray):
        if value.dtype == object and value.size > 0:
            return INTERVAL if is_interval(value.flat[0]) else PLAIN
        return PLAIN
    return INTERVAL if is_interval(value) else PLAIN
