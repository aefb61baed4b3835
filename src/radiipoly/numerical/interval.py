"""
Thin layer over :mod:`mpmath.iv`, the outward-rounded interval arithmetic used for all rigorous computations.

Arithmetic on intervals is plain operator overloading (``+ - * / ** abs``).
This module only adds the conversions and comparisons the proofs need.

Note:
    The default ``mpmath.iv`` context (53 bits) is used read-only. Nothing here changes ``iv.prec``.
"""

import math
from fractions import Fraction
from numbers import Integral, Real
from typing import Any, Iterable

from mpmath import iv

Interval = Any  # mpmath interval type, ``iv.mpf``


def is_interval(value) -> bool:
    return isinstance(value, iv.mpf)


def interval(lo, hi=None) -> Interval:
    """
    Constructs a closed interval.

    Args:
        lo: the lower endpoint, or the single point of a degenerate interval if hi is None.
            Fractions are enclosed rigorously (e.g ``interval(Fraction(8, 3))``).
        hi: the upper endpoint.

    Returns:
        an ``iv.mpf`` interval containing [lo, hi].
    """
    if hi is None:
        return _point(lo)
    lo, hi = _point(lo), _point(hi)
    return iv.mpf([lo.a, hi.b])


def _point(value) -> Interval:
    if is_interval(value):
        return value
    if isinstance(value, Fraction):
        return iv.mpf(value.numerator) / value.denominator
    if isinstance(value, bool):
        raise TypeError("booleans are not numbers here")
    if isinstance(value, Integral):
        return iv.mpf(int(value))
    if isinstance(value, Real):
        return iv.mpf(float(value))
    raise TypeError(f"Can't convert {type(value).__name__} to an interval")


def upper(x: Interval) -> float:
    """
    Float upper bound of x.

    The endpoint is rounded up if it can't be represented as a float,
    so ``upper(x) >= t`` for every t in x.
    """
    hi = float(x.b)
    if iv.mpf(hi) < x.b:
        hi = math.nextafter(hi, math.inf)
    return hi


def lower(x: Interval) -> float:
    """Float lower bound of x, rounded down if needed."""
    lo = float(x.a)
    if iv.mpf(lo) > x.a:
        lo = math.nextafter(lo, -math.inf)
    return lo


def interval_max(values: Iterable[Interval]) -> Interval:
    """
    Enclosure of max(t_1, ..., t_n) over all choices t_i in values[i], i.e [max lo_i, max hi_i].
    """
    values = list(values)
    if len(values) == 0:
        raise ValueError("max of an empty sequence")
    lo = max(lower(v) for v in values)
    hi = max(upper(v) for v in values)
    return iv.mpf([lo, hi])


def hull(*values: Interval) -> Interval:
    """Smallest interval containing all values."""
    lo = min(lower(v) for v in values)
    hi = max(upper(v) for v in values)
    return iv.mpf([lo, hi])


def strictly_less(a: Interval, b: Interval) -> bool:
    """
    True only if every point of a is smaller than every point of b.

    Overlapping intervals give False ("unknown" is never reported as true).
    """
    return (_point(a) < _point(b)) is True


def format_interval(x: Interval | None, digits: int = 10) -> str:
    if x is None:
        return "-"
    return f"[{lower(x):.{digits}e}, {upper(x):.{digits}e}]"
