"""
The radii polynomial p(r) = Z2 r^2 - (1 - Z0) r + Y0 and its rigorous sign check.

If p(r0) < 0 for some r0 > 0, then f has a unique zero within distance r0 of x_bar.
"""

import math
from dataclasses import dataclass
from typing import Any

from tabulate import tabulate  # type: ignore

from radiipoly.errors import NoRootsError, ProofFailure
from radiipoly.log import logger
from radiipoly.numerical.interval import (
    format_interval,
    hull,
    interval,
    upper,
)
from radiipoly.numerical.kind import INTERVAL


class RadiiPolynomial:
    """
    p(r) = z2 r^2 - (1 - z0) r + y0, with float (upper bound) coefficients.

    The float coefficients are only used to locate a witness radius,
    the proof itself is :meth:`enclose` with interval coefficients.
    """

    def __init__(self, y0: float, z0: float, z2: float) -> None:
        if z2 < 0:
            raise ValueError(f"Z2 is a norm bound and can't be negative, got {z2}")
        if z2 == 0:
            raise ValueError("Z2 = 0, the radii polynomial must be quadratic")
        self.y0 = float(y0)
        self.z0 = float(z0)
        self.z2 = float(z2)

    @property
    def discriminant(self) -> float:
        return (1 - self.z0) ** 2 - 4 * self.z2 * self.y0

    def roots(self) -> tuple[float, float]:
        """
        The real roots r1 <= r2, between which p is negative.

        Raises:
            NoRootsError: negative discriminant.
        """
        disc = self.discriminant
        if disc < 0:
            raise NoRootsError(f"the radii polynomial has no real roots (discriminant {disc:.6e})")

        b = 1 - self.z0
        sqrt_disc = math.sqrt(disc)
        r2 = (b + sqrt_disc) / (2 * self.z2)

        # r1 r2 = y0 / z2, avoids cancellation in b - sqrt_disc:
        r1 = 2 * self.y0 / (b + sqrt_disc) if b + sqrt_disc != 0 else r2
        return r1, r2

    def __call__(self, r: float) -> float:
        return self.z2 * r**2 - (1 - self.z0) * r + self.y0

    @staticmethod
    def enclose(r, y0, z0, z2):
        """Interval enclosure of p(r). All arguments are lifted to intervals."""
        r, y0, z0, z2 = (interval(v) for v in (r, y0, z0, z2))
        return z2 * r**2 - (1 - z0) * r + y0

    def __repr__(self):
        return f"RadiiPolynomial({self.z2!r} r^2 - (1 - {self.z0!r}) r + {self.y0!r})"


@dataclass(frozen=True)
class ProofResult:
    """
    Outcome of :func:`certify`.

    success means p(r0) < 0 was established in interval arithmetic: f has a zero within r0 of x_bar,
    unique within uniqueness_radius when given (otherwise within r0).
    """

    success: bool
    r0: float | None
    p_r0: Any
    y0: float
    z0: float
    z2: float
    r1: float | None = None
    r2: float | None = None
    uniqueness_radius: float | None = None
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.success

    def statement(self) -> str:
        if not self.success:
            return f"NOT CERTIFIED: {self.reason}"
        if self.uniqueness_radius is not None:
            return (
                f"CERTIFIED: a zero exists within r0 = {self.r0:.6e} of x_bar "
                f"and it is unique within {self.uniqueness_radius:.6e}"
            )
        return f"CERTIFIED: a unique zero exists within r0 = {self.r0:.6e} of x_bar"

    def __str__(self):
        rows = [
            ["Y0", f"{self.y0:.10e}"],
            ["Z0", f"{self.z0:.10e}"],
            ["Z2", f"{self.z2:.10e}"],
            ["r1", "-" if self.r1 is None else f"{self.r1:.10e}"],
            ["r2", "-" if self.r2 is None else f"{self.r2:.10e}"],
            ["r0", "-" if self.r0 is None else f"{self.r0:.10e}"],
            ["p(r0)", format_interval(self.p_r0)],
        ]
        if self.uniqueness_radius is not None:
            rows.append(["uniqueness radius", f"{self.uniqueness_radius:.10e}"])
        return f"{tabulate(rows, tablefmt='simple')}\n\n{self.statement()}"


def certify(y0, z0, z2, r0: float | None = None, uniqueness_radius: float | None = None) -> ProofResult:
    """
    Checks the radii polynomial inequality p(r0) < 0 in interval arithmetic.

    Args:
        y0, z0, z2: the bounds, floats or intervals (see :func:`~radiipoly.proof.compute_bounds`).
            Floats are taken as exact.
        r0 (float | None, optional): witness radius. Defaults to the midpoint of the roots of p.
        uniqueness_radius (float | None, optional): a larger radius r_+, r0 < r_+ < r2, at which
            p is checked as well. Since p is convex, p < 0 on [r0, r_+] and the zero is unique within r_+.

    Returns:
        ProofResult: not certified (rather than an exception) when the bounds don't establish a proof.
    """
    y0_i, z0_i, z2_i = interval(y0), interval(z0), interval(z2)
    y0_u, z0_u, z2_u = upper(y0_i), upper(z0_i), upper(z2_i)

    if r0 is not None and not r0 > 0:
        raise ValueError(f"r0 must be positive, got {r0}")
    if uniqueness_radius is not None and not uniqueness_radius > 0:
        raise ValueError(f"uniqueness_radius must be positive, got {uniqueness_radius}")

    def not_certified(reason: str, **kwargs) -> ProofResult:
        logger.info("not certified: %s", reason)
        return ProofResult(
            success=False, r0=kwargs.pop("r0", r0), p_r0=None, y0=y0_u, z0=z0_u, z2=z2_u, reason=reason, **kwargs
        )

    if not z0_u < 1:
        return not_certified(f"Z0 <= {z0_u:.6e} is not below 1")

    p = RadiiPolynomial(y0_u, z0_u, z2_u)
    try:
        r1, r2 = p.roots()
    except ProofFailure as e:
        return not_certified(str(e))

    if not r1 < r2:
        return not_certified(f"the roots coincide (r1 = r2 = {r1:.6e}), there is no interior radius", r1=r1, r2=r2)

    if r0 is None:
        r0 = (r1 + r2) / 2
    elif not r1 < r0 < r2:
        return not_certified(f"r0 = {r0:.6e} is outside ({r1:.6e}, {r2:.6e})", r1=r1, r2=r2)

    if uniqueness_radius is not None and not r0 < uniqueness_radius < r2:
        return not_certified(
            f"uniqueness radius {uniqueness_radius:.6e} is outside ({r0:.6e}, {r2:.6e})", r0=r0, r1=r1, r2=r2
        )

    p_r0 = RadiiPolynomial.enclose(r0, y0_i, z0_i, z2_i)
    checked = [p_r0]
    if uniqueness_radius is not None:
        checked.append(RadiiPolynomial.enclose(uniqueness_radius, y0_i, z0_i, z2_i))
        p_r0 = hull(*checked)

    success = all(INTERVAL.lt(v, 0) for v in checked)
    result = ProofResult(
        success=success,
        r0=r0,
        p_r0=p_r0,
        y0=y0_u,
        z0=z0_u,
        z2=z2_u,
        r1=r1,
        r2=r2,
        uniqueness_radius=uniqueness_radius,
        reason=None if success else f"p(r0) is not strictly negative, p(r0) in {format_interval(p_r0)}",
    )
    logger.info(result.statement())
    return result
