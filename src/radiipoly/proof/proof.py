"""
The full radii polynomial pipeline:

    Newton -> approximate inverse -> Y0, Z0, Z2 -> certification

:func:`prove` runs it in one call, :class:`RadiiProof` runs it in phases and keeps the intermediate results.
"""

import numpy as np

from radiipoly.log import logger
from radiipoly.model import VectorField
from radiipoly.numerical.linalg import approximate_inverse
from radiipoly.numerical.newton import DEFAULT_MAX_ITERATIONS, DEFAULT_TOLERANCE, solve
from radiipoly.numerical.norms import Norm
from radiipoly.proof.bounds import RadiiBounds, compute_bounds, residual_norm
from radiipoly.proof.certify import ProofResult, certify
from radiipoly.utils import cprint, verbosity


def prove(
    model: VectorField,
    params,
    x0,
    norm: Norm | None = None,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
    rigorous: bool = True,
    r0: float | None = None,
    uniqueness_radius: float | None = None,
    max_condition: float | None = None,
) -> ProofResult:
    """
    Proves the existence of a zero of model near x0.

    Args:
        model (VectorField): the vector field.
        params: its parameters.
        x0: initial guess for Newton's method.
        norm (Norm | None, optional): used for Newton's stopping test and all bounds. Defaults to model.default_norm().
        max_iterations (int, optional): Newton iterations. Defaults to 100.
        tolerance (float, optional): Newton tolerance on ||f(x)||. Defaults to 1e-10.
        rigorous (bool, optional): interval bounds. Defaults to True.
        r0 (float | None, optional): witness radius, see :func:`~radiipoly.proof.certify`.
        uniqueness_radius (float | None, optional): see :func:`~radiipoly.proof.certify`.
        max_condition (float | None, optional): see :func:`~radiipoly.numerical.approximate_inverse`.

    Raises:
        InputShapeError, ConvergenceError, SingularJacobianError: the run is broken.
        ValueError: norm is not one the Z2 bound of model holds in.

    Returns:
        ProofResult: certified or not.
    """
    norm = model.check_norm(norm or model.default_norm())
    x_bar = solve(model, x0, params, max_iterations=max_iterations, tolerance=tolerance, norm=norm)
    A = approximate_inverse(model.df(x_bar, params), max_condition=max_condition)
    bounds = compute_bounds(model, x_bar, A, params, norm=norm, rigorous=rigorous)
    return certify(*bounds, r0=r0, uniqueness_radius=uniqueness_radius)


class RadiiProof:

    @verbosity
    def __init__(
        self,
        model: VectorField,
        params,
        x0,
        norm: Norm | None = None,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
        rigorous: bool = True,
        r0: float | None = None,
        uniqueness_radius: float | None = None,
        max_condition: float | None = None,
        end_phase: int = 4,
        verbose: bool = False,
    ):
        r"""A radii polynomial proof, organized in phases whose results are kept as properties.

        Args:
            model (VectorField): the vector field whose zero is proven.
            params: parameters of the vector field, e.g :class:`~radiipoly.model.LorenzParameters`.
            x0: initial guess for Newton's method.
            norm (Norm | None, optional): norm for Newton's stopping test and the bounds. Defaults to model.default_norm().
            max_iterations (int, optional): Newton iterations. Defaults to 100.
            tolerance (float, optional): Newton tolerance. Defaults to 1e-10.
            rigorous (bool, optional): compute the bounds with intervals. Defaults to True.
            r0 (float | None, optional): witness radius. Defaults to the midpoint of the roots.
            uniqueness_radius (float | None, optional): larger radius for the uniqueness claim. Defaults to None.
            max_condition (float | None, optional): largest accepted condition number of Df(x_bar). Defaults to 1 / eps.
            end_phase (int, optional): stop at this phase (inclusive). Defaults to 4.
            verbose (bool, optional): print the phases. Defaults to False.

        Examples:

            >>> model, params, x0 = lorenz_example()
            >>> proof = RadiiProof(model, params, x0, verbose=True)
            >>> proof.success
            True
            >>> print(proof)

        """
        self._model = model
        self._params = model.parameters(params)
        self._x0 = model.check_vector(x0)
        self._norm = model.check_norm(norm or model.default_norm())
        self._max_iterations = max_iterations
        self._tolerance = tolerance
        self._rigorous = rigorous
        self._r0 = r0
        self._uniqueness_radius = uniqueness_radius
        self._max_condition = max_condition

        self.run(end_phase=end_phase, verbose=verbose)

    @verbosity
    def run(
        self,
        start_phase: int = 1,
        end_phase: int = 4,
        verbose: bool = True,
    ):
        """Run the proof.

            - 1: Newton's method
            - 2: approximate inverse
            - 3: Y0, Z0, Z2 bounds
            - 4: certification

        Args:
            start_phase (int, optional): run phases from here (inclusive). Defaults to 1.
            end_phase (int, optional): stop at this phase (inclusive). Defaults to 4.
        """
        phases = [
            ("1/4 Computing an approximate zero", self._solve, "_x_bar"),
            ("2/4 Inverting the Jacobian", self._invert, "_A"),
            ("3/4 Bounding Y0, Z0, Z2", self._bound, "_bounds"),
            ("4/4 Certifying", self._certify, "_result"),
        ]

        for phase_num, (description, method, attr_name) in enumerate(phases, start=1):
            skip = (phase_num < start_phase) or (phase_num > end_phase)
            with proof_phase(description, skip):
                if not skip:
                    setattr(self, attr_name, method())

        if start_phase <= 4 <= end_phase:
            cprint(self.result.statement(), bold=True, color="green" if self.success else "red")

    @property
    def model(self) -> VectorField:
        return self._model

    @property
    def params(self):
        return self._params

    @property
    def norm(self) -> Norm:
        return self._norm

    @property
    def x_bar(self) -> np.ndarray:
        return self._x_bar

    @property
    def A(self) -> np.ndarray:
        return self._A

    @property
    def bounds(self) -> RadiiBounds:
        return self._bounds

    @property
    def result(self) -> ProofResult:
        return self._result

    @property
    def success(self) -> bool:
        return self.result.success

    @property
    def residual(self) -> float:
        """||f(x_bar)|| in the proof norm."""
        return residual_norm(self.model, self.x_bar, self.params, self.norm)

    def _solve(self) -> np.ndarray:
        return solve(
            self.model,
            self._x0,
            self.params,
            max_iterations=self._max_iterations,
            tolerance=self._tolerance,
            norm=self.norm,
        )

    def _invert(self) -> np.ndarray:
        return approximate_inverse(self.model.df(self.x_bar, self.params), max_condition=self._max_condition)

    def _bound(self) -> RadiiBounds:
        return compute_bounds(self.model, self.x_bar, self.A, self.params, norm=self.norm, rigorous=self._rigorous)

    def _certify(self) -> ProofResult:
        result = certify(*self.bounds, r0=self._r0, uniqueness_radius=self._uniqueness_radius)
        logger.info("%r with %s: %s", self.model, self.params, result.statement())
        return result

    def __str__(self):
        mode = "interval arithmetic" if self._rigorous else "floating point (not rigorous)"
        return f"""
Radii polynomial proof:

model = {self.model!r}
params = {self.params}
norm = {self.norm!r}
bounds computed in {mode}
||f(x_bar)|| = {self.residual:.3e}

{self.result}
"""


class proof_phase:
    """Displays messages of progress through the phases of a proof."""

    def __init__(self, message: str, skip: bool):
        """Init the context manager.

        Args:
            message (str): the message for the phase (e.g "1/4 Computing an approximate zero")
            skip (bool): the phase is skipped
        """
        self.message = message
        self.skip = skip

    def __enter__(self):
        cprint(self.message, new_line=False, color="blue")

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is not None:
            cprint("[X]", color="red")
        elif self.skip:
            cprint("Skipped..", color="yellow")
        else:
            cprint("[V]", color="green")
