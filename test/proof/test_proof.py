import numpy as np
import pytest

from radiipoly.cache import clear_cache
from radiipoly.errors import ConvergenceError, SingularJacobianError
from radiipoly.model import Lorenz, LorenzParameters
from radiipoly.model.example_models import fisher_approximate_zero, fisher_example, lorenz_example
from radiipoly.numerical import InfinityNorm, WeightedEll1Norm, newton, upper
from radiipoly.proof import RadiiProof, compute_bounds, prove


def test_prove_lorenz():
    model, params, x0 = lorenz_example()
    result = prove(model, params, x0)

    assert result.success
    assert result.y0 < 1e-10
    assert result.z0 < 1e-10
    assert result.r1 < result.r0 < result.r2
    assert upper(result.p_r0) < 0


def test_prove_lorenz_not_rigorous():
    model, params, x0 = lorenz_example()
    assert prove(model, params, x0, rigorous=False).success


def test_radii_proof_lorenz():
    model, params, x0 = lorenz_example()
    proof = RadiiProof(model, params, x0)

    c = np.sqrt(72)
    assert np.allclose(proof.x_bar, [c, c, 27])
    assert np.allclose(proof.A @ model.df(proof.x_bar, params), np.eye(3))
    assert proof.bounds.is_rigorous
    assert proof.success
    assert proof.residual < 1e-10

    report = str(proof)
    assert "Lorenz" in report
    assert "interval arithmetic" in report
    assert "CERTIFIED" in report


def test_radii_proof_phases(capsys):
    model, params, x0 = lorenz_example()
    proof = RadiiProof(model, params, x0, end_phase=2, verbose=True)

    out = capsys.readouterr().out
    assert "1/4" in out and "Skipped.." in out
    assert proof.x_bar is not None and proof.A is not None
    with pytest.raises(AttributeError):
        proof.bounds

    proof.run(start_phase=3, verbose=False)
    assert capsys.readouterr().out == ""
    assert proof.success


def test_radii_proof_silent_by_default(capsys):
    model, params, x0 = lorenz_example()
    RadiiProof(model, params, x0)
    assert capsys.readouterr().out == ""


def test_radii_proof_with_uniqueness_radius():
    model, params, x0 = lorenz_example()
    proof = RadiiProof(model, params, x0, r0=1e-8, uniqueness_radius=1.0)
    assert proof.success
    assert proof.result.r0 == 1e-8
    assert proof.result.uniqueness_radius == 1.0


def test_prove_errors():
    model = Lorenz()
    params = LorenzParameters(sigma=10, rho=28, beta=8 / 3)

    with pytest.raises(SingularJacobianError):
        prove(model, params, np.array([0.0, 0.0, 27.0]))
    with pytest.raises(ConvergenceError):
        prove(model, params, np.array([8.0, 8.0, 26.0]), max_iterations=1)


def assert_quarter_period_steady_state(x_bar):
    # from x0 = [1.0, 0.3, 0, ...] Newton settles on the pi/2-periodic state: only modes 0, 4, 8, ... are excited
    assert x_bar[0] == pytest.approx(0.459, abs=1e-3)
    assert x_bar[4] == pytest.approx(0.334, abs=1e-3)
    off_lattice = np.arange(len(x_bar)) % 4 != 0
    assert np.max(np.abs(x_bar[off_lattice])) < 5e-4


def test_fisher_newton():
    model, params, x0 = fisher_example(lam=50, N=100)
    result = newton(model.f, model.df, x0, params, norm=model.default_norm())

    assert result.iterations <= 100
    assert WeightedEll1Norm.uniform(101).vector(model.f(result.x, params)) < 1e-10
    assert_quarter_period_steady_state(result.x)


def test_fisher_zero_is_cached():
    clear_cache()
    x_bar = fisher_approximate_zero(lam=50, N=100)
    model, params, _ = fisher_example(lam=50, N=100)

    assert x_bar.shape == (101,)
    assert np.array_equal(fisher_approximate_zero(lam=50, N=100), x_bar)
    assert model.default_norm().vector(model.f(x_bar, params)) < 1e-10
    assert_quarter_period_steady_state(x_bar)


def test_prove_fisher():
    model, params, x0 = fisher_example(lam=50, N=100)
    proof = RadiiProof(model, params, x0)

    assert isinstance(proof.norm, WeightedEll1Norm)
    assert_quarter_period_steady_state(proof.x_bar)

    y0, z0, z2 = proof.bounds.upper()
    assert 0 < y0 < 1e-12
    assert 0 < z0 < 1e-11
    assert z2 == pytest.approx(1546.68, rel=1e-5)
    assert z2 == pytest.approx(2 * 50 * proof.norm.matrix(proof.A), rel=1e-9)

    # Y0 and Z0 are rounding noise, so r2 ~ 1 / Z2 and the witness radius is about half of it
    assert proof.success
    assert proof.result.r0 == pytest.approx(1 / (2 * 1546.68), rel=1e-4)


def test_bounds_need_a_norm_matching_z2():
    model, params, x0 = lorenz_example()
    weighted = WeightedEll1Norm([1, 1e-3, 1e-3])
    with pytest.raises(ValueError):
        prove(model, params, x0, norm=weighted)
    with pytest.raises(ValueError):
        RadiiProof(model, params, x0, norm=weighted)
    with pytest.raises(ValueError):
        compute_bounds(model, x0, np.eye(3), params, norm=weighted)

    model, params, x0 = fisher_example(lam=50, N=100)
    for norm in [InfinityNorm(), WeightedEll1Norm.uniform(101)]:
        with pytest.raises(ValueError):
            prove(model, params, x0, norm=norm)
