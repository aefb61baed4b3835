import numpy as np
import pytest

from radiipoly.model.example_models import lorenz_example
from radiipoly.numerical import INTERVAL, InfinityNorm, approximate_inverse, is_interval, lower, solve, upper
from radiipoly.proof import RadiiBounds, compute_bounds, residual_norm


@pytest.fixture(scope="module")
def lorenz_zero():
    model, params, x0 = lorenz_example()
    x_bar = solve(model, x0, params)
    A = approximate_inverse(model.df(x_bar, params))
    return model, params, x_bar, A


def test_rigorous_bounds_are_intervals(lorenz_zero):
    model, params, x_bar, A = lorenz_zero
    bounds = compute_bounds(model, x_bar, A, params)

    assert bounds.is_rigorous
    assert all(is_interval(b) for b in bounds)

    y0, z0, z2 = bounds.upper()
    assert 0 <= y0 < 1e-10
    assert 0 <= z0 < 1e-10
    assert 0 < z2 < 10


def test_rigorous_bounds_enclose_plain_bounds(lorenz_zero):
    model, params, x_bar, A = lorenz_zero
    plain = compute_bounds(model, x_bar, A, params, rigorous=False)
    rigorous = compute_bounds(model, x_bar, A, params, rigorous=True)

    assert not plain.is_rigorous
    assert plain.upper() == plain

    # Z2 has no cancellation, the enclosure is tight
    assert lower(rigorous.z2) <= plain.z2 <= upper(rigorous.z2)

    # Y0 and Z0 are rounding noise, only compare magnitudes
    assert plain.y0 <= upper(rigorous.y0) + 1e-14
    assert plain.z0 <= upper(rigorous.z0) + 1e-14


def test_z2_matches_lorenz_formula(lorenz_zero):
    model, params, x_bar, A = lorenz_zero
    bounds = compute_bounds(model, x_bar, A, params, rigorous=False)
    assert bounds.z2 == pytest.approx(2 * np.max(np.abs(A[:, 1]) + np.abs(A[:, 2])))


def test_y0_grows_with_the_defect(lorenz_zero):
    model, params, x_bar, _ = lorenz_zero

    previous = -1.0
    for shift in [0.0, 1e-6, 1e-3, 1e-1]:
        x = x_bar + shift
        A = approximate_inverse(model.df(x, params))
        y0 = compute_bounds(model, x, A, params, rigorous=False).y0
        assert y0 >= previous
        previous = y0

    assert previous > 1e-3


def test_bad_inverse_gives_large_z0(lorenz_zero):
    model, params, x_bar, _ = lorenz_zero
    bounds = compute_bounds(model, x_bar, np.zeros((3, 3)), params).upper()
    assert bounds.z0 >= 1


def test_bounds_conversions():
    plain = RadiiBounds(1e-5, 0.5, 2.0)
    assert plain.upper() == (1e-5, 0.5, 2.0)
    intervals = plain.intervals()
    assert all(is_interval(b) for b in intervals)
    assert intervals.is_rigorous
    assert intervals.upper() == plain


def test_residual_norm(lorenz_zero):
    model, params, x_bar, _ = lorenz_zero
    assert residual_norm(model, x_bar, params) < 1e-10
    assert residual_norm(model, np.zeros(3), params, InfinityNorm()) == 0.0
    assert residual_norm(model, np.array([1.0, 0.0, 0.0]), params) == pytest.approx(28.0)
