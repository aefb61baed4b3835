import pytest

from radiipoly.errors import NoRootsError
from radiipoly.numerical import interval, upper
from radiipoly.proof import RadiiPolynomial, certify

# bounds of the classical Lorenz equilibrium C+ in the infinity norm
Y0 = 1.8625740988093325e-5
Z0 = 0.0
Z2 = 0.23570174301438956


def test_roots():
    r1, r2 = RadiiPolynomial(Y0, Z0, Z2).roots()
    assert r1 == pytest.approx(1.8625822758042162e-5, rel=1e-9)
    assert r2 == pytest.approx(4.2426313741772415, rel=1e-12)


def test_small_root_without_cancellation():
    p = RadiiPolynomial(1e-20, 0.0, 1.0)
    r1, r2 = p.roots()
    assert r1 == pytest.approx(1e-20, rel=1e-12)
    assert r2 == pytest.approx(1.0)


def test_certify_lorenz_bounds():
    result = certify(Y0, Z0, Z2)
    assert result.success
    assert bool(result)
    assert result.r0 == pytest.approx(2.1213, rel=1e-4)
    assert upper(result.p_r0) < 0
    assert result.r1 < result.r0 < result.r2
    assert result.reason is None
    assert result.statement().startswith("CERTIFIED")


def test_certify_with_interval_bounds():
    result = certify(interval(Y0, Y0 * 1.001), interval(0, 1e-15), interval(Z2))
    assert result.success
    assert result.y0 >= Y0 * 1.001
    assert result.z0 >= 1e-15


def test_zero_discriminant():
    # p(r) = (r / 2 - 1)^2 touches zero at r = 2 and is never negative
    result = certify(1.0, 0.0, 0.25)
    assert not result.success
    assert result.r1 == result.r2 == 2.0
    assert "coincide" in result.reason


def test_negative_discriminant():
    with pytest.raises(NoRootsError):
        RadiiPolynomial(1.0, 0.0, 1.0).roots()

    result = certify(1.0, 0.0, 1.0)
    assert not result.success
    assert result.r0 is None
    assert "no real roots" in result.reason
    assert result.statement().startswith("NOT CERTIFIED")


def test_z0_not_below_one():
    result = certify(1e-10, 1.0, 1.0)
    assert not result.success
    assert "Z0" in result.reason

    assert not certify(1e-10, 1.5, 1.0).success


def test_explicit_r0():
    assert certify(Y0, Z0, Z2, r0=1e-3).success
    assert certify(Y0, Z0, Z2, r0=1e-3).r0 == 1e-3

    # below r1, above r2
    assert not certify(Y0, Z0, Z2, r0=1e-6).success
    assert not certify(Y0, Z0, Z2, r0=5.0).success

    with pytest.raises(ValueError):
        certify(Y0, Z0, Z2, r0=0)
    with pytest.raises(ValueError):
        certify(Y0, Z0, Z2, r0=-1.0)


def test_uniqueness_radius():
    result = certify(Y0, Z0, Z2, r0=1e-4, uniqueness_radius=4.0)
    assert result.success
    assert result.uniqueness_radius == 4.0
    assert "unique within" in result.statement()
    assert upper(result.p_r0) < 0

    # must lie in (r0, r2)
    assert not certify(Y0, Z0, Z2, r0=1e-4, uniqueness_radius=5.0).success
    assert not certify(Y0, Z0, Z2, r0=1e-4, uniqueness_radius=1e-5).success


def test_z2_must_be_positive():
    with pytest.raises(ValueError):
        RadiiPolynomial(Y0, Z0, 0.0)
    with pytest.raises(ValueError):
        certify(Y0, Z0, -1.0)


def test_polynomial_evaluation():
    p = RadiiPolynomial(1.0, 0.5, 2.0)
    assert p(0) == 1.0
    assert p(1) == 2.0 - 0.5 + 1.0

    enclosure = RadiiPolynomial.enclose(1, 1.0, 0.5, 2.0)
    assert 2.5 in enclosure


def test_result_table():
    text = str(certify(Y0, Z0, Z2))
    for row in ["Y0", "Z0", "Z2", "r1", "r2", "r0", "p(r0)"]:
        assert row in text
    assert "CERTIFIED" in text

    assert "p(r0)" in str(certify(1.0, 0.0, 1.0))
