"""Tests for the Lanczos Gamma function."""

import math

import numpy as np
import pytest
from scipy import special

from sampling_sim.errors import DomainError
from sampling_sim.special_functions import gamma, log_gamma


def test_gamma_one_is_exactly_one():
    assert gamma(1) == 1.0


def test_gamma_half_is_sqrt_pi():
    assert gamma(0.5) == pytest.approx(math.sqrt(math.pi), abs=1e-9)


@pytest.mark.parametrize("z", [1.0, 1.3, 2.5, 3.7, 5.5, 7.25, 9.9, 10.0])
def test_functional_equation(z):
    assert gamma(z + 1) == pytest.approx(z * gamma(z), rel=1e-10)


def test_positive_integers_are_factorials():
    for k in range(1, 20):
        assert gamma(k) == float(math.factorial(k - 1))


@pytest.mark.parametrize("k", [0, 1, 2, 5, 12, 24])
def test_half_integers_match_closed_form(k):
    # Γ(k + 1/2) = (2k)! / (4^k k!) * sqrt(pi)
    expected = math.factorial(2 * k) / (4 ** k * math.factorial(k)) * math.sqrt(math.pi)
    assert gamma(k + 0.5) == pytest.approx(expected, rel=1e-10)


def test_relative_accuracy_against_math_gamma():
    for z in np.linspace(0.5, 170.0, 301):
        assert gamma(z) == pytest.approx(math.gamma(z), rel=1e-10), z


def test_agrees_with_scipy_gamma():
    zs = np.array([0.5, 0.75, 1.5, 3.3, 17.2, 42.01, 99.9, 150.5])
    expected = special.gamma(zs)
    for z, value in zip(zs, expected):
        assert gamma(z) == pytest.approx(value, rel=1e-10)


def test_near_overflow_stays_finite():
    value = gamma(171.5)
    assert math.isfinite(value)
    assert value == pytest.approx(math.gamma(171.5), rel=1e-10)


@pytest.mark.parametrize("z", [172.0, 200.0, 1e6, math.inf])
def test_overflow_returns_inf(z):
    assert gamma(z) == math.inf


@pytest.mark.parametrize("z", [0.25, 0.1, -0.5, -1.5, -2.5, -7.3])
def test_reflection_below_one_half(z):
    assert gamma(z) == pytest.approx(math.gamma(z), rel=1e-10)


def test_gamma_minus_half():
    assert gamma(-0.5) == pytest.approx(-2.0 * math.sqrt(math.pi), rel=1e-12)


@pytest.mark.parametrize("z", [0, 0.0, -1, -2.0, -3, -100])
def test_poles_raise_domain_error(z):
    with pytest.raises(DomainError):
        gamma(z)


@pytest.mark.parametrize("z", [math.nan, -math.inf])
def test_undefined_arguments_raise_domain_error(z):
    with pytest.raises(DomainError):
        gamma(z)


def test_domain_error_is_a_value_error():
    with pytest.raises(ValueError):
        gamma(-4)


def test_gamma_is_deterministic():
    assert gamma(3.14159) == gamma(3.14159)


def test_log_gamma_matches_math_lgamma():
    for z in np.linspace(0.5, 500.0, 401):
        assert log_gamma(z) == pytest.approx(math.lgamma(z), rel=1e-10, abs=1e-12), z


@pytest.mark.parametrize("z", [0.3, 0.01, -0.5, -1.5, -6.7])
def test_log_gamma_reflection(z):
    assert log_gamma(z) == pytest.approx(math.lgamma(z), rel=1e-10, abs=1e-12)


def test_log_gamma_is_finite_where_gamma_overflows():
    assert gamma(1000.0) == math.inf
    assert log_gamma(1000.0) == pytest.approx(math.lgamma(1000.0), rel=1e-12)


def test_log_gamma_rejects_poles():
    with pytest.raises(DomainError):
        log_gamma(-2)
