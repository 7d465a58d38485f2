"""
Theoretical probability densities overlaid on the histograms.

``theoretical_t`` and ``theoretical_chi_square`` take the *sample size*
n and use ``n - 1`` degrees of freedom, matching the statistics the
engine produces.  ``student_t_pdf`` and ``chi_square_pdf`` take the
degrees of freedom directly.

The normalising constants are formed in log space with ``log_gamma``:
Γ((v+1)/2) and Γ(v/2) overflow individually for large v even though
their ratio is modest.
"""

import math

from .errors import InvalidParameterError
from .special_functions import log_gamma


_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)
_LOG_2 = math.log(2.0)


def _check_dof(dof: float) -> float:
    dof = float(dof)
    if not dof > 0 or math.isinf(dof):
        raise InvalidParameterError(
            f"degrees of freedom must be a positive finite number, got {dof!r}"
        )
    return dof


def _dof_from_sample_size(n) -> float:
    if n < 2:
        raise InvalidParameterError(
            f"sample size must be at least 2 (dof = n - 1 >= 1), got {n!r}"
        )
    return float(n - 1)


def standard_normal(x: float) -> float:
    """N(0, 1) density at *x*."""
    return _INV_SQRT_2PI * math.exp(-0.5 * x * x)


def student_t_pdf(x: float, dof: float) -> float:
    """Student's t density with *dof* degrees of freedom at *x*.

    ``Γ((v+1)/2) / (sqrt(v π) Γ(v/2)) * (1 + x²/v) ** (-(v+1)/2)``
    """
    v = _check_dof(dof)
    log_norm = (
        log_gamma((v + 1.0) / 2.0)
        - log_gamma(v / 2.0)
        - 0.5 * math.log(v * math.pi)
    )
    return math.exp(log_norm - (v + 1.0) / 2.0 * math.log1p(x * x / v))


def chi_square_pdf(x: float, dof: float) -> float:
    """Chi-squared density with *dof* degrees of freedom at *x*.

    ``x ** (k/2 - 1) * exp(-x/2) / (2 ** (k/2) Γ(k/2))`` for x > 0.
    The support is (0, inf): the density is 0.0 for x <= 0, including
    x = 0 where ``0 ** (k/2 - 1)`` would be infinite for k < 2.
    """
    k = _check_dof(dof)
    if x <= 0:
        return 0.0
    half_k = k / 2.0
    log_pdf = (
        (half_k - 1.0) * math.log(x)
        - x / 2.0
        - half_k * _LOG_2
        - log_gamma(half_k)
    )
    return math.exp(log_pdf)


def theoretical_t(x: float, n: int) -> float:
    """t(n - 1) density at *x*: reference curve for the sample mean."""
    return student_t_pdf(x, _dof_from_sample_size(n))


def theoretical_chi_square(x: float, n: int) -> float:
    """χ²(n - 1) density at *x*: reference curve for the sample variance."""
    return chi_square_pdf(x, _dof_from_sample_size(n))
