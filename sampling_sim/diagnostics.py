"""
Goodness-of-fit diagnostics: simulated statistics vs. theory.

Summarises how closely one run's t-statistics and chi-squared
statistics follow t(n-1) and chi^2(n-1): sample moments next to the
theoretical ones, a Kolmogorov–Smirnov test against each reference
CDF, and a binned total variation distance.

The total variation distance is measured on a *fixed* grid rather than
on the display histogram.  The display bins follow the data range, and
for small n a handful of extreme t values stretch them so wide that
nearly all of the mass shares one bin and the histogram hides the
heavy tails.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

import numpy as np
from scipy.stats import chi2, kstest, norm
from scipy.stats import t as t_dist

from .constants import TV_GRID_CELLS, TV_GRID_HALF_WIDTH
from .data_model import StatisticSample
from .errors import EmptyInputError, InvalidParameterError


@dataclass(frozen=True)
class StatisticFit:
    """Fit of one simulated statistic against its reference distribution.

    Parameters
    ----------
    reference : str
        Label of the reference distribution, e.g. ``"t(9)"``.
    n_used : int
        Number of finite values that entered the comparison.
    sample_mean, sample_variance : float
        Moments of the simulated values.
    theory_mean, theory_variance : float
        Moments of the reference distribution (``nan`` where undefined,
        ``inf`` where infinite).
    ks_statistic, ks_pvalue : float
        Kolmogorov–Smirnov test against the reference CDF.
    tv_distance : float
        Fixed-grid total variation distance to the reference.
    """
    reference: str
    n_used: int
    sample_mean: float
    sample_variance: float
    theory_mean: float
    theory_variance: float
    ks_statistic: float
    ks_pvalue: float
    tv_distance: float


@dataclass(frozen=True)
class FitSummary:
    """Diagnostics for one ``StatisticSample``.

    ``tv_t_vs_normal`` measures how far the t-statistics still are from
    N(0, 1); it shrinks toward zero as n grows.
    """
    dof: int
    t_fit: StatisticFit
    chi_square_fit: StatisticFit
    tv_t_vs_normal: float


def _finite(values) -> np.ndarray:
    values = np.asarray(values, dtype=float).ravel()
    values = values[np.isfinite(values)]
    if values.size == 0:
        raise EmptyInputError("no finite values to compare")
    return values


def symmetric_grid(half_width: float = TV_GRID_HALF_WIDTH,
                   cells: int = TV_GRID_CELLS) -> np.ndarray:
    """Cell edges covering ``[-half_width, half_width]``."""
    return np.linspace(-half_width, half_width, cells + 1)


def chi_square_grid(dof: int, cells: int = TV_GRID_CELLS) -> np.ndarray:
    """Cell edges covering the bulk of chi^2(dof): ``[0, k + 6 sqrt(2k)]``."""
    upper = dof + 6.0 * np.sqrt(2.0 * dof)
    return np.linspace(0.0, upper, cells + 1)


def total_variation_distance(
    values: Sequence[float],
    cdf: Callable[[np.ndarray], np.ndarray],
    edges: Optional[Sequence[float]] = None,
) -> float:
    """Binned total variation distance between *values* and a reference CDF.

    The real line is split into the cells given by *edges* plus one
    tail cell on each side.  The result is half the L1 distance between
    the empirical and reference cell probabilities, so it lies in [0, 1].

    Parameters
    ----------
    values : sequence of float
        Simulated values; non-finite entries are ignored.
    cdf : callable
        Vectorised reference CDF, e.g. ``scipy.stats.norm.cdf``.
    edges : sequence of float, optional
        Strictly increasing cell edges.  Defaults to ``symmetric_grid()``.
    """
    values = _finite(values)
    edges = symmetric_grid() if edges is None else np.asarray(edges, dtype=float)
    if edges.ndim != 1 or edges.size < 2 or np.any(np.diff(edges) <= 0):
        raise InvalidParameterError("edges must be a strictly increasing sequence")

    counts, _ = np.histogram(values, bins=edges)
    below = np.count_nonzero(values < edges[0])
    above = np.count_nonzero(values > edges[-1])
    observed = np.concatenate(([below], counts, [above])) / values.size

    cdf_at_edges = np.asarray(cdf(edges), dtype=float)
    expected = np.concatenate((
        [cdf_at_edges[0]],
        np.diff(cdf_at_edges),
        [1.0 - cdf_at_edges[-1]],
    ))
    return float(0.5 * np.abs(observed - expected).sum())


def t_moments(dof: float) -> Tuple[float, float]:
    """Mean and variance of Student's t(dof)."""
    mean = 0.0 if dof > 1 else np.nan
    if dof > 2:
        variance = dof / (dof - 2.0)
    elif dof > 1:
        variance = np.inf
    else:
        variance = np.nan
    return mean, variance


def chi_square_moments(dof: float) -> Tuple[float, float]:
    """Mean and variance of chi^2(dof)."""
    return float(dof), 2.0 * dof


def _fit(values: np.ndarray, reference: str, dist, dof: int,
         moments, edges: np.ndarray) -> StatisticFit:
    ks = kstest(values, dist.cdf, args=(dof,))
    theory_mean, theory_variance = moments
    return StatisticFit(
        reference=reference,
        n_used=int(values.size),
        sample_mean=float(np.mean(values)),
        sample_variance=float(np.var(values, ddof=1)) if values.size > 1 else np.nan,
        theory_mean=float(theory_mean),
        theory_variance=float(theory_variance),
        ks_statistic=float(ks.statistic),
        ks_pvalue=float(ks.pvalue),
        tv_distance=total_variation_distance(
            values, lambda x: dist.cdf(x, dof), edges,
        ),
    )


def summarize_fit(statistics: StatisticSample) -> FitSummary:
    """Compare a simulation run with t(n-1) and chi^2(n-1).

    Parameters
    ----------
    statistics : StatisticSample

    Returns
    -------
    FitSummary

    Raises
    ------
    EmptyInputError
        If either statistic has no finite values.
    """
    dof = statistics.n - 1
    t_values = _finite(statistics.t_stats)
    chi_values = _finite(statistics.chi_square_stats)

    t_fit = _fit(t_values, f"t({dof})", t_dist, dof,
                 t_moments(dof), symmetric_grid())
    chi_fit = _fit(chi_values, f"χ²({dof})", chi2, dof,
                   chi_square_moments(dof), chi_square_grid(dof))

    return FitSummary(
        dof=dof,
        t_fit=t_fit,
        chi_square_fit=chi_fit,
        tv_t_vs_normal=total_variation_distance(t_values, norm.cdf),
    )
