"""
Data model for the Sampling Distribution Simulator.

Immutable dataclasses describing one simulation run: the population
parameters, the per-trial statistics, the histogram bins, and the
final result handed to the chart renderers.  Every record is built once
by the engine and never mutated; arrays carried inside records are
flagged read-only.
"""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .constants import DEFAULT_MEAN, DEFAULT_VARIANCE


@dataclass(frozen=True)
class DistributionSpec:
    """Normal population N(mean, variance).

    Parameters
    ----------
    mean : float
        Population mean mu.
    variance : float
        Population variance sigma^2.  Must be strictly positive; the
        engine raises ``InvalidParameterError`` otherwise.
    """
    mean: float = DEFAULT_MEAN
    variance: float = DEFAULT_VARIANCE

    @property
    def std(self) -> float:
        return math.sqrt(self.variance)

    @property
    def label(self) -> str:
        """Canonical text form, e.g. ``"N(0,1)"`` or ``"N(2.5,4)"``."""
        return f"N({self.mean:g},{self.variance:g})"


@dataclass(frozen=True)
class Trial:
    """Sample mean and unbiased sample variance of one batch of n draws."""
    x_bar: float
    s2: float


@dataclass(frozen=True)
class StatisticSample:
    """Derived statistics of every trial in one simulation run.

    ``t_stats[i]`` and ``chi_square_stats[i]`` come from the same trial,
    so the two sequences are correlated element-wise.

    Parameters
    ----------
    spec : DistributionSpec
        Population the trials were drawn from.
    n : int
        Sample size of each trial.
    t_stats : numpy.ndarray
        ``(x_bar - mean) / sqrt(s2 / n)`` per trial (read-only).
    chi_square_stats : numpy.ndarray
        ``(n - 1) * s2 / variance`` per trial (read-only).
    """
    spec: DistributionSpec
    n: int
    t_stats: np.ndarray
    chi_square_stats: np.ndarray

    @property
    def simulation_count(self) -> int:
        return int(self.t_stats.size)


@dataclass(frozen=True)
class HistogramBin:
    """One bin of a density histogram.

    Parameters
    ----------
    center : float
        Bin midpoint.
    density : float
        ``count / (total * width)``; the histogram integrates to 1.
    count : int
        Number of samples that fell in this bin.
    width : float
        Bin width (uniform within one histogram).
    """
    center: float
    density: float
    count: int
    width: float

    @property
    def left(self) -> float:
        return self.center - self.width / 2.0

    @property
    def right(self) -> float:
        return self.center + self.width / 2.0


@dataclass(frozen=True)
class SimulationResult:
    """Binned output of one ``recompute`` call.

    Parameters
    ----------
    spec : DistributionSpec
    n : int
    t_histogram : tuple of HistogramBin
        Density histogram of the t-statistics.
    chi_square_histogram : tuple of HistogramBin
        Density histogram of the chi-squared statistics.
    statistics : StatisticSample
        Raw statistics the histograms were built from.
    """
    spec: DistributionSpec
    n: int
    t_histogram: Tuple[HistogramBin, ...]
    chi_square_histogram: Tuple[HistogramBin, ...]
    statistics: StatisticSample

    @property
    def dof(self) -> int:
        """Degrees of freedom of both reference distributions (n - 1)."""
        return self.n - 1
