"""
Monte Carlo engine for the Sampling Distribution Simulator.

``run_simulation`` repeats ``generate_trial`` and converts every trial
into a t-statistic and a chi-squared statistic.  ``recompute`` is the
single entry point used by the GUI: it parses the distribution, runs
the simulation, and bins both statistics into a ``SimulationResult``.
Nothing here keeps state between calls; a new parameter set means a
new ``recompute`` call and a brand-new result.
"""

import math
import numbers
from typing import Optional, Union

import numpy as np

from .constants import BIN_COUNT, SIMULATION_COUNT
from .data_model import DistributionSpec, SimulationResult, StatisticSample
from .distribution_parser import parse_distribution
from .errors import InvalidParameterError
from .histogram import build_histogram, validate_bin_count
from .normal_sampler import NormalSampler, NumpyRandomSource, RandomSource
from .trial_generator import generate_trial, validate_sample_size


def validate_spec(spec: DistributionSpec) -> DistributionSpec:
    """Raise ``InvalidParameterError`` unless *spec* has finite mean and variance > 0."""
    if not math.isfinite(spec.mean):
        raise InvalidParameterError(f"mean must be finite, got {spec.mean!r}")
    if not (math.isfinite(spec.variance) and spec.variance > 0):
        raise InvalidParameterError(
            f"variance must be a positive finite number, got {spec.variance!r}"
        )
    return spec


def _validate_simulation_count(simulation_count) -> int:
    if (isinstance(simulation_count, bool)
            or not isinstance(simulation_count, numbers.Integral)
            or simulation_count < 1):
        raise InvalidParameterError(
            f"simulation count must be a positive integer, got {simulation_count!r}"
        )
    return int(simulation_count)


def _read_only(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values


def run_simulation(
    spec: DistributionSpec,
    n: int,
    simulation_count: int = SIMULATION_COUNT,
    *,
    source: Optional[RandomSource] = None,
    sampler: Optional[NormalSampler] = None,
) -> StatisticSample:
    """Simulate *simulation_count* samples of size *n* from *spec*.

    Parameters
    ----------
    spec : DistributionSpec
        Normal population N(mean, variance).
    n : int
        Sample size per trial (>= 2).
    simulation_count : int
        Number of trials.
    source : RandomSource, optional
        Uniform source.  A fresh ``NumpyRandomSource`` when omitted.
    sampler : NormalSampler, optional
        Pre-built sampler; takes precedence over *source*.

    Returns
    -------
    StatisticSample
        ``t = (x_bar - mean) / sqrt(s2 / n)`` and
        ``chi2 = (n - 1) * s2 / variance`` per trial.  Both come from the
        same trial.  A trial with ``s2 == 0`` gives a non-finite t.

    Raises
    ------
    InvalidParameterError
        If ``n < 2``, ``variance <= 0`` or ``simulation_count < 1``.
    """
    validate_spec(spec)
    n = validate_sample_size(n)
    simulation_count = _validate_simulation_count(simulation_count)
    if sampler is None:
        sampler = NormalSampler(source if source is not None else NumpyRandomSource())

    x_bars = np.empty(simulation_count)
    variances = np.empty(simulation_count)
    for i in range(simulation_count):
        trial = generate_trial(n, spec, sampler)
        x_bars[i] = trial.x_bar
        variances[i] = trial.s2

    with np.errstate(divide='ignore', invalid='ignore'):
        t_stats = (x_bars - spec.mean) / np.sqrt(variances / n)
    chi_square_stats = (n - 1) * variances / spec.variance

    return StatisticSample(
        spec=spec,
        n=n,
        t_stats=_read_only(t_stats),
        chi_square_stats=_read_only(chi_square_stats),
    )


def recompute(
    spec: Union[DistributionSpec, str, None],
    n: int,
    *,
    source: Optional[RandomSource] = None,
    simulation_count: int = SIMULATION_COUNT,
    bin_count: int = BIN_COUNT,
) -> SimulationResult:
    """Run a full simulation and bin both statistics.

    Parameters
    ----------
    spec : DistributionSpec or str or None
        Population, or its text form ``"N(mean,variance)"``.  Text is
        parsed with the N(0,1) fallback of ``parse_distribution``.
    n : int
        Sample size per trial (>= 2).
    source : RandomSource, optional
        Uniform source for this run.
    simulation_count, bin_count : int
        Fixed configuration; exposed for tests.

    Returns
    -------
    SimulationResult
    """
    bin_count = validate_bin_count(bin_count)
    if not isinstance(spec, DistributionSpec):
        spec = parse_distribution(spec)

    statistics = run_simulation(spec, n, simulation_count, source=source)
    return SimulationResult(
        spec=spec,
        n=statistics.n,
        t_histogram=build_histogram(statistics.t_stats, bin_count),
        chi_square_histogram=build_histogram(statistics.chi_square_stats, bin_count),
        statistics=statistics,
    )
