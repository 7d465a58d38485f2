"""
One trial of the simulation: n normal draws reduced to (x_bar, s2).
"""

import numbers

from .constants import N_ENGINE_MIN
from .data_model import DistributionSpec, Trial
from .errors import InvalidParameterError
from .normal_sampler import NormalSampler


def validate_sample_size(n) -> int:
    """Return *n* as an int, or raise ``InvalidParameterError``.

    The unbiased sample variance divides by ``n - 1``, so ``n >= 2``.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise InvalidParameterError(
            f"sample size must be an integer, got {n!r}"
        )
    n = int(n)
    if n < N_ENGINE_MIN:
        raise InvalidParameterError(
            f"sample size must be at least {N_ENGINE_MIN} for the sample "
            f"variance to be defined, got {n}"
        )
    return n


def generate_trial(n: int, spec: DistributionSpec,
                   sampler: NormalSampler) -> Trial:
    """Draw *n* values from N(spec.mean, spec.variance) and summarise them.

    Parameters
    ----------
    n : int
        Sample size, at least 2.
    spec : DistributionSpec
        Population to draw from.
    sampler : NormalSampler
        Source of normal draws.

    Returns
    -------
    Trial
        Sample mean and unbiased sample variance (divisor ``n - 1``).

    Raises
    ------
    InvalidParameterError
        If ``n < 2``.
    """
    n = validate_sample_size(n)

    # Welford's update: M2 only ever grows, so s2 >= 0 exactly.
    mean = 0.0
    m2 = 0.0
    for k in range(1, n + 1):
        x = sampler.sample(spec.mean, spec.variance)
        delta = x - mean
        mean += delta / k
        m2 += delta * (x - mean)

    return Trial(x_bar=mean, s2=m2 / (n - 1))
