"""
Equal-width density histograms.

Bins span the data's own [min, max] range.  Densities are normalised
so that ``sum(density * width) == 1`` and the bars can be drawn on the
same axis as a probability density function.
"""

import math
import numbers
import warnings
from typing import Iterable, Tuple

import numpy as np

from .constants import BIN_COUNT
from .data_model import HistogramBin
from .errors import EmptyInputError, InvalidParameterError


_MAX_FLOAT = float(np.finfo(float).max)
# Narrower bins would give densities above the largest double.
_MIN_WIDTH = 1.0 / _MAX_FLOAT


def validate_bin_count(bin_count) -> int:
    if isinstance(bin_count, bool) or not isinstance(bin_count, numbers.Integral):
        raise InvalidParameterError(
            f"bin count must be an integer, got {bin_count!r}"
        )
    if bin_count < 1:
        raise InvalidParameterError(
            f"bin count must be at least 1, got {bin_count}"
        )
    return int(bin_count)


def build_histogram(data: Iterable[float],
                    bin_count: int = BIN_COUNT) -> Tuple[HistogramBin, ...]:
    """Bin *data* into *bin_count* equal-width bins with density heights.

    Parameters
    ----------
    data : iterable of float
        Sample values.  Non-finite values are dropped with a warning.
    bin_count : int
        Number of bins (>= 1).

    Returns
    -------
    tuple of HistogramBin
        Exactly *bin_count* bins in ascending order.

    Raises
    ------
    EmptyInputError
        If *data* holds no finite values.
    InvalidParameterError
        If *bin_count* is not a positive integer.

    Notes
    -----
    A value ``v`` lands in bin ``floor((v - min) / width)``, clamped to
    ``bin_count - 1`` so that ``v == max`` falls in the last bin.

    When every value is identical the range is zero, and a range of a
    few subnormals gives bins too narrow for a finite density.  The bins
    are then given unit width starting at ``value - 0.5``: bin 0 is centred on
    the value and carries all the mass (density 1.0), the rest are
    empty.
    """
    bin_count = validate_bin_count(bin_count)
    if not isinstance(data, np.ndarray):
        data = list(data)
    values = np.asarray(data, dtype=float).ravel()
    if values.size == 0:
        raise EmptyInputError("cannot build a histogram of zero samples")

    finite = np.isfinite(values)
    if not finite.all():
        n_dropped = int(values.size - finite.sum())
        warnings.warn(
            f"Dropped {n_dropped} non-finite value(s) of {values.size} "
            f"before binning.",
            RuntimeWarning,
            stacklevel=2,
        )
        values = values[finite]
        if values.size == 0:
            raise EmptyInputError("no finite samples left to bin")

    total = values.size
    lo = float(values.min())
    hi = float(values.max())

    span = hi - lo
    if math.isfinite(span):
        width = span / bin_count
    else:
        # hi - lo overflows.  Split it per bin, capped for bin_count == 1.
        width = min(hi / bin_count - lo / bin_count, _MAX_FLOAT)

    if width < _MIN_WIDTH:
        width = 1.0
        origin = lo - 0.5
        counts = np.zeros(bin_count, dtype=int)
        counts[0] = total
    else:
        origin = lo
        if math.isfinite(span):
            offsets = (values - lo) / width
        else:
            with np.errstate(over='ignore'):
                offsets = (values / bin_count - lo / bin_count) / width * bin_count
        index = np.clip(np.floor(offsets), 0, bin_count - 1).astype(int)
        counts = np.bincount(index, minlength=bin_count)

    densities = counts / total / width
    return tuple(
        HistogramBin(
            center=origin + (i + 0.5) * width,
            density=float(densities[i]),
            count=int(counts[i]),
            width=width,
        )
        for i in range(bin_count)
    )
