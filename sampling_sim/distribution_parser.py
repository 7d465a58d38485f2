"""
Distribution-string parser for the Sampling Distribution Simulator.

Turns free-text input of the form ``N(<mean>,<variance>)`` into a
``DistributionSpec``.  The text field is edited keystroke by keystroke,
so the parser never raises: anything it cannot use (no match,
non-numeric tokens, inf/nan, variance <= 0) falls back to the standard
normal N(0,1) with a ``UserWarning``.

Accepted forms::

    N(0,1)   N(-2.5, 4)   N( 1e3 , 0.25 )   "  N(3,9)  "
"""

import math
import re
import warnings
from typing import Optional

from .constants import DEFAULT_MEAN, DEFAULT_VARIANCE
from .data_model import DistributionSpec


_DISTRIBUTION_RE = re.compile(
    r"\s*N\(\s*(?P<mean>[^,()\s]+)\s*,\s*(?P<variance>[^,()\s]+)\s*\)\s*"
)


def standard_normal_spec() -> DistributionSpec:
    """The fallback population N(0,1)."""
    return DistributionSpec(mean=DEFAULT_MEAN, variance=DEFAULT_VARIANCE)


def _finite_float(token: str) -> float:
    """Parse *token* as a finite float.

    Raises ``ValueError`` for non-numeric strings and for inf/nan,
    which ``float()`` would otherwise accept.
    """
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {token!r}")
    return value


def parse_distribution(text: Optional[str]) -> DistributionSpec:
    """Parse ``N(<mean>,<variance>)`` into a ``DistributionSpec``.

    Parameters
    ----------
    text : str or None
        User-entered distribution text.

    Returns
    -------
    DistributionSpec
        The parsed population, or N(0,1) if *text* is empty, not a string,
        malformed, or describes a non-positive variance.
    """
    if text is None:
        return standard_normal_spec()
    if not isinstance(text, str):
        warnings.warn(
            f"Distribution must be text like N(0,1), got {type(text).__name__} "
            f"{text!r}. Using N(0,1).",
            stacklevel=2,
        )
        return standard_normal_spec()
    if not text.strip():
        return standard_normal_spec()

    match = _DISTRIBUTION_RE.fullmatch(text)
    if match is None:
        warnings.warn(
            f"Unrecognised distribution {text.strip()!r}; expected "
            f"N(<mean>,<variance>). Using N(0,1).",
            stacklevel=2,
        )
        return standard_normal_spec()

    try:
        mean = _finite_float(match.group('mean'))
        variance = _finite_float(match.group('variance'))
    except ValueError as exc:
        warnings.warn(
            f"Invalid number in distribution {text.strip()!r} ({exc}). "
            f"Using N(0,1).",
            stacklevel=2,
        )
        return standard_normal_spec()

    if variance <= 0:
        warnings.warn(
            f"Variance must be positive, got {variance:g} in "
            f"{text.strip()!r}. Using N(0,1).",
            stacklevel=2,
        )
        return standard_normal_spec()

    return DistributionSpec(mean=mean, variance=variance)
