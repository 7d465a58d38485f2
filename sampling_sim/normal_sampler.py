"""
Uniform sources and the Box–Muller normal sampler.

``RandomSource`` is the seam where randomness enters the engine: any
object with a ``uniform()`` method returning floats in (0, 1] can drive
a simulation, which is how the tests inject scripted draws.
``NumpyRandomSource`` is the production implementation backed by a
``numpy.random.Generator``.
"""

import math
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from .constants import UNIFORM_BLOCK_SIZE
from .errors import DomainError


class RandomSource(ABC):
    """Supplier of independent uniform draws in (0, 1].

    Exact zero must never be returned: the Box–Muller transform takes
    ``log(u1)``.
    """

    @abstractmethod
    def uniform(self) -> float:
        """Return one uniform draw in (0, 1]."""


class NumpyRandomSource(RandomSource):
    """``RandomSource`` backed by a numpy ``Generator``.

    Uniforms are drawn in blocks of *block_size* and served one at a
    time.  ``Generator.random`` samples [0, 1), so each value is
    returned as ``1 - u``, which lies in (0, 1].

    Parameters
    ----------
    generator : numpy.random.Generator, optional
        Bit source.  A fresh ``numpy.random.default_rng()`` when omitted.
    block_size : int
        Number of uniforms drawn per refill.
    """

    def __init__(self, generator: Optional[np.random.Generator] = None,
                 block_size: int = UNIFORM_BLOCK_SIZE):
        self._rng = generator if generator is not None else np.random.default_rng()
        self._block_size = max(1, int(block_size))
        self._block = []
        self._pos = 0

    def uniform(self) -> float:
        if self._pos >= len(self._block):
            self._block = (1.0 - self._rng.random(self._block_size)).tolist()
            self._pos = 0
        value = self._block[self._pos]
        self._pos += 1
        return value


def box_muller(u1: float, u2: float) -> Tuple[float, float]:
    """Map two uniforms to a pair of independent standard normals.

    Returns
    -------
    (z_cos, z_sin) : tuple of float

    Raises
    ------
    DomainError
        If *u1* is outside (0, 1].
    """
    if not 0.0 < u1 <= 1.0:
        raise DomainError(f"Box–Muller needs u1 in (0, 1], got {u1!r}")
    radius = math.sqrt(-2.0 * math.log(u1))
    angle = 2.0 * math.pi * u2
    return radius * math.cos(angle), radius * math.sin(angle)


class NormalSampler:
    """Draws N(mean, variance) values from a ``RandomSource``.

    Every call consumes two uniform draws and returns the cosine branch
    of the Box–Muller pair.  With ``reuse_pair=True`` the sine branch is
    kept and returned by the following call instead of drawing again,
    halving uniform consumption.  Each returned value is still a
    standard normal rescaled by the caller's mean and variance.
    """

    def __init__(self, source: RandomSource, reuse_pair: bool = False):
        self._source = source
        self._reuse_pair = reuse_pair
        self._spare = None

    @property
    def source(self) -> RandomSource:
        return self._source

    def standard(self) -> float:
        """Return one N(0, 1) draw."""
        if self._spare is not None:
            z, self._spare = self._spare, None
            return z
        u1 = self._source.uniform()
        u2 = self._source.uniform()
        z, z_sin = box_muller(u1, u2)
        if self._reuse_pair:
            self._spare = z_sin
        return z

    def sample(self, mean: float, variance: float) -> float:
        """Return one N(*mean*, *variance*) draw."""
        return mean + math.sqrt(variance) * self.standard()
