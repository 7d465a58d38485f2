"""Shared fixtures for the simulator tests."""

import itertools

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from sampling_sim.normal_sampler import NumpyRandomSource, RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays a fixed list of uniforms, cycling when exhausted."""

    def __init__(self, values):
        self._values = list(values)
        self._cycle = itertools.cycle(self._values)
        self.calls = 0

    def uniform(self) -> float:
        self.calls += 1
        return next(self._cycle)


class ScriptedSampler:
    """Stands in for ``NormalSampler``: returns fixed values in order."""

    def __init__(self, values):
        self._values = iter(values)
        self.requests = []

    def sample(self, mean, variance):
        self.requests.append((mean, variance))
        return next(self._values)


class ExplodingSource(RandomSource):
    """Fails the test if the engine draws anything."""

    def uniform(self) -> float:
        raise AssertionError("random source should not have been used")


@pytest.fixture
def scripted_source():
    return ScriptedRandomSource


@pytest.fixture
def scripted_sampler():
    return ScriptedSampler


@pytest.fixture
def exploding_source():
    return ExplodingSource()


@pytest.fixture
def seeded_source():
    """Factory for reproducible numpy-backed sources."""
    def make(seed=20261018):
        return NumpyRandomSource(np.random.default_rng(seed))
    return make
