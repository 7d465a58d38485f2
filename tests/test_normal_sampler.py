"""Tests for the uniform sources and the Box–Muller sampler."""

import math

import numpy as np
import pytest

from sampling_sim.errors import DomainError
from sampling_sim.normal_sampler import (
    NormalSampler, NumpyRandomSource, RandomSource, box_muller,
)


def test_half_half_gives_known_value(scripted_source):
    sampler = NormalSampler(scripted_source([0.5, 0.5]))
    expected = math.sqrt(-2 * math.log(0.5)) * math.cos(math.pi)
    assert sampler.sample(0.0, 1.0) == expected
    assert expected == pytest.approx(-1.1774100225154747)


def test_unit_first_draw_gives_zero(scripted_source):
    sampler = NormalSampler(scripted_source([1.0, 0.3]))
    assert sampler.standard() == 0.0


def test_mean_and_variance_rescale_standard_draw(scripted_source):
    z = NormalSampler(scripted_source([0.25, 0.1])).standard()
    sampler = NormalSampler(scripted_source([0.25, 0.1]))
    assert sampler.sample(3.0, 4.0) == pytest.approx(3.0 + 2.0 * z)


def test_each_call_consumes_two_uniforms(scripted_source):
    source = scripted_source([0.4, 0.7, 0.9, 0.2])
    sampler = NormalSampler(source)
    for _ in range(5):
        sampler.sample(0.0, 1.0)
    assert source.calls == 10


def test_reuse_pair_returns_sine_branch_next(scripted_source):
    source = scripted_source([0.3, 0.6])
    z_cos, z_sin = box_muller(0.3, 0.6)
    sampler = NormalSampler(source, reuse_pair=True)
    assert sampler.standard() == z_cos
    assert sampler.standard() == z_sin
    assert source.calls == 2


def test_reuse_pair_halves_consumption(scripted_source):
    source = scripted_source([0.4, 0.7])
    sampler = NormalSampler(source, reuse_pair=True)
    for _ in range(10):
        sampler.standard()
    assert source.calls == 10


@pytest.mark.parametrize("u1", [0.0, -0.1, 1.5, math.nan])
def test_box_muller_rejects_u1_outside_unit_interval(u1):
    with pytest.raises(DomainError):
        box_muller(u1, 0.5)


def test_sampler_propagates_zero_draw(scripted_source):
    sampler = NormalSampler(scripted_source([0.0, 0.5]))
    with pytest.raises(DomainError):
        sampler.standard()


def test_box_muller_pair_lies_on_circle():
    z_cos, z_sin = box_muller(0.2, 0.37)
    assert math.hypot(z_cos, z_sin) == pytest.approx(math.sqrt(-2 * math.log(0.2)))


def test_base_source_is_abstract():
    with pytest.raises(TypeError):
        RandomSource()


def test_source_without_uniform_cannot_be_built():
    class Incomplete(RandomSource):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_numpy_source_values_in_half_open_unit_interval():
    source = NumpyRandomSource(np.random.default_rng(3), block_size=64)
    draws = np.array([source.uniform() for _ in range(1000)])
    assert np.all(draws > 0.0)
    assert np.all(draws <= 1.0)


def test_numpy_source_refills_blocks_in_stream_order():
    source = NumpyRandomSource(np.random.default_rng(7), block_size=4)
    draws = [source.uniform() for _ in range(10)]
    expected = (1.0 - np.random.default_rng(7).random(12))[:10]
    np.testing.assert_array_equal(draws, expected)


def test_numpy_source_is_reproducible_for_a_seed():
    a = NumpyRandomSource(np.random.default_rng(11))
    b = NumpyRandomSource(np.random.default_rng(11))
    assert [a.uniform() for _ in range(50)] == [b.uniform() for _ in range(50)]


@pytest.mark.parametrize("reuse_pair", [False, True])
def test_sample_moments(reuse_pair):
    sampler = NormalSampler(
        NumpyRandomSource(np.random.default_rng(5)), reuse_pair=reuse_pair,
    )
    draws = np.array([sampler.sample(2.0, 9.0) for _ in range(20000)])
    # Standard errors: 3/sqrt(20000) ~ 0.021 for the mean.
    assert draws.mean() == pytest.approx(2.0, abs=0.1)
    assert draws.var(ddof=1) == pytest.approx(9.0, rel=0.05)
