"""Tests for the Monte Carlo engine and ``recompute``."""

import numpy as np
import pytest
from scipy.stats import chi2, kstest, norm
from scipy.stats import t as t_dist

from sampling_sim.data_model import DistributionSpec
from sampling_sim.diagnostics import chi_square_grid, total_variation_distance
from sampling_sim.errors import EmptyInputError, InvalidParameterError
from sampling_sim.simulation import recompute, run_simulation, validate_spec


def _area(bins):
    return sum(b.density * b.width for b in bins)


def test_recompute_shape(seeded_source):
    result = recompute(DistributionSpec(), 5, source=seeded_source(), simulation_count=2000)
    assert result.n == 5
    assert result.dof == 4
    assert result.spec == DistributionSpec()
    assert len(result.t_histogram) == 20
    assert len(result.chi_square_histogram) == 20
    assert result.statistics.simulation_count == 2000
    assert _area(result.t_histogram) == pytest.approx(1.0, abs=1e-9)
    assert _area(result.chi_square_histogram) == pytest.approx(1.0, abs=1e-9)


def test_default_simulation_count(seeded_source):
    result = recompute("N(0,1)", 3, source=seeded_source())
    assert result.statistics.simulation_count == 10000
    assert sum(b.count for b in result.chi_square_histogram) == 10000


def test_recompute_accepts_text(seeded_source):
    result = recompute("N(3,4)", 4, source=seeded_source(), simulation_count=200)
    assert result.spec == DistributionSpec(mean=3.0, variance=4.0)


def test_recompute_falls_back_on_bad_text(seeded_source):
    with pytest.warns(UserWarning):
        result = recompute("not a distribution", 4, source=seeded_source(),
                           simulation_count=200)
    assert result.spec == DistributionSpec()


def test_recompute_falls_back_on_non_text_spec(seeded_source):
    with pytest.warns(UserWarning):
        result = recompute(3.0, 5, source=seeded_source(), simulation_count=200)
    assert result.spec == DistributionSpec()
    assert result.n == 5


def test_statistics_share_each_trial(scripted_sampler):
    # Trials [1, 3] and [0, 4]: x_bar = 2 both, s2 = 2 and 8.
    sampler = scripted_sampler([1.0, 3.0, 0.0, 4.0])
    stats = run_simulation(DistributionSpec(), 2, 2, sampler=sampler)
    np.testing.assert_allclose(stats.t_stats, [2.0, 1.0])
    np.testing.assert_allclose(stats.chi_square_stats, [2.0, 8.0])


def test_statistics_use_population_parameters(scripted_sampler):
    sampler = scripted_sampler([1.0, 3.0, 3.0])
    stats = run_simulation(DistributionSpec(mean=1.0, variance=4.0), 3, 1, sampler=sampler)
    # x_bar = 7/3, s2 = 4/3
    expected_t = (7.0 / 3.0 - 1.0) / np.sqrt((4.0 / 3.0) / 3)
    assert stats.t_stats[0] == pytest.approx(expected_t)
    assert stats.chi_square_stats[0] == pytest.approx(2 * (4.0 / 3.0) / 4.0)


def test_zero_variance_trial_gives_non_finite_t(scripted_source):
    stats = run_simulation(DistributionSpec(), 3, 4, source=scripted_source([0.5, 0.5]))
    assert not np.isfinite(stats.t_stats).any()
    np.testing.assert_array_equal(stats.chi_square_stats, 0.0)


@pytest.mark.filterwarnings("ignore::RuntimeWarning")
def test_all_degenerate_trials_cannot_be_binned(scripted_source):
    with pytest.raises(EmptyInputError):
        recompute(DistributionSpec(), 3, source=scripted_source([0.5, 0.5]),
                  simulation_count=5)


def test_results_are_read_only(seeded_source):
    stats = run_simulation(DistributionSpec(), 3, 10, source=seeded_source())
    with pytest.raises(ValueError):
        stats.t_stats[0] = 0.0
    with pytest.raises(ValueError):
        stats.chi_square_stats[0] = 0.0


def test_same_seed_same_result(seeded_source):
    a = recompute(DistributionSpec(), 4, source=seeded_source(1), simulation_count=500)
    b = recompute(DistributionSpec(), 4, source=seeded_source(1), simulation_count=500)
    np.testing.assert_array_equal(a.statistics.t_stats, b.statistics.t_stats)
    assert a.t_histogram == b.t_histogram
    assert a.chi_square_histogram == b.chi_square_histogram


def test_different_seeds_differ(seeded_source):
    a = run_simulation(DistributionSpec(), 4, 100, source=seeded_source(1))
    b = run_simulation(DistributionSpec(), 4, 100, source=seeded_source(2))
    assert not np.array_equal(a.t_stats, b.t_stats)


@pytest.mark.parametrize("spec", [
    DistributionSpec(mean=0.0, variance=0.0),
    DistributionSpec(mean=0.0, variance=-1.0),
    DistributionSpec(mean=0.0, variance=float('inf')),
    DistributionSpec(mean=float('nan'), variance=1.0),
])
def test_invalid_population_is_rejected(spec, exploding_source):
    with pytest.raises(InvalidParameterError):
        validate_spec(spec)
    with pytest.raises(InvalidParameterError):
        recompute(spec, 5, source=exploding_source)


@pytest.mark.parametrize("n", [1, 0, -2, 2.5])
def test_invalid_sample_size_is_rejected(n, exploding_source):
    with pytest.raises(InvalidParameterError):
        recompute(DistributionSpec(), n, source=exploding_source)


@pytest.mark.parametrize("count", [0, -10, 1.5])
def test_invalid_simulation_count_is_rejected(count, exploding_source):
    with pytest.raises(InvalidParameterError):
        run_simulation(DistributionSpec(), 5, count, source=exploding_source)


def test_invalid_bin_count_is_rejected_before_simulating(exploding_source):
    with pytest.raises(InvalidParameterError):
        recompute(DistributionSpec(), 5, source=exploding_source, bin_count=0)


def test_moments_of_statistics(seeded_source):
    result = recompute("N(5,9)", 10, source=seeded_source(), simulation_count=4000)
    stats = result.statistics
    # E[t] = 0 with Var = 9/7; E[chi2] = 9 with Var = 18.
    assert stats.t_stats.mean() == pytest.approx(0.0, abs=0.1)
    assert stats.chi_square_stats.mean() == pytest.approx(9.0, abs=0.3)


def test_t_histogram_converges_to_normal(seeded_source):
    small = run_simulation(DistributionSpec(), 3, source=seeded_source(101))
    large = run_simulation(DistributionSpec(), 50, source=seeded_source(202))
    tv_small = total_variation_distance(small.t_stats, norm.cdf)
    tv_large = total_variation_distance(large.t_stats, norm.cdf)
    assert tv_small > 0.06
    assert tv_large < 0.05
    assert tv_large < tv_small

    ks_small = kstest(small.t_stats, norm.cdf).statistic
    ks_large = kstest(large.t_stats, norm.cdf).statistic
    assert ks_small > 0.05
    assert ks_large < 0.03


def test_t_statistics_follow_t_distribution(seeded_source):
    stats = run_simulation(DistributionSpec(mean=-2.0, variance=0.5), 3,
                           source=seeded_source(303))
    tv = total_variation_distance(stats.t_stats, lambda x: t_dist.cdf(x, 2))
    assert tv < 0.05


def test_chi_square_statistics_follow_chi_square(seeded_source):
    n = 8
    stats = run_simulation(DistributionSpec(mean=10.0, variance=25.0), n,
                           source=seeded_source(404))
    tv = total_variation_distance(
        stats.chi_square_stats, lambda x: chi2.cdf(x, n - 1), chi_square_grid(n - 1),
    )
    assert tv < 0.05
