"""Tests for the chart renderers and PNG export."""

import os

import pytest
from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from sampling_sim.chart_sampling import (
    render_chi_square_distribution, render_t_distribution,
)
from sampling_sim.constants import DARK_COLORS, PLOT_STYLE_LIGHT
from sampling_sim.export import (
    _apply_light_theme, _restore_figure_state, _save_figure_state,
    export_all_charts, export_png,
)
from sampling_sim.simulation import recompute


@pytest.fixture
def result(seeded_source):
    return recompute("N(2,3)", 10, source=seeded_source(8), simulation_count=1000)


def test_t_chart(result):
    fig = Figure(figsize=(6, 4))
    render_t_distribution(fig, result)
    (ax,) = fig.get_axes()
    assert len(ax.patches) == 20
    assert [line.get_label() for line in ax.get_lines()] == ["t(9)", "N(0,1)"]
    assert "t(9)" in ax.get_title()
    assert "N(2,3), n = 10" in ax.get_title()
    assert ax.get_legend() is not None
    assert len(ax.texts) == 1
    assert "TV vs N(0,1)" in ax.texts[0].get_text()


def test_chi_square_chart(result):
    fig = Figure(figsize=(6, 4))
    render_chi_square_distribution(fig, result)
    (ax,) = fig.get_axes()
    assert len(ax.patches) == 20
    (curve,) = ax.get_lines()
    assert curve.get_label() == "χ²(9)"
    assert min(curve.get_xdata()) >= 0.0
    assert "χ²(9)" in ax.get_title()


def test_rerender_replaces_previous_chart(result):
    fig = Figure()
    render_t_distribution(fig, result)
    render_t_distribution(fig, result)
    assert len(fig.get_axes()) == 1
    assert len(fig.get_axes()[0].patches) == 20


def test_export_text_colour(result):
    fig = Figure()
    render_t_distribution(fig, result, for_export=True)
    assert to_hex(fig.get_axes()[0].texts[0].get_color()) == "#333333"


def test_light_theme_round_trip(result):
    fig = Figure()
    render_t_distribution(fig, result)
    text = fig.get_axes()[0].texts[0]
    assert to_hex(text.get_color()) == DARK_COLORS['fg']

    state = _save_figure_state(fig)
    _apply_light_theme(fig)
    assert to_hex(text.get_color()) == PLOT_STYLE_LIGHT['text.color']
    assert to_hex(fig.get_facecolor()) == "#ffffff"

    _restore_figure_state(fig, state)
    assert to_hex(text.get_color()) == DARK_COLORS['fg']


def test_export_png_restores_figure(result, tmp_path):
    fig = Figure(figsize=(8, 4), facecolor=DARK_COLORS['bg_alt'])
    render_t_distribution(fig, result)
    path = tmp_path / "t.png"
    export_png(fig, str(path), dpi=50, width_inches=4.0)
    assert path.stat().st_size > 0
    assert tuple(fig.get_size_inches()) == (8.0, 4.0)
    assert to_hex(fig.get_facecolor()) == DARK_COLORS['bg_alt']


def test_export_all_charts(result, tmp_path):
    t_fig, chi_fig = Figure(), Figure()
    render_t_distribution(t_fig, result)
    render_chi_square_distribution(chi_fig, result)
    paths = export_all_charts(
        {"n10 sample mean": t_fig, "n10/variance": chi_fig},
        str(tmp_path / "out"), dpi=50, width_inches=3.0,
    )
    assert [os.path.basename(p) for p in paths] == [
        "n10_sample_mean.png", "n10_variance.png",
    ]
    assert all(os.path.exists(p) for p in paths)
