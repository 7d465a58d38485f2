"""
Sampling-distribution charts for the Sampling Distribution Simulator.

Two renderers, one per statistic:

- ``render_t_distribution``: density histogram of the t-statistics with
  the t(n-1) and N(0,1) curves overlaid.
- ``render_chi_square_distribution``: density histogram of the
  chi-squared statistics with the chi^2(n-1) curve overlaid.

Both draw bars at the bin centres returned by the engine and evaluate
the theoretical densities on a dense grid spanning the histogram.  A
statistics box in the corner compares sample and theoretical moments.
"""

import numpy as np
from matplotlib.figure import Figure

from .constants import (
    CHART_PALETTE, CURVE_POINTS, DARK_COLORS,
    EXPORT_TEXT_COLOR, EXPORT_BG_COLOR,
)
from .data_model import SimulationResult
from .densities import chi_square_pdf, standard_normal, student_t_pdf
from .diagnostics import FitSummary, StatisticFit, summarize_fit
from .errors import EmptyInputError


def _curve_grid(bins, *, lower_bound=None) -> np.ndarray:
    lo = bins[0].left
    hi = bins[-1].right
    if lower_bound is not None:
        lo = max(lo, lower_bound)
    return np.linspace(lo, hi, CURVE_POINTS)


def _draw_bars(ax, bins, color: str, label: str) -> None:
    ax.bar(
        [b.center for b in bins],
        [b.density for b in bins],
        width=bins[0].width,
        color=color,
        edgecolor=CHART_PALETTE['bar_edge'],
        linewidth=0.5,
        alpha=0.85,
        zorder=3,
        label=label,
    )


def _format_moment(value: float) -> str:
    if np.isnan(value):
        return "undef."
    if np.isinf(value):
        return "∞"
    return f"{value:.3f}"


def _stats_text(fit: StatisticFit, simulation_count: int) -> str:
    return (
        f"Trials: {simulation_count}\n"
        f"Mean: {fit.sample_mean:.3f} (theory {_format_moment(fit.theory_mean)})\n"
        f"Var:  {fit.sample_variance:.3f} (theory {_format_moment(fit.theory_variance)})\n"
        f"KS vs {fit.reference}: D={fit.ks_statistic:.4f}, p={fit.ks_pvalue:.3f}"
    )


def _draw_stats_box(ax, text: str, for_export: bool) -> None:
    text_color = EXPORT_TEXT_COLOR if for_export else DARK_COLORS['fg']
    box_color = EXPORT_BG_COLOR if for_export else DARK_COLORS['bg_widget']
    ax.text(
        0.98, 0.95, text,
        transform=ax.transAxes, ha='right', va='top',
        fontsize=6.5, family='monospace',
        color=text_color,
        bbox=dict(
            boxstyle='round,pad=0.4',
            facecolor=box_color,
            edgecolor='#999999',
            alpha=0.9,
        ),
    )


def _safe_summary(result: SimulationResult):
    try:
        return summarize_fit(result.statistics)
    except EmptyInputError:
        return None


def render_t_distribution(
    fig: Figure,
    result: SimulationResult,
    *,
    for_export: bool = False,
    summary: FitSummary = None,
) -> None:
    """Render the sample-mean (t-statistic) histogram on *fig*.

    Parameters
    ----------
    fig : matplotlib.figure.Figure
        Figure to draw on (will be cleared).
    result : SimulationResult
        Output of ``recompute``.
    for_export : bool
        If ``True``, use light-theme colours for the statistics box.
    summary : FitSummary, optional
        Precomputed diagnostics; computed from *result* when omitted.
    """
    fig.clf()
    ax = fig.add_subplot(111)
    bins = result.t_histogram
    dof = result.dof

    _draw_bars(ax, bins, CHART_PALETTE['t_bar'], "Sample mean (t statistic)")

    xs = _curve_grid(bins)
    ax.plot(
        xs, [student_t_pdf(x, dof) for x in xs],
        color=CHART_PALETTE['theory_line'], linewidth=1.5, zorder=4,
        label=f"t({dof})",
    )
    ax.plot(
        xs, [standard_normal(x) for x in xs],
        color=CHART_PALETTE['normal_line'], linewidth=1.5, zorder=4,
        label="N(0,1)",
    )

    if summary is None:
        summary = _safe_summary(result)
    if summary is not None:
        _draw_stats_box(
            ax,
            _stats_text(summary.t_fit, result.statistics.simulation_count)
            + f"\nTV vs N(0,1): {summary.tv_t_vs_normal:.4f}",
            for_export,
        )

    ax.set_xlabel("(X̄ − μ) / (S / √n)", fontsize=8)
    ax.set_ylabel("Density", fontsize=8)
    ax.set_title(
        f"Distribution of the Sample Mean : t({dof})\n"
        f"{result.spec.label}, n = {result.n}",
        fontsize=10, fontweight='bold',
    )
    ax.legend(fontsize=6, framealpha=0.9, loc='upper left')
    ax.grid(axis='y', linewidth=0.4, alpha=0.5)

    fig.tight_layout(pad=1.5)


def render_chi_square_distribution(
    fig: Figure,
    result: SimulationResult,
    *,
    for_export: bool = False,
    summary: FitSummary = None,
) -> None:
    """Render the sample-variance (chi-squared statistic) histogram on *fig*.

    Same parameters as ``render_t_distribution``.  The chi^2 curve is
    only drawn over x > 0, its support.
    """
    fig.clf()
    ax = fig.add_subplot(111)
    bins = result.chi_square_histogram
    dof = result.dof

    _draw_bars(ax, bins, CHART_PALETTE['chi_bar'], "Sample variance (χ² statistic)")

    xs = _curve_grid(bins, lower_bound=0.0)
    ax.plot(
        xs, [chi_square_pdf(x, dof) for x in xs],
        color=CHART_PALETTE['theory_line'], linewidth=1.5, zorder=4,
        label=f"χ²({dof})",
    )

    if summary is None:
        summary = _safe_summary(result)
    if summary is not None:
        _draw_stats_box(
            ax,
            _stats_text(summary.chi_square_fit, result.statistics.simulation_count),
            for_export,
        )

    ax.set_xlabel("(n − 1) S² / σ²", fontsize=8)
    ax.set_ylabel("Density", fontsize=8)
    ax.set_title(
        f"Distribution of the Sample Variance : χ²({dof})\n"
        f"{result.spec.label}, n = {result.n}",
        fontsize=10, fontweight='bold',
    )
    ax.legend(fontsize=6, framealpha=0.9, loc='upper left')
    ax.grid(axis='y', linewidth=0.4, alpha=0.5)

    fig.tight_layout(pad=1.5)
