"""
Export utilities for the Sampling Distribution Simulator.

PNG export and clipboard copy switch a figure from the dark GUI theme
to a white-background export theme and switch it back afterwards.
Every property the light theme touches is captured first and restored
in a ``finally`` block, so a failed save never leaves the on-screen
chart half re-coloured.
"""

import io
import os
from typing import Dict, List

from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from .constants import (
    CLIPBOARD_DPI, DARK_COLORS, EXPORT_DPI, EXPORT_WIDTH_INCHES,
    PLOT_STYLE_LIGHT,
)


_DARK_FOREGROUNDS = frozenset((
    DARK_COLORS['fg'], DARK_COLORS['fg_dim'], DARK_COLORS['fg_bright'],
))
_DARK_BACKGROUNDS = frozenset((
    DARK_COLORS['bg'], DARK_COLORS['bg_alt'], DARK_COLORS['bg_widget'],
))


def _hex(color) -> str:
    try:
        return to_hex(color).lower()
    except ValueError:
        return ''


def _save_figure_state(fig: Figure) -> dict:
    """Capture every colour ``_apply_light_theme`` changes."""
    state = {
        'fig_facecolor': fig.get_facecolor(),
        'axes_states': [],
    }
    for ax in fig.get_axes():
        ax_state = {
            'facecolor': ax.get_facecolor(),
            'title_color': ax.title.get_color(),
            'xlabel_color': ax.xaxis.label.get_color(),
            'ylabel_color': ax.yaxis.label.get_color(),
            'spine_colors': {
                name: spine.get_edgecolor() for name, spine in ax.spines.items()
            },
            'xtick_label_colors': [t.get_color() for t in ax.get_xticklabels()],
            'ytick_label_colors': [t.get_color() for t in ax.get_yticklabels()],
            'xtick_mark_color': None,
            'ytick_mark_color': None,
            'grid_colors': [
                line.get_color()
                for line in ax.get_xgridlines() + ax.get_ygridlines()
            ],
            'text_colors': [t.get_color() for t in ax.texts],
            'text_box_colors': [
                t.get_bbox_patch().get_facecolor()
                if t.get_bbox_patch() is not None else None
                for t in ax.texts
            ],
        }
        xticks = ax.xaxis.get_major_ticks()
        if xticks:
            ax_state['xtick_mark_color'] = xticks[0].tick1line.get_color()
        yticks = ax.yaxis.get_major_ticks()
        if yticks:
            ax_state['ytick_mark_color'] = yticks[0].tick1line.get_color()

        legend = ax.get_legend()
        if legend is not None:
            frame = legend.get_frame()
            ax_state['legend_facecolor'] = frame.get_facecolor()
            ax_state['legend_edgecolor'] = frame.get_edgecolor()
            ax_state['legend_text_colors'] = [
                t.get_color() for t in legend.get_texts()
            ]
        state['axes_states'].append(ax_state)
    return state


def _apply_light_theme(fig: Figure) -> None:
    """Re-colour *fig* for a white background."""
    light = PLOT_STYLE_LIGHT
    fig.set_facecolor(light['figure.facecolor'])

    for ax in fig.get_axes():
        ax.set_facecolor(light['axes.facecolor'])
        ax.title.set_color(light['text.color'])
        ax.xaxis.label.set_color(light['axes.labelcolor'])
        ax.yaxis.label.set_color(light['axes.labelcolor'])

        for spine in ax.spines.values():
            spine.set_edgecolor(light['axes.edgecolor'])

        ax.tick_params(axis='x', colors=light['xtick.color'],
                       labelcolor=light['xtick.color'])
        ax.tick_params(axis='y', colors=light['ytick.color'],
                       labelcolor=light['ytick.color'])

        for line in ax.get_xgridlines() + ax.get_ygridlines():
            line.set_color(light['grid.color'])

        legend = ax.get_legend()
        if legend is not None:
            frame = legend.get_frame()
            frame.set_facecolor(light['legend.facecolor'])
            frame.set_edgecolor(light['legend.edgecolor'])
            for text in legend.get_texts():
                text.set_color(light['text.color'])

        # Statistics box: dark-theme text and box fill only.
        for text in ax.texts:
            if _hex(text.get_color()) in _DARK_FOREGROUNDS:
                text.set_color(light['text.color'])
            patch = text.get_bbox_patch()
            if patch is not None and _hex(patch.get_facecolor()) in _DARK_BACKGROUNDS:
                patch.set_facecolor(light['axes.facecolor'])


def _restore_figure_state(fig: Figure, state: dict) -> None:
    """Undo ``_apply_light_theme`` using a ``_save_figure_state`` snapshot."""
    fig.set_facecolor(state['fig_facecolor'])

    for ax, ax_state in zip(fig.get_axes(), state['axes_states']):
        ax.set_facecolor(ax_state['facecolor'])
        ax.title.set_color(ax_state['title_color'])
        ax.xaxis.label.set_color(ax_state['xlabel_color'])
        ax.yaxis.label.set_color(ax_state['ylabel_color'])

        for name, color in ax_state['spine_colors'].items():
            ax.spines[name].set_edgecolor(color)

        # tick_params recolours labels too, so labels are restored after.
        if ax_state['xtick_mark_color'] is not None:
            ax.tick_params(axis='x', colors=ax_state['xtick_mark_color'])
        if ax_state['ytick_mark_color'] is not None:
            ax.tick_params(axis='y', colors=ax_state['ytick_mark_color'])
        for label, color in zip(ax.get_xticklabels(), ax_state['xtick_label_colors']):
            label.set_color(color)
        for label, color in zip(ax.get_yticklabels(), ax_state['ytick_label_colors']):
            label.set_color(color)

        for line, color in zip(ax.get_xgridlines() + ax.get_ygridlines(),
                               ax_state['grid_colors']):
            line.set_color(color)

        for text, color, box_color in zip(ax.texts, ax_state['text_colors'],
                                          ax_state['text_box_colors']):
            text.set_color(color)
            patch = text.get_bbox_patch()
            if patch is not None and box_color is not None:
                patch.set_facecolor(box_color)

        legend = ax.get_legend()
        if legend is not None and 'legend_facecolor' in ax_state:
            frame = legend.get_frame()
            frame.set_facecolor(ax_state['legend_facecolor'])
            frame.set_edgecolor(ax_state['legend_edgecolor'])
            for text, color in zip(legend.get_texts(),
                                   ax_state['legend_text_colors']):
                text.set_color(color)


def export_png(
    fig: Figure,
    filepath: str,
    *,
    dpi: int = EXPORT_DPI,
    width_inches: float = EXPORT_WIDTH_INCHES,
) -> None:
    """Export *fig* as a light-theme PNG.

    The figure is resized to *width_inches* (keeping its aspect ratio)
    for the save and returned to its original size and theme afterwards.
    """
    current_w = fig.get_figwidth()
    current_h = fig.get_figheight()
    state = _save_figure_state(fig)
    try:
        scale = width_inches / current_w if current_w > 0 else 1.0
        fig.set_size_inches(width_inches, current_h * scale)
        _apply_light_theme(fig)
        fig.savefig(
            filepath,
            dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
            pad_inches=0.1,
        )
    finally:
        fig.set_size_inches(current_w, current_h)
        _restore_figure_state(fig, state)


def copy_to_clipboard(fig: Figure, dpi: int = CLIPBOARD_DPI) -> bool:
    """Copy *fig* to the system clipboard as a light-theme PNG.

    Returns ``True`` on success, ``False`` if Qt or a clipboard is
    unavailable.
    """
    try:
        from PySide6.QtWidgets import QApplication
        from PySide6.QtGui import QImage
    except ImportError:
        return False

    buf = io.BytesIO()
    state = _save_figure_state(fig)
    try:
        _apply_light_theme(fig)
        fig.savefig(
            buf, format='png', dpi=dpi,
            bbox_inches='tight',
            facecolor=fig.get_facecolor(),
            edgecolor='none',
        )
    finally:
        _restore_figure_state(fig, state)

    img = QImage()
    img.loadFromData(buf.getvalue())
    clipboard = QApplication.clipboard()
    if clipboard is None:
        return False
    clipboard.setImage(img)
    return True


def export_all_charts(
    figures: Dict[str, Figure],
    output_dir: str,
    *,
    dpi: int = EXPORT_DPI,
    width_inches: float = EXPORT_WIDTH_INCHES,
) -> List[str]:
    """Export ``{filename_stem: Figure}`` as PNGs into *output_dir*.

    Returns the list of written paths.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths = []
    for name, fig in figures.items():
        safe_name = "".join(
            c if c.isalnum() or c in '-_ ' else '_'
            for c in name
        ).strip().replace(' ', '_')
        filepath = os.path.join(output_dir, f"{safe_name}.png")
        export_png(fig, filepath, dpi=dpi, width_inches=width_inches)
        paths.append(filepath)
    return paths
