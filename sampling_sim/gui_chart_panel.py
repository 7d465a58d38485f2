"""
Chart panel (bottom area) for the Sampling Distribution Simulator.

Two matplotlib canvases side by side, one for the sample mean and one
for the sample variance, each with a navigation toolbar and copy /
export buttons.
"""

import os

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QFileDialog, QMessageBox,
)

import matplotlib
matplotlib.use('QtAgg')
from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import (
    FigureCanvasQTAgg as FigureCanvas,
    NavigationToolbar2QT as NavigationToolbar,
)

from .chart_sampling import render_chi_square_distribution, render_t_distribution
from .constants import DARK_COLORS, PLOT_STYLE_DARK
from .data_model import SimulationResult
from .diagnostics import summarize_fit
from .errors import EmptyInputError
from .export import copy_to_clipboard, export_png
from .theme import apply_plot_style


class _ChartCard(QWidget):
    """One chart with its canvas, toolbar, and export buttons."""

    def __init__(self, export_stem: str, figsize=(6, 4.5), parent=None):
        super().__init__(parent)
        self._export_stem = export_stem
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        toolbar_row = QHBoxLayout()
        toolbar_row.setSpacing(4)

        self._fig = Figure(figsize=figsize)
        self._fig.set_facecolor(DARK_COLORS['bg_alt'])
        self._canvas = FigureCanvas(self._fig)
        self._toolbar = NavigationToolbar(self._canvas, self)

        toolbar_row.addWidget(self._toolbar)
        toolbar_row.addStretch()

        self._btn_copy = QPushButton("Copy")
        self._btn_copy.setFixedHeight(28)
        self._btn_copy.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_copy.clicked.connect(lambda *_: self._on_copy())
        toolbar_row.addWidget(self._btn_copy)

        self._btn_export = QPushButton("Export PNG...")
        self._btn_export.setFixedHeight(28)
        self._btn_export.setStyleSheet("font-size: 11px; padding: 2px 8px;")
        self._btn_export.clicked.connect(lambda *_: self._on_export())
        toolbar_row.addWidget(self._btn_export)

        layout.addLayout(toolbar_row)
        layout.addWidget(self._canvas, 1)

    @property
    def fig(self) -> Figure:
        return self._fig

    @property
    def export_stem(self) -> str:
        return self._export_stem

    def refresh(self):
        """Redraw the canvas after figure changes."""
        self._canvas.draw_idle()

    def _on_copy(self):
        if copy_to_clipboard(self._fig):
            self.window().statusBar().showMessage("Chart copied to clipboard", 3000)
        else:
            QMessageBox.warning(self, "Copy Failed",
                                "Could not copy chart to clipboard.")

    def _on_export(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Export Chart as PNG",
            f"{self._export_stem}.png", "PNG Files (*.png);;All Files (*)",
        )
        if not path:
            return
        if not path.lower().endswith('.png'):
            path += '.png'
        try:
            export_png(self._fig, path)
            self.window().statusBar().showMessage(
                f"Exported to {os.path.basename(path)}", 3000
            )
        except (OSError, ValueError) as exc:
            QMessageBox.critical(self, "Export Error", f"Failed to export: {exc}")


class ChartPanelWidget(QWidget):
    """Side-by-side sample-mean and sample-variance charts."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self._card_t = _ChartCard("sample_mean_t")
        self._card_chi = _ChartCard("sample_variance_chi_square")
        layout.addWidget(self._card_t, 1)
        layout.addWidget(self._card_chi, 1)

        apply_plot_style(PLOT_STYLE_DARK)

    def update_charts(self, result: SimulationResult) -> None:
        """Re-render both charts from *result*."""
        apply_plot_style(PLOT_STYLE_DARK)
        try:
            summary = summarize_fit(result.statistics)
        except EmptyInputError:
            summary = None

        render_t_distribution(self._card_t.fig, result, summary=summary)
        self._card_t.refresh()
        render_chi_square_distribution(self._card_chi.fig, result, summary=summary)
        self._card_chi.refresh()

    def get_figures(self) -> dict:
        """Return ``{filename_stem: Figure}`` for batch export."""
        return {
            self._card_t.export_stem: self._card_t.fig,
            self._card_chi.export_stem: self._card_chi.fig,
        }
