"""
Main window for the Sampling Distribution Simulator.

Hosts the ControlPanel (top) and ChartPanelWidget (below), a menu bar,
and a status bar.  Every parameter change triggers one synchronous
``recompute`` on the GUI thread, so results are displayed in request
order and a superseded run is never shown.  Play mode is a ``QTimer``
that steps n once per interval.
"""

import os
import sys
import warnings

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QFileDialog, QMessageBox,
)
from PySide6.QtGui import QAction
from PySide6.QtCore import QTimer

from . import APP_NAME, APP_VERSION
from .constants import N_MAX, N_MIN, PLAY_INTERVAL_MS, SIMULATION_COUNT
from .distribution_parser import parse_distribution
from .errors import SimulationError
from .export import export_all_charts
from .gui_chart_panel import ChartPanelWidget
from .gui_control_panel import ControlPanel
from .simulation import recompute


class SimulatorMainWindow(QMainWindow):
    """Main window for the Sampling Distribution Simulator."""

    def __init__(self):
        super().__init__()
        self._result = None

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(1200, 650)

        self._play_timer = QTimer(self)
        self._play_timer.setInterval(PLAY_INTERVAL_MS)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()

        self._run_simulation()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(4, 4, 4, 4)
        main_layout.setSpacing(4)

        self._control_panel = ControlPanel()
        self._chart_panel = ChartPanelWidget()

        main_layout.addWidget(self._control_panel)
        main_layout.addWidget(self._chart_panel, 1)

    def _setup_menu(self):
        menubar = self.menuBar()

        # ── File menu ────────────────────────────────────────────────
        file_menu = menubar.addMenu("File")

        act_rerun = QAction("Run Again", self)
        act_rerun.setShortcut("F5")
        act_rerun.triggered.connect(lambda *_: self._run_simulation())
        file_menu.addAction(act_rerun)

        act_export_all = QAction("Export Both Charts...", self)
        act_export_all.triggered.connect(lambda *_: self._export_all())
        file_menu.addAction(act_export_all)

        file_menu.addSeparator()

        act_exit = QAction("Exit", self)
        act_exit.triggered.connect(self.close)
        file_menu.addAction(act_exit)

        # ── Help menu ────────────────────────────────────────────────
        help_menu = menubar.addMenu("Help")

        act_about = QAction("About", self)
        act_about.triggered.connect(lambda *_: self._show_about())
        help_menu.addAction(act_about)

    def _connect_signals(self):
        self._control_panel.parameters_changed.connect(
            lambda *_: self._run_simulation()
        )
        self._control_panel.play_toggled.connect(self._on_play_toggled)
        self._play_timer.timeout.connect(self._on_play_tick)

    # ── Slots ────────────────────────────────────────────────────────

    def _run_simulation(self):
        """Recompute and redraw for the current inputs."""
        config = self._control_panel.get_config()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            spec = parse_distribution(config['distribution'])
        fallback_note = f" ({caught[0].message})" if caught else ""

        self.statusBar().showMessage(
            f"Simulating {SIMULATION_COUNT} samples of size {config['n']} "
            f"from {spec.label}..."
        )
        try:
            result = recompute(spec, config['n'])
            self._chart_panel.update_charts(result)
        except SimulationError as exc:
            print(f"[Sampling] Simulation failed: {exc}", file=sys.stderr)
            self.statusBar().showMessage(f"Simulation failed: {exc}")
            return

        self._result = result
        self.statusBar().showMessage(
            f"{spec.label}, n = {result.n}: {SIMULATION_COUNT} trials"
            f"{fallback_note}"
        )

    def _on_play_toggled(self, playing):
        if playing:
            if self._control_panel.sample_size() >= N_MAX:
                # Replay from the bottom of the range.
                self._control_panel.set_sample_size(N_MIN)
            self._play_timer.start()
        else:
            self._play_timer.stop()

    def _on_play_tick(self):
        n = self._control_panel.sample_size() + 1
        if n > N_MAX:
            self._control_panel.set_playing(False)
            return
        self._control_panel.set_sample_size(n)
        if n == N_MAX:
            self._control_panel.set_playing(False)

    def _export_all(self):
        """Export both charts to a folder."""
        if self._result is None:
            QMessageBox.warning(self, "No Charts", "Run a simulation first.")
            return

        folder = QFileDialog.getExistingDirectory(
            self, "Select Output Folder for Charts"
        )
        if not folder:
            return

        self.statusBar().showMessage("Exporting charts...")
        stem_prefix = f"n{self._result.n}_"
        figures = {
            stem_prefix + stem: fig
            for stem, fig in self._chart_panel.get_figures().items()
        }
        try:
            paths = export_all_charts(figures, folder)
        except (OSError, ValueError) as exc:
            QMessageBox.critical(
                self, "Export Error", f"Failed to export charts:\n\n{exc}",
            )
            return
        self.statusBar().showMessage(
            f"Exported {len(paths)} charts to {os.path.basename(folder)}", 5000,
        )

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"<h3>{APP_NAME} v{APP_VERSION}</h3>"
            f"<p>Draws {SIMULATION_COUNT} random samples of size n from a "
            f"normal population and compares the distribution of the "
            f"standardised sample mean with t(n&minus;1) and N(0,1), and "
            f"the scaled sample variance with &chi;&sup2;(n&minus;1).</p>",
        )
