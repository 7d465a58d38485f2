"""
Control panel (top strip) for the Sampling Distribution Simulator.

Distribution text field, sample-size slider with its value label, and
the play/pause button.  The panel only collects input: it emits
``parameters_changed`` and leaves the simulation to the main window.
"""

import warnings

from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QGroupBox, QLabel, QLineEdit, QPushButton,
    QSlider,
)
from PySide6.QtCore import Qt, Signal

from .constants import DEFAULT_DISTRIBUTION, N_DEFAULT, N_MAX, N_MIN
from .distribution_parser import parse_distribution


class ControlPanel(QWidget):
    """Input widgets for the distribution, n, and play mode."""

    # Signals
    parameters_changed = Signal()
    play_toggled = Signal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()
        self._connect_signals()

    # ── UI setup ─────────────────────────────────────────────────────

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(8)

        grp = QGroupBox("Random Sample")
        row = QHBoxLayout(grp)
        row.setSpacing(8)

        row.addWidget(QLabel("Population:"))
        self._edt_distribution = QLineEdit(DEFAULT_DISTRIBUTION)
        self._edt_distribution.setPlaceholderText(DEFAULT_DISTRIBUTION)
        self._edt_distribution.setFixedWidth(120)
        self._edt_distribution.setToolTip(
            "Normal population as N(mean,variance), e.g. N(0,1) or N(5,4).\n"
            "Anything else is treated as N(0,1)."
        )
        row.addWidget(self._edt_distribution)

        lbl_n = QLabel("n")
        lbl_n.setObjectName("sampleSizeLabel")
        row.addWidget(lbl_n)

        self._sld_n = QSlider(Qt.Orientation.Horizontal)
        self._sld_n.setRange(N_MIN, N_MAX)
        self._sld_n.setSingleStep(1)
        self._sld_n.setPageStep(5)
        self._sld_n.setValue(N_DEFAULT)
        self._sld_n.setFixedWidth(220)
        row.addWidget(self._sld_n)

        self._lbl_n_value = QLabel(str(N_DEFAULT))
        self._lbl_n_value.setFixedWidth(28)
        self._lbl_n_value.setObjectName("sampleSizeLabel")
        row.addWidget(self._lbl_n_value)

        self._btn_play = QPushButton("▶ Play")
        self._btn_play.setObjectName("playButton")
        self._btn_play.setCheckable(True)
        self._btn_play.setToolTip(
            f"Increase n by one every second until it reaches {N_MAX}"
        )
        row.addWidget(self._btn_play)

        self._lbl_parsed = QLabel("")
        self._lbl_parsed.setObjectName("parsedLabel")
        row.addWidget(self._lbl_parsed)
        row.addStretch()

        layout.addWidget(grp)
        self._update_parsed_label()

    # ── Signal connections ───────────────────────────────────────────

    def _connect_signals(self):
        # Committed text only; partial input such as "N(2," parses as N(0,1).
        self._edt_distribution.editingFinished.connect(
            lambda *_: self._on_distribution_edited()
        )
        self._sld_n.valueChanged.connect(self._on_n_changed)
        self._btn_play.toggled.connect(self._on_play_toggled)

    # ── Slot implementations ─────────────────────────────────────────

    def _on_distribution_edited(self):
        self._update_parsed_label()
        self.parameters_changed.emit()

    def _on_n_changed(self, value):
        self._lbl_n_value.setText(str(value))
        self.parameters_changed.emit()

    def _on_play_toggled(self, checked):
        self._btn_play.setText("⏸ Pause" if checked else "▶ Play")
        self.play_toggled.emit(checked)

    def _update_parsed_label(self):
        text = self._edt_distribution.text()
        # The main window reports fallbacks; this label only echoes them.
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            spec = parse_distribution(text)
        if spec.label.replace(' ', '') != text.replace(' ', ''):
            self._lbl_parsed.setText(f"using {spec.label}")
        else:
            self._lbl_parsed.setText("")

    # ── Public API ───────────────────────────────────────────────────

    def get_config(self) -> dict:
        """Return the current inputs as a dict for the main window."""
        return {
            'distribution': self._edt_distribution.text(),
            'n': self._sld_n.value(),
            'playing': self._btn_play.isChecked(),
        }

    def sample_size(self) -> int:
        return self._sld_n.value()

    def set_sample_size(self, n: int) -> None:
        """Move the slider; emits ``parameters_changed`` if *n* changed."""
        self._sld_n.setValue(max(N_MIN, min(N_MAX, int(n))))

    def set_playing(self, playing: bool) -> None:
        """Set the play button state; emits ``play_toggled`` if it changed."""
        self._btn_play.setChecked(playing)
