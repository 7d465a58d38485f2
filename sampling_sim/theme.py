"""
Theme and stylesheet for the Sampling Distribution Simulator.

Dark Qt stylesheet for the window plus a helper that pushes one of the
matplotlib style dicts from ``constants`` into ``rcParams``.
"""

from .constants import DARK_COLORS


def get_dark_stylesheet() -> str:
    """Generate the dark-mode Qt stylesheet."""
    c = DARK_COLORS
    return f"""
    QMainWindow, QWidget {{
        background-color: {c['bg']};
        color: {c['fg']};
        font-size: 13px;
    }}
    QGroupBox {{
        border: 1px solid {c['border']};
        border-radius: 6px;
        margin-top: 12px;
        padding-top: 16px;
        font-weight: bold;
        color: {c['accent']};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 12px;
        padding: 0 6px;
    }}
    QPushButton {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 6px 16px;
        min-height: 24px;
    }}
    QPushButton:hover {{
        background-color: {c['selection']};
        border-color: {c['accent']};
    }}
    QPushButton:pressed, QPushButton:checked {{
        background-color: {c['accent']};
        color: {c['bg']};
    }}
    QLineEdit {{
        background-color: {c['bg_input']};
        color: {c['fg']};
        border: 1px solid {c['border']};
        border-radius: 4px;
        padding: 4px 8px;
        min-height: 22px;
    }}
    QLineEdit:focus {{
        border-color: {c['accent']};
    }}
    QSlider::groove:horizontal {{
        background-color: {c['bg_input']};
        border: 1px solid {c['border']};
        height: 6px;
        border-radius: 3px;
    }}
    QSlider::sub-page:horizontal {{
        background-color: {c['accent']};
        border-radius: 3px;
    }}
    QSlider::handle:horizontal {{
        background-color: {c['fg']};
        border: 1px solid {c['border']};
        width: 14px;
        margin: -5px 0;
        border-radius: 7px;
    }}
    QSlider::handle:horizontal:hover {{
        background-color: {c['accent_hover']};
    }}
    QStatusBar {{
        background-color: {c['bg_alt']};
        color: {c['fg_dim']};
        border-top: 1px solid {c['border']};
    }}
    QMenuBar {{
        background-color: {c['bg_alt']};
        color: {c['fg']};
    }}
    QMenuBar::item:selected, QMenu::item:selected {{
        background-color: {c['selection']};
    }}
    QMenu {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['border']};
    }}
    QToolTip {{
        background-color: {c['bg_widget']};
        color: {c['fg']};
        border: 1px solid {c['accent']};
        padding: 6px;
        border-radius: 4px;
    }}
    QLabel {{
        color: {c['fg']};
    }}
    QLabel#sampleSizeLabel {{
        font-style: italic;
        font-weight: bold;
        color: {c['fg_bright']};
    }}
    QLabel#parsedLabel {{
        color: {c['fg_dim']};
        font-size: 11px;
    }}
    QPushButton#playButton {{
        min-width: 84px;
    }}
    QPushButton#playButton:checked {{
        background-color: {c['accent_hover']};
        color: {c['bg']};
        font-weight: bold;
    }}
    """


def apply_plot_style(style_dict: dict) -> None:
    """Apply a style dictionary to matplotlib rcParams.

    Parameters
    ----------
    style_dict : dict
        One of ``PLOT_STYLE_DARK`` or ``PLOT_STYLE_LIGHT``.
    """
    import matplotlib as mpl
    mpl.rcParams.update(style_dict)
