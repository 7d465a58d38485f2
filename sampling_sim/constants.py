"""
Constants for the Sampling Distribution Simulator.

Centralises the fixed simulation configuration (trial count, bin count,
sample-size range), the Lanczos coefficient table used by the Gamma
function, GUI colour palettes, and export settings.
"""

# ── Simulation configuration (fixed, not user-exposed) ──────────────────
SIMULATION_COUNT = 10000
BIN_COUNT = 20

# Sample size range offered by the n slider.  The engine itself only
# requires n >= 2 (sample variance needs n - 1 > 0).
N_MIN = 3
N_MAX = 50
N_DEFAULT = 3
N_ENGINE_MIN = 2

# ── Population defaults ─────────────────────────────────────────────────
DEFAULT_MEAN = 0.0
DEFAULT_VARIANCE = 1.0
DEFAULT_DISTRIBUTION = "N(0,1)"

# ── Play mode ───────────────────────────────────────────────────────────
PLAY_INTERVAL_MS = 1000

# ── Uniform source ──────────────────────────────────────────────────────
# Number of uniforms pulled from numpy per refill of NumpyRandomSource.
UNIFORM_BLOCK_SIZE = 8192

# ── Lanczos approximation (g = 7, n = 9) ────────────────────────────────
LANCZOS_G = 7
LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

# Largest argument whose Gamma value is a finite IEEE double.
GAMMA_OVERFLOW_ARG = 171.61447887182298

# ── Diagnostics grid (fixed-grid total variation distance) ──────────────
TV_GRID_HALF_WIDTH = 4.0
TV_GRID_CELLS = 40

# ── Font family fallback chain ──────────────────────────────────────────
FONT_FAMILIES = [
    "Segoe UI", "DejaVu Sans", "Liberation Sans", "Noto Sans",
    "Ubuntu", "Helvetica", "Arial", "sans-serif",
]

# ── Dark GUI colour palette ─────────────────────────────────────────────
DARK_COLORS = {
    'bg':           '#1e1e2e',
    'bg_alt':       '#252536',
    'surface0':     '#313244',
    'bg_widget':    '#2a2a3c',
    'bg_input':     '#333348',
    'fg':           '#cdd6f4',
    'fg_dim':       '#9399b2',
    'fg_bright':    '#ffffff',
    'accent':       '#89b4fa',
    'accent_hover': '#74c7ec',
    'green':        '#a6e3a1',
    'yellow':       '#f9e2af',
    'red':          '#f38ba8',
    'border':       '#45475a',
    'overlay0':     '#6c7086',
    'selection':    '#45475a',
}

# ── Chart palette ───────────────────────────────────────────────────────
CHART_PALETTE = {
    't_bar':          '#82ca9d',   # sample-mean histogram bars
    'chi_bar':        '#8884d8',   # sample-variance histogram bars
    'bar_edge':       '#ffffff',
    'theory_line':    '#ff7300',   # t(n-1) / chi^2(n-1) overlay
    'normal_line':    '#0000ff',   # N(0,1) overlay on the t chart
}

# Number of x points used to draw the theoretical overlay curves.
CURVE_POINTS = 400

# ── Export / light-theme text colours ───────────────────────────────────
EXPORT_TEXT_COLOR = '#333333'
EXPORT_BG_COLOR = '#ffffff'

# ── Export settings ─────────────────────────────────────────────────────
EXPORT_DPI = 600
EXPORT_WIDTH_INCHES = 6.0
CLIPBOARD_DPI = 150

# ── Matplotlib dark-theme style dict (GUI preview) ──────────────────────
PLOT_STYLE_DARK = {
    'figure.facecolor':  DARK_COLORS['bg_alt'],
    'axes.facecolor':    DARK_COLORS['bg_widget'],
    'axes.edgecolor':    DARK_COLORS['border'],
    'axes.labelcolor':   DARK_COLORS['fg'],
    'text.color':        DARK_COLORS['fg'],
    'xtick.color':       DARK_COLORS['fg_dim'],
    'ytick.color':       DARK_COLORS['fg_dim'],
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
    'legend.fontsize':   6.5,
    'grid.color':        DARK_COLORS['border'],
    'legend.facecolor':  DARK_COLORS['bg_widget'],
    'legend.edgecolor':  DARK_COLORS['border'],
}

# ── Matplotlib light-theme style dict (export) ──────────────────────────
PLOT_STYLE_LIGHT = {
    'figure.facecolor':  '#ffffff',
    'axes.facecolor':    '#ffffff',
    'axes.edgecolor':    '#333333',
    'axes.labelcolor':   '#1a1a2e',
    'text.color':        '#1a1a2e',
    'xtick.color':       '#333333',
    'ytick.color':       '#333333',
    'xtick.labelsize':   7,
    'ytick.labelsize':   7,
    'axes.labelsize':    8,
    'axes.titlesize':    9,
    'legend.fontsize':   6.5,
    'grid.color':        '#cccccc',
    'legend.facecolor':  '#ffffff',
    'legend.edgecolor':  '#999999',
}
