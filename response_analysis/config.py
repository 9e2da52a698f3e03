"""
Analysis Parameters
===================
Module-level constants shared by the analyzer, the signal sources and the
plots. Edit these to change defaults; every function also accepts the value
as a keyword argument.
"""

import numpy as np

# =============================================================================
# STEP REFERENCE
# =============================================================================

# Value of the applied step (unit step)
DEFAULT_REFERENCE = 1.0

# =============================================================================
# SETTLING CRITERION
# =============================================================================

# ±5% band around the final value
BAND_LOWER_FACTOR = 0.95
BAND_UPPER_FACTOR = 1.05
BAND_PERCENT = 5

# =============================================================================
# DEMO SYSTEM (second-order closed loop)
# =============================================================================

# G(s) = K * wn^2 / (s^2 + 2*zeta*wn*s + wn^2)
DEMO_WN = 2 * np.pi                 # 1 Hz natural frequency (rad/s)
DEMO_ZETA = 0.2                     # Underdamped, visible ringing
DEMO_GAIN = 1.0
DEMO_DURATION_S = 10.0
DEMO_SAMPLES = 2000

# =============================================================================
# PLOT STYLE
# =============================================================================

PLOT_STYLE = {
    'figure.figsize': (8, 5),
    'font.size': 11,
    'font.family': 'serif',
    'axes.labelsize': 12,
    'axes.titlesize': 14,
    'legend.fontsize': 10,
    'lines.linewidth': 1.5,
    'axes.grid': True,
    'grid.alpha': 0.3,
    'savefig.dpi': 300,
    'savefig.bbox': 'tight',
}
