"""
Response Sources
================
Produce the (t, y) vectors that the analyzer consumes:
- Simulated unit step response of a second-order closed loop
- Logged response read from a CSV file
"""

import numpy as np
import pandas as pd
from scipy import signal

from response_analysis import config
from response_analysis.errors import InvalidInputError


# =============================================================================
# SIMULATION
# =============================================================================

def build_second_order_system(wn=config.DEMO_WN, zeta=config.DEMO_ZETA,
                              gain=config.DEMO_GAIN):
    """
    Standard second-order transfer function.

    G(s) = K * wn^2 / (s^2 + 2*zeta*wn*s + wn^2)
    """
    if wn <= 0:
        raise InvalidInputError(f"Natural frequency must be positive, got {wn}")
    if zeta < 0:
        raise InvalidInputError(f"Damping ratio must be >= 0, got {zeta}")

    num = [gain * wn**2]
    den = [1, 2 * zeta * wn, wn**2]
    return signal.TransferFunction(num, den)


def simulate_step_response(wn=config.DEMO_WN, zeta=config.DEMO_ZETA,
                           gain=config.DEMO_GAIN,
                           duration=config.DEMO_DURATION_S,
                           n_samples=config.DEMO_SAMPLES):
    """
    Unit step response of the second-order system.

    Returns:
        (t, y) arrays of length n_samples, t from 0 to duration
    """
    if duration <= 0:
        raise InvalidInputError(f"Duration must be positive, got {duration}")
    if n_samples < 2:
        raise InvalidInputError(f"Need at least 2 samples, got {n_samples}")

    sys_tf = build_second_order_system(wn, zeta, gain)
    t, y = signal.step(sys_tf, T=np.linspace(0, duration, n_samples))
    return t, y


# =============================================================================
# LOGGED DATA
# =============================================================================

def load_response_csv(path, time_col='time', signal_col='y'):
    """
    Read (t, y) from two columns of a CSV log.

    Non-numeric cells are coerced to NaN and the affected rows dropped.
    """
    df = pd.read_csv(path)

    missing = [c for c in (time_col, signal_col) if c not in df.columns]
    if missing:
        raise InvalidInputError(
            f"Column(s) {missing} not found in {path}; "
            f"available: {list(df.columns)}"
        )

    df = df[[time_col, signal_col]].apply(pd.to_numeric, errors='coerce')
    df = df.dropna()

    return df[time_col].to_numpy(dtype=float), df[signal_col].to_numpy(dtype=float)
