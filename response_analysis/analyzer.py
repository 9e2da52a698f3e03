"""
Step Response Analysis
======================
Extracts second-order step response metrics from a sampled signal:
- Damped frequency (from the pseudo-period between the first two peaks)
- Settling time (±5% band around the final value)
- Peak time (global maximum)
- Steady-state error (against the step reference)

The final value is taken as the last sample; no convergence check is made,
so the signal should be long enough to have settled.

Usage:
    from response_analysis.analyzer import analyze

    result = analyze(t, y, reference=1.0)
    print(result.damped_frequency, result.settling_time)
"""

import warnings
from dataclasses import dataclass, asdict

import numpy as np
from scipy import signal

from response_analysis import config
from response_analysis.errors import (
    InvalidInputError,
    InsufficientPeaksWarning,
    NoSamplesOutsideBandWarning,
)


# =============================================================================
# RESULT
# =============================================================================

@dataclass(frozen=True)
class AnalysisResult:
    """
    Metrics of one analyzed response.

    Attributes:
        damped_frequency: 1 / pseudo-period in Hz (NaN if < 2 peaks)
        settling_time: Last time outside the ±5% band (NaN if never outside)
        peak_time: Time of the maximum sample
        steady_state_error: |reference - final value|
    """
    damped_frequency: float
    settling_time: float
    peak_time: float
    steady_state_error: float

    def to_dict(self):
        return asdict(self)


# =============================================================================
# INPUT VALIDATION
# =============================================================================

def validate_time_series(t, y):
    """
    Convert (t, y) to 1-D float arrays and check they describe one signal.

    Raises:
        InvalidInputError: different lengths, fewer than 2 samples, not 1-D,
            or time not strictly increasing
    """
    t = np.asarray(t, dtype=float)
    y = np.asarray(y, dtype=float)

    if t.ndim != 1 or y.ndim != 1:
        raise InvalidInputError(
            f"t and y must be 1-D, got shapes {t.shape} and {y.shape}"
        )
    if len(t) != len(y):
        raise InvalidInputError(
            f"t and y must have the same length ({len(t)} != {len(y)})"
        )
    if len(t) < 2:
        raise InvalidInputError(f"Need at least 2 samples, got {len(t)}")
    if not np.all(np.diff(t) > 0):
        raise InvalidInputError("Time vector must be strictly increasing")

    return t, y


# =============================================================================
# METRICS
# =============================================================================

def compute_peak_time(t, y):
    """Time of the global maximum (first occurrence on ties)."""
    return float(t[np.argmax(y)])


def find_response_peaks(t, y):
    """
    Local maxima of y: samples strictly above both neighbours.

    Endpoints are never peaks; a flat top counts once, at its middle sample.

    Returns:
        (peak_times, peak_values) as arrays, in time order
    """
    peak_idx, _ = signal.find_peaks(y)
    return t[peak_idx], y[peak_idx]


def compute_damped_frequency(t, y):
    """
    Damped frequency from the first two peaks only.

    Returns NaN and warns with InsufficientPeaksWarning when fewer than two
    peaks are found (overdamped or monotonic response).
    """
    locs, _ = find_response_peaks(t, y)

    if len(locs) < 2:
        warnings.warn(
            f"Found {len(locs)} peak(s), need 2 for a pseudo-period; "
            "damped frequency is undefined.",
            InsufficientPeaksWarning,
            stacklevel=2,
        )
        return float('nan')

    pseudo_period = locs[1] - locs[0]
    return float(1.0 / pseudo_period)


def settling_band(final_value):
    """(lower, upper) settling band around final_value, ordered numerically."""
    bound_1 = config.BAND_LOWER_FACTOR * final_value
    bound_2 = config.BAND_UPPER_FACTOR * final_value
    return min(bound_1, bound_2), max(bound_1, bound_2)


def compute_settling_time(t, y):
    """
    Last time the signal is outside the ±5% band around its final value.

    Returns NaN and warns with NoSamplesOutsideBandWarning when every sample
    is inside the band.
    """
    lower, upper = settling_band(y[-1])
    outside_idx = np.where((y < lower) | (y > upper))[0]

    if len(outside_idx) == 0:
        warnings.warn(
            f"No samples outside the ±{config.BAND_PERCENT}% band; "
            "settling time is undefined.",
            NoSamplesOutsideBandWarning,
            stacklevel=2,
        )
        return float('nan')

    return float(t[outside_idx[-1]])


def compute_steady_state_error(y, reference=config.DEFAULT_REFERENCE):
    return float(abs(reference - y[-1]))


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def analyze(t, y, reference=config.DEFAULT_REFERENCE):
    """
    Analyze a sampled step response.

    Args:
        t: Sample times, strictly increasing
        y: Response amplitude at each sample time
        reference: Step reference used for the steady-state error

    Returns:
        AnalysisResult

    Raises:
        InvalidInputError: malformed (t, y); no result is produced
    """
    t, y = validate_time_series(t, y)

    return AnalysisResult(
        damped_frequency=compute_damped_frequency(t, y),
        settling_time=compute_settling_time(t, y),
        peak_time=compute_peak_time(t, y),
        steady_state_error=compute_steady_state_error(y, reference),
    )
