"""
Step Response Plot
==================
Overlays the analyzed signal with:
- Reference level and final value
- ±5% settling band
- Peak marker and settling time line
- First two peaks used for the pseudo-period
"""

import math

import numpy as np
import matplotlib.pyplot as plt

from response_analysis import config
from response_analysis.analyzer import (
    validate_time_series,
    find_response_peaks,
    settling_band,
)


def plot_response(t, y, result, reference=config.DEFAULT_REFERENCE,
                  save_path=None, ax=None, title='Step Response Analysis'):
    """
    Plot a response together with its AnalysisResult.

    If save_path is given the figure is written there and closed.

    Returns:
        (fig, ax)
    """
    t, y = validate_time_series(t, y)
    final_value = y[-1]
    lower, upper = settling_band(final_value)

    with plt.rc_context(config.PLOT_STYLE):
        if ax is None:
            fig, ax = plt.subplots()
        else:
            fig = ax.figure

        ax.plot(t, y, 'k-', label='Response')
        ax.axhline(y=reference, color='black', linestyle='--', linewidth=1,
                   label=f'Reference ({reference:g})')
        ax.axhline(y=upper, color='gray', linestyle=':', linewidth=0.8,
                   label=f'±{config.BAND_PERCENT}% Band')
        ax.axhline(y=lower, color='gray', linestyle=':', linewidth=0.8)

        peak_idx = np.argmax(y)
        ax.plot(t[peak_idx], y[peak_idx], 'ko', markersize=7,
                label=f'Peak: {y[peak_idx]:.3f} @ {result.peak_time:.4f} s')

        if not math.isnan(result.settling_time):
            ax.axvline(x=result.settling_time, color='gray', linestyle='-.',
                       linewidth=1,
                       label=f'Settling: {result.settling_time:.4f} s')

        if not math.isnan(result.damped_frequency):
            locs, pks = find_response_peaks(t, y)
            ax.plot(locs[:2], pks[:2], 'ks', markersize=6, markerfacecolor='white',
                    label=f'fd = {result.damped_frequency:.4f} Hz')
            ax.annotate('', xy=(locs[1], pks[1]), xytext=(locs[0], pks[1]),
                        arrowprops=dict(arrowstyle='<->', color='black', lw=1))

        ax.set_xlabel('Time (s)')
        ax.set_ylabel('Amplitude')
        ax.set_title(title, fontweight='bold')
        ax.legend(loc='lower right', framealpha=0.95)

        if save_path is not None:
            fig.tight_layout()
            fig.savefig(save_path, facecolor='white')
            plt.close(fig)
            print(f"Saved: {save_path}")

    return fig, ax
