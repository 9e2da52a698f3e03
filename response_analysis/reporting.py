"""
Console report of the step response metrics.
"""

import math


def _fmt(value, unit=''):
    if math.isnan(value):
        return 'undefined'
    return f"{value:.4f} {unit}".rstrip()


def format_report(result, title="STEP RESPONSE METRICS"):
    """Labelled metrics, 4 decimal places, NaN shown as 'undefined'."""
    lines = [
        "=" * 60,
        title,
        "=" * 60,
        f"  Damped Frequency:     {_fmt(result.damped_frequency, 'Hz')}",
        f"  Settling Time (5%):   {_fmt(result.settling_time, 's')}",
        f"  Peak Time:            {_fmt(result.peak_time, 's')}",
        f"  Steady-State Error:   {_fmt(result.steady_state_error)}",
    ]
    return "\n".join(lines)


def print_report(result, title="STEP RESPONSE METRICS"):
    print(format_report(result, title))
