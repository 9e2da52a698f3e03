#!/usr/bin/env python3
"""
Underdamped Response Analysis
=============================
Prints damped frequency, settling time, peak time and steady-state error
for a step response.

Usage:
    python3 analyze_response.py                          # simulated demo system
    python3 analyze_response.py log.csv                  # columns 'time' and 'y'
    python3 analyze_response.py log.csv t_s pitch        # custom columns
    python3 analyze_response.py log.csv --plot out.png   # also save the plot
"""

import sys

from response_analysis import config
from response_analysis.analyzer import analyze
from response_analysis.errors import InvalidInputError
from response_analysis.reporting import print_report
from response_analysis.sources import load_response_csv, simulate_step_response

USAGE = "Usage: python3 analyze_response.py [csv_file [time_col signal_col]] [--plot out.png]"


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    plot_path = None
    if '--plot' in args:
        i = args.index('--plot')
        if i + 1 >= len(args):
            print(USAGE)
            return 1
        plot_path = args[i + 1]
        del args[i:i + 2]

    if len(args) not in (0, 1, 3):
        print(USAGE)
        return 1

    print("=" * 60)
    print("UNDERDAMPED RESPONSE ANALYSIS")
    print("=" * 60)

    try:
        if args:
            time_col, signal_col = (args[1], args[2]) if len(args) == 3 else ('time', 'y')
            print(f"\nLog file: {args[0]} (t='{time_col}', y='{signal_col}')")
            t, y = load_response_csv(args[0], time_col, signal_col)
        else:
            print(f"\nDemo system: wn={config.DEMO_WN:.3f} rad/s, zeta={config.DEMO_ZETA}, "
                  f"K={config.DEMO_GAIN}")
            t, y = simulate_step_response()

        print(f"Samples: {len(t)}, reference: {config.DEFAULT_REFERENCE}\n")
        result = analyze(t, y, reference=config.DEFAULT_REFERENCE)
    except (InvalidInputError, FileNotFoundError) as e:
        print(f"Error: {e}")
        return 1

    print_report(result)

    if plot_path is not None:
        from response_analysis.plotting import plot_response
        plot_response(t, y, result, reference=config.DEFAULT_REFERENCE, save_path=plot_path)

    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
