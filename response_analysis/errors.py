"""
Error and warning categories raised by the response analysis.

Malformed input is fatal and raises InvalidInputError. Metrics that cannot be
computed from a valid signal are reported as NaN together with a warning.
"""


class InvalidInputError(ValueError):
    """Time/amplitude vectors (or source parameters) cannot be analyzed."""


class ResponseAnalysisWarning(UserWarning):
    """Base class for non-fatal analysis conditions."""


class InsufficientPeaksWarning(ResponseAnalysisWarning):
    """Fewer than two peaks found; damped frequency is undefined."""


class NoSamplesOutsideBandWarning(ResponseAnalysisWarning):
    """Signal never leaves the settling band; settling time is undefined."""
