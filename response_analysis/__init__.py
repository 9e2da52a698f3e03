"""
Underdamped step response analysis: damped frequency, settling time,
peak time and steady-state error from a sampled (t, y) signal.
"""

from response_analysis.analyzer import AnalysisResult, analyze
from response_analysis.errors import (
    InvalidInputError,
    ResponseAnalysisWarning,
    InsufficientPeaksWarning,
    NoSamplesOutsideBandWarning,
)

__all__ = [
    'AnalysisResult',
    'analyze',
    'InvalidInputError',
    'ResponseAnalysisWarning',
    'InsufficientPeaksWarning',
    'NoSamplesOutsideBandWarning',
]
