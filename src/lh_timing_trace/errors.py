"""Exception hierarchy for loading Lighthouse results.

The mapper itself never raises; these errors cover the file-facing wrappers
and are translated into CLI exit codes by `__main__`.
"""
from __future__ import annotations


class TimingTraceError(Exception):
    """Base class for all lh-timing-trace errors."""


class ResultsNotFoundError(TimingTraceError):
    """The Lighthouse results file does not exist."""


class InvalidResultsError(TimingTraceError):
    """The results file is not JSON or carries no ``timing.entries`` array."""


__all__ = ["TimingTraceError", "ResultsNotFoundError", "InvalidResultsError"]
