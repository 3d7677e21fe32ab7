"""Exception hierarchy shared by every engine component."""

from __future__ import annotations


class GspCalculatorError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(GspCalculatorError):
    """Raised for an unknown material, club or strategy name.

    Fatal to the request that triggered it; never retried.
    """


class InvalidInputError(GspCalculatorError, ValueError):
    """Raised when a launch parameter is non-numeric or physically out of range."""


class NoDataError(GspCalculatorError):
    """Raised when the trajectory store has no sample covering a request."""


class NoValidTrajectoryError(NoDataError):
    """Raised when no sampled speed of a club resolves to a stored trajectory."""


class NoSuitableClubError(GspCalculatorError):
    """Raised when a target carry lies outside every (widened) club envelope."""
