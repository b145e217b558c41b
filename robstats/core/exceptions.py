"""
Exception hierarchy for robstats.

All exceptions inherit from RobStatsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class RobStatsError(Exception):
    """Base exception for all robstats errors."""
    pass


class ValidationError(RobStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty
    samples, too few observations, out-of-range ranks or bounds.
    """
    pass


class DimensionError(ValidationError):
    """
    Sample lengths or shapes are incorrect or inconsistent.

    Raised when two samples that must be paired (e.g. for correlation)
    have different lengths, or when an input is not one-dimensional.

    Attributes:
        lengths: Mapping of parameter name to observed length, if known
    """

    def __init__(self, message: str, lengths: dict[str, int] | None = None):
        super().__init__(message)
        self.lengths = lengths

