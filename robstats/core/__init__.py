"""
Core infrastructure for robstats.

This module provides shared abstractions and utilities used by the
domain-specific submodules (selection, descriptive).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and random source resolution
"""

from robstats.core.result import Result
from robstats.core.exceptions import (
    RobStatsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "RobStatsError",
    "ValidationError",
    "DimensionError",
]
