"""
Core infrastructure for PyRowStats.

Shared abstractions used by the domain module (rowwise).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pyrowstats.core.protocols import Backend
from pyrowstats.core.result import Result
from pyrowstats.core.exceptions import (
    PyRowStatsError,
    ValidationError,
    DimensionError,
    RowFunctionError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyRowStatsError",
    "ValidationError",
    "DimensionError",
    "RowFunctionError",
]
