"""
Exception hierarchy for PyRowStats.

All exceptions inherit from PyRowStatsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - Undefined statistics (too few values) are NaN, never exceptions
"""


class PyRowStatsError(Exception):
    """Base exception for all PyRowStats errors."""
    pass


class ValidationError(PyRowStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: non-numeric
    data, a matrix without columns, an unknown option value.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised for ragged (non-rectangular) input or arrays with more than
    two dimensions.
    """
    pass


class RowFunctionError(PyRowStatsError):
    """
    A caller-supplied reduction function failed on one row.

    The original exception is chained as __cause__.

    Attributes:
        row_index: Zero-based index of the row being reduced
        function_name: Name of the reduction function, if it has one
    """

    def __init__(
        self,
        message: str,
        row_index: int,
        function_name: str | None = None,
    ):
        super().__init__(message)
        self.row_index = row_index
        self.function_name = function_name
