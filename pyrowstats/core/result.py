"""
Generic result container for all PyRowStats computations.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (missing-data policy, diagnostics)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (versions, algorithm)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import pyrowstats
    import numpy as np
    return {
        'pyrowstats_version': pyrowstats.__version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (per-row statistics)
        info: Structured metadata (missing-data policy, row counts)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Package versions and algorithm identifiers

    Examples:
        >>> Result(
        ...     params=RowSummaryParams(...),
        ...     info={'handle_missing': False},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_rowwise'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
