"""
Core protocols for PyRowStats.

Structural interfaces that backends must satisfy. Protocol (structural
typing) rather than ABC, so a backend only has to look right.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pyrowstats.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a
    domain-specific parameter payload wrapped in a Result.

    Backends are stateless: all configuration is passed to solve().
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_rowwise'.
        """
        ...

    def solve(self, design: D, **options) -> 'Result[P]':
        """
        Execute the statistical computation.

        Raises:
            ValidationError: If design or options are invalid for this backend
        """
        ...
