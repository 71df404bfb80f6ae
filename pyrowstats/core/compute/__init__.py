"""
Shared compute infrastructure for PyRowStats.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    timing: Execution timing utilities
"""

from pyrowstats.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
