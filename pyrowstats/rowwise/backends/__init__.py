"""Computational backends for row-wise statistics."""

from pyrowstats.rowwise.backends.cpu import CPURowSummaryBackend

__all__ = ["CPURowSummaryBackend"]
