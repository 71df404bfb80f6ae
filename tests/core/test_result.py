"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

import pyrowstats
from pyrowstats.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides) -> Result:
    kwargs = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu_rowwise",
    )
    kwargs.update(overrides)
    return Result(**kwargs)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"handle_missing": True},
            timing={"total_seconds": 0.01},
        )
        assert result.params.value == 42.0
        assert result.info["handle_missing"] is True
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_rowwise"

    def test_array_payload(self):
        result = _result(params=np.array([1.0, 2.0]))
        np.testing.assert_array_equal(result.params, [1.0, 2.0])

    def test_timing_with_breakdown(self):
        result = _result(
            timing={"total_seconds": 1.0, "counts": 0.25, "statistics": 0.75},
        )
        assert result.timing["counts"] == 0.25
        assert result.timing["statistics"] == 0.75


# ═══════════════════════════════════════════════════════════════════════
# Default factories
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:
    """Default values for warnings and provenance."""

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_provenance_auto_generated(self):
        result = _result()
        assert result.provenance["pyrowstats_version"] == pyrowstats.__version__
        assert result.provenance["numpy_version"] == np.__version__

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}

    def test_default_provenance_independent_copies(self):
        prov1 = _default_provenance()
        prov2 = _default_provenance()
        assert prov1 is not prov2
        assert prov1 == prov2


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning()
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:
    """has_warning() checks for substring in any warning."""

    def test_no_warnings_returns_false(self):
        assert _result().has_warning("anything") is False

    def test_substring_match(self):
        result = _result(warnings=("2 row(s) contain missing values",))
        assert result.has_warning("missing values") is True
        assert result.has_warning("2 row(s)") is True

    def test_no_match(self):
        result = _result(warnings=("2 row(s) contain missing values",))
        assert result.has_warning("no non-missing") is False
