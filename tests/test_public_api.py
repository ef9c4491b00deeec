"""Unit tests for public API."""

from __future__ import annotations

import decikit
from decikit import DerivativeKit, NumericConfig, PolynomialKit


def test_kits_importable_from_top_level():
    """Test that all public kits can be imported from top level."""
    assert DerivativeKit is not None
    assert PolynomialKit is not None
    assert NumericConfig is not None


def test_public_all_contains_engine_operations():
    """Test that __all__ lists every engine operation."""
    expected = {
        "add",
        "multiply",
        "power",
        "derivative",
        "integral",
        "evaluate",
        "approximate_nth_derivative",
        "solve_function",
        "solve_polynomial",
        "function_to_polynomial",
        "factorial",
        "permutation",
        "combination",
    }
    assert expected.issubset(set(decikit.__all__))
    for name in decikit.__all__:
        assert hasattr(decikit, name)


def test_logger_name():
    """Test that the package logger uses the package name."""
    from decikit.logger import decikit_logger

    assert decikit_logger.name == "decikit"
