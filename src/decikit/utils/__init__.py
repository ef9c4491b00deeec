"""Utility functions for DeciKit package."""

from .validate import (
    as_decimal,
    as_polynomial,
    validate_non_negative_int,
)

__all__ = [
    "as_decimal",
    "as_polynomial",
    "validate_non_negative_int",
]
