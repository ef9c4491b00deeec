"""Finite-difference differentiation engine."""

from decikit.finite.core import approximate_nth_derivative
from decikit.finite.finite_difference import FiniteDifferenceDerivative

__all__ = [
    "approximate_nth_derivative",
    "FiniteDifferenceDerivative",
]
