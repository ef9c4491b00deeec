"""Polynomial algebra and notation."""

from decikit.polynomial.algebra import (
    add,
    derivative,
    evaluate,
    integral,
    make_polynomial,
    multiply,
    multiply_pair,
    power,
    to_function,
    to_numpy,
    trim,
)
from decikit.polynomial.notation import format_polynomial, parse_polynomial

__all__ = [
    "add",
    "derivative",
    "evaluate",
    "integral",
    "make_polynomial",
    "multiply",
    "multiply_pair",
    "power",
    "to_function",
    "to_numpy",
    "trim",
    "format_polynomial",
    "parse_polynomial",
]
