"""Function-to-polynomial reconstruction."""

from decikit.expansion.maclaurin import function_to_polynomial, one_over_factorial

__all__ = [
    "function_to_polynomial",
    "one_over_factorial",
]
