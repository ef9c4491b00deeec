"""Textual notation for polynomials.

Converts between strings such as ``"3x^4 - 2x + 1"`` and coefficient
tuples. The notation is deliberately small: one variable named ``x``,
non-negative integer exponents written with or without ``^``, and
decimal coefficients. Spaces are ignored and repeated powers are summed.

The numerical engines never depend on this module.

Examples:
    >>> from decikit.polynomial.notation import format_polynomial, parse_polynomial
    >>> parse_polynomial("x^2 + 5")
    (Decimal('5'), Decimal('0'), Decimal('1'))
    >>> format_polynomial([1, -2, 0, 3])
    '3x^3 - 2x + 1'
"""

from __future__ import annotations

import re
from decimal import Decimal

from decikit.utils.types import Polynomial, PolynomialLike
from decikit.utils.validate import as_polynomial

__all__ = [
    "parse_polynomial",
    "format_polynomial",
]

_TERM = re.compile(r"([+-]?)(\d*\.?\d*)(x(\d*))?")


def parse_polynomial(text: str) -> Polynomial:
    """Parses polynomial notation into coefficients indexed by degree.

    Args:
        text: Expression such as ``"x^2 + 5"`` or ``"-0.5x3+x"``.

    Returns:
        Tuple of ``Decimal`` coefficients, as long as the highest power
        that appears plus one.

    Raises:
        TypeError: If ``text`` is not a string.
        ValueError: If ``text`` is empty or contains anything that is not
            a term.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str; got {type(text).__name__}.")
    compact = re.sub(r"[\s^]", "", text)
    if not compact:
        raise ValueError("Cannot parse an empty polynomial.")

    terms: list[tuple[Decimal, int]] = []
    pos = 0
    while pos < len(compact):
        m = _TERM.match(compact, pos)
        sign, number, var, exponent = m.group(1), m.group(2), m.group(3), m.group(4)
        if m.end() == pos or (not number and not var) or number == ".":
            raise ValueError(f"Unexpected input at position {pos} in {text!r}.")
        # a sign is required between terms
        if pos > 0 and not sign:
            raise ValueError(f"Missing operator at position {pos} in {text!r}.")
        coeff = Decimal(number) if number else Decimal(1)
        if sign == "-":
            coeff = -coeff
        if var is None:
            degree = 0
        else:
            degree = int(exponent) if exponent else 1
        terms.append((coeff, degree))
        pos = m.end()

    size = max(d for _, d in terms) + 1
    poly = [Decimal(0)] * size
    for coeff, degree in terms:
        poly[degree] += coeff
    return tuple(poly)


def _format_number(value: Decimal) -> str:
    """Formats a decimal without exponent notation or trailing zeros."""
    text = format(value.normalize(), "f")
    return "0" if text == "-0" else text


def format_polynomial(poly: PolynomialLike) -> str:
    """Renders coefficients as notation, highest degree first.

    Zero coefficients are skipped, unit coefficients are omitted in front
    of ``x``, and the zero polynomial renders as ``"0"``.
    """
    p = as_polynomial(poly)
    parts: list[str] = []
    for degree in range(len(p) - 1, -1, -1):
        value = p[degree]
        if value.is_zero():
            continue
        magnitude = abs(value)
        number = "" if magnitude == 1 and degree != 0 else _format_number(magnitude)
        if degree == 0:
            power = ""
        elif degree == 1:
            power = "x"
        else:
            power = f"x^{degree}"
        if not parts:
            parts.append(("-" if value < 0 else "") + number + power)
        else:
            parts.append((" - " if value < 0 else " + ") + number + power)
    return "".join(parts) if parts else "0"
