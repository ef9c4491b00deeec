"""Polynomial algebra over ``Decimal`` coefficients.

A polynomial is a tuple of coefficients indexed by degree, so
``(1, 2, 3, 4)`` stands for ``4x^3 + 3x^2 + 2x + 1``. Polynomials of
different lengths may represent the same function: trailing zeros are
kept as given and only affect the nominal length.

Every function accepts any 1D coefficient sequence (lists, tuples, NumPy
arrays of ints, floats, strings or ``Decimal``) and returns a new tuple of
``Decimal``. Arithmetic runs in the decimal context of the active
:class:`~decikit.config.NumericConfig`.

Examples:
    >>> from decikit.polynomial.algebra import derivative, integral
    >>> derivative([1, 2, 3, 4])
    (Decimal('2'), Decimal('6'), Decimal('12'))
    >>> integral([2, 6, 12])
    (Decimal('0'), Decimal('2'), Decimal('3'), Decimal('4'))
"""

from __future__ import annotations

from decimal import Decimal, localcontext

import numpy as np
from numpy.typing import NDArray

from decikit.config import NumericConfig, resolve_config
from decikit.utils.types import DecimalFunction, Numeric, Polynomial, PolynomialLike
from decikit.utils.validate import as_decimal, as_polynomial, validate_non_negative_int

__all__ = [
    "make_polynomial",
    "evaluate",
    "add",
    "multiply_pair",
    "multiply",
    "power",
    "derivative",
    "integral",
    "to_function",
    "trim",
    "to_numpy",
]

ZERO = Decimal(0)
ONE = Decimal(1)


def make_polynomial(size: int) -> Polynomial:
    """Returns the zero polynomial with ``size`` coefficients."""
    size = validate_non_negative_int(size, name="size")
    return (ZERO,) * size


def evaluate(
    poly: PolynomialLike,
    x: Numeric,
    *,
    config: NumericConfig | None = None,
) -> Decimal:
    """Evaluates ``poly`` at ``x`` using Horner's scheme.

    Args:
        poly: Coefficients indexed by degree.
        x: Point of evaluation.
        config: Numeric configuration; ``None`` selects the default.

    Returns:
        ``sum(poly[n] * x**n)`` as a ``Decimal``.
    """
    cfg = resolve_config(config)
    p = as_polynomial(poly)
    x = as_decimal(x, name="x")
    with localcontext(cfg.context):
        result = ZERO
        for c in reversed(p):
            result = result * x + c
        return result


def add(*polynomials: PolynomialLike, config: NumericConfig | None = None) -> Polynomial:
    """Adds polynomials coefficient-wise.

    Shorter operands are padded with zeros, so the result is as long as
    the longest operand. With no operands, returns the zero polynomial
    ``(0,)``.
    """
    cfg = resolve_config(config)
    operands = [as_polynomial(p) for p in polynomials]
    if not operands:
        return (ZERO,)
    size = max(len(p) for p in operands)
    result = list(make_polynomial(size))
    with localcontext(cfg.context):
        for p in operands:
            for j, c in enumerate(p):
                result[j] = result[j] + c
    return tuple(result)


def multiply_pair(
    a: PolynomialLike,
    b: PolynomialLike,
    *,
    config: NumericConfig | None = None,
) -> Polynomial:
    """Multiplies two polynomials by discrete convolution.

    The result has ``len(a) + len(b) - 1`` coefficients.

    Raises:
        ValueError: If either operand has no coefficients.
    """
    cfg = resolve_config(config)
    a = as_polynomial(a, name="a")
    b = as_polynomial(b, name="b")
    result = list(make_polynomial(len(a) + len(b) - 1))
    with localcontext(cfg.context):
        for i, ai in enumerate(a):
            for j, bj in enumerate(b):
                result[i + j] = result[i + j] + ai * bj
    return tuple(result)


def multiply(*polynomials: PolynomialLike, config: NumericConfig | None = None) -> Polynomial:
    """Multiplies polynomials left to right.

    With no operands, returns the zero polynomial ``(0,)``.
    """
    if not polynomials:
        return (ZERO,)
    result = as_polynomial(polynomials[0])
    for p in polynomials[1:]:
        result = multiply_pair(result, p, config=config)
    return result


def power(
    poly: PolynomialLike,
    n: int,
    *,
    config: NumericConfig | None = None,
) -> Polynomial:
    """Raises ``poly`` to a non-negative integer power.

    Uses ``n - 1`` plain multiplications by ``poly``; exponents are
    expected to be small.

    Returns:
        ``(1,)`` for ``n == 0``, a copy of ``poly`` for ``n == 1``.
    """
    n = validate_non_negative_int(n, name="n")
    base = as_polynomial(poly)
    if n == 0:
        return (ONE,)
    result = base
    for _ in range(1, n):
        result = multiply_pair(result, base, config=config)
    return result


def derivative(poly: PolynomialLike, *, config: NumericConfig | None = None) -> Polynomial:
    """Differentiates ``poly`` with the power rule.

    ``result[n] = poly[n + 1] * (n + 1)``, one coefficient shorter than the
    input. The derivative of a constant is the zero polynomial ``(0,)``.
    """
    cfg = resolve_config(config)
    p = as_polynomial(poly)
    if len(p) == 1:
        return (ZERO,)
    with localcontext(cfg.context):
        return tuple(p[n + 1] * (n + 1) for n in range(len(p) - 1))


def integral(poly: PolynomialLike, *, config: NumericConfig | None = None) -> Polynomial:
    """Integrates ``poly`` with the power rule, constant of integration zero.

    ``result[0] = 0`` and ``result[i] = poly[i - 1] / i``, one coefficient
    longer than the input.
    """
    cfg = resolve_config(config)
    p = as_polynomial(poly)
    with localcontext(cfg.context):
        return (ZERO,) + tuple(c / i for i, c in enumerate(p, start=1))


def to_function(poly: PolynomialLike, *, config: NumericConfig | None = None) -> DecimalFunction:
    """Returns a callable ``x -> evaluate(poly, x)``."""
    p = as_polynomial(poly)

    def polynomial_function(x: Decimal) -> Decimal:
        """Evaluates the captured polynomial."""
        return evaluate(p, x, config=config)

    return polynomial_function


def trim(poly: PolynomialLike) -> Polynomial:
    """Strips trailing zero coefficients, keeping at least one coefficient."""
    p = as_polynomial(poly)
    end = len(p)
    while end > 1 and p[end - 1].is_zero():
        end -= 1
    return p[:end]


def to_numpy(poly: PolynomialLike) -> NDArray[np.float64]:
    """Returns the coefficients as a float64 array.

    The layout matches :mod:`numpy.polynomial.polynomial` (lowest degree
    first), so the result can be passed to ``polyval`` and friends.
    Precision beyond double is lost.
    """
    return np.asarray([float(c) for c in as_polynomial(poly)], dtype=np.float64)
