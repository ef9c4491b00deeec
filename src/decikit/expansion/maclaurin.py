"""Maclaurin-series reconstruction of arbitrary functions.

``f(x) ≈ sum_{n=0}^{d} f^(n)(0) / n! * x^n``, with every ``f^(n)(0)``
taken from the finite-difference engine. A degree ``d`` reconstruction
costs ``O(d^2)`` function evaluations, and the ``(1/h)^n`` scale of the
high-order differences makes the top coefficients increasingly sensitive
to the decimal precision.

Examples:
    >>> from decimal import Decimal
    >>> from decikit.expansion.maclaurin import function_to_polynomial
    >>> coeffs = function_to_polynomial(lambda x: x**2, 2)
    >>> [round(c, 5) for c in coeffs]
    [Decimal('0.00000'), Decimal('0.00000'), Decimal('1.00000')]
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from decikit.config import NumericConfig, resolve_config
from decikit.finite.core import approximate_nth_derivative
from decikit.utils.types import DecimalFunction, Polynomial
from decikit.utils.validate import validate_non_negative_int

__all__ = [
    "one_over_factorial",
    "function_to_polynomial",
]


def one_over_factorial(n: int, *, config: NumericConfig | None = None) -> Decimal:
    """Returns ``1 / n!`` by repeated division at the configured precision."""
    cfg = resolve_config(config)
    n = validate_non_negative_int(n, name="n")
    with localcontext(cfg.context):
        value = Decimal(1)
        for i in range(2, n + 1):
            value /= i
        return value


def function_to_polynomial(
    function: DecimalFunction,
    degree: int,
    *,
    config: NumericConfig | None = None,
) -> Polynomial:
    """Approximates ``function`` by its truncated Maclaurin polynomial.

    Args:
        function: Callable taking a ``Decimal``. Must be free of side effects.
        degree: Highest power kept; the result has ``degree + 1`` coefficients.
        config: Numeric configuration; ``None`` selects the default.

    Returns:
        Coefficients ``f^(n)(0) / n!`` for ``n = 0..degree``.
    """
    if not callable(function):
        raise TypeError("function must be callable.")
    cfg = resolve_config(config)
    degree = validate_non_negative_int(degree, name="degree")
    zero = Decimal(0)
    coefficients = []
    with localcontext(cfg.context):
        for n in range(degree + 1):
            dn = approximate_nth_derivative(function, n, zero, config=cfg)
            coefficients.append(dn * one_over_factorial(n, config=cfg))
    return tuple(coefficients)
