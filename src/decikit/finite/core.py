"""Finite-difference derivative estimation with the fixed step ``epsilon``."""

from __future__ import annotations

from decimal import Decimal, localcontext
from typing import Any

from decikit.config import NumericConfig, resolve_config
from decikit.finite.stencil import alternating_binomial_weights, stencil_points
from decikit.utils.types import DecimalFunction, Numeric
from decikit.utils.validate import as_decimal, validate_non_negative_int

__all__ = [
    "approximate_nth_derivative",
    "first_derivative",
    "second_derivative",
    "third_derivative",
]


def _call(function: DecimalFunction, x: Decimal) -> Decimal:
    """Evaluates ``function`` at ``x`` and coerces the output to ``Decimal``."""
    value: Any = function(x)
    return as_decimal(value, name=f"function({x})")


def first_derivative(function: DecimalFunction, x: Decimal, config: NumericConfig) -> Decimal:
    """Forward difference ``(f(x + h) - f(x)) / h``."""
    return (_call(function, x + config.epsilon) - _call(function, x)) * config.over_epsilon


def second_derivative(function: DecimalFunction, x: Decimal, config: NumericConfig) -> Decimal:
    """Forward difference ``(f(x + 2h) - 2 f(x + h) + f(x)) / h^2``."""
    return (
        _call(function, x + config.two_epsilon)
        - _call(function, x + config.epsilon) * 2
        + _call(function, x)
    ) * config.over_epsilon_2


def third_derivative(function: DecimalFunction, x: Decimal, config: NumericConfig) -> Decimal:
    """Forward difference ``(f(x + 3h) - 3 f(x + 2h) + 3 f(x + h) - f(x)) / h^3``."""
    return (
        _call(function, x + config.three_epsilon)
        - _call(function, x + config.two_epsilon) * 3
        + _call(function, x + config.epsilon) * 3
        - _call(function, x)
    ) * config.over_epsilon_3


_CLOSED_FORMS = {
    1: first_derivative,
    2: second_derivative,
    3: third_derivative,
}


def approximate_nth_derivative(
    function: DecimalFunction,
    order: int,
    x: Numeric,
    *,
    config: NumericConfig | None = None,
) -> Decimal:
    """Approximates the ``order``-th derivative of ``function`` at ``x``.

    Uses the forward difference with the configured step ``h = epsilon``::

        f^(n)(x) ≈ (-1/h)^n * sum_{i=0}^{n} (-1)^i C(n, i) f(x + i h)

    Orders 1 to 3 use the expanded stencils directly; higher orders
    evaluate the sum, calling ``function`` at ``order + 1`` points. The
    truncation error is ``O(h)`` and there is no step refinement.

    Args:
        function: Callable taking a ``Decimal`` and returning a number
            accepted by :func:`~decikit.utils.validate.as_decimal`. Must be
            free of side effects.
        order: Derivative order. ``0`` returns ``function(x)``.
        x: Point at which the derivative is evaluated.
        config: Numeric configuration; ``None`` selects the default.

    Returns:
        The derivative estimate as a ``Decimal``.

    Raises:
        ValueError: If ``order`` is negative.
    """
    cfg = resolve_config(config)
    order = validate_non_negative_int(order, name="order")
    x = as_decimal(x, name="x")

    with localcontext(cfg.context):
        if order == 0:
            return _call(function, x)
        closed_form = _CLOSED_FORMS.get(order)
        if closed_form is not None:
            return closed_form(function, x, cfg)

        points = stencil_points(x, order, config=cfg)
        weights = alternating_binomial_weights(order)
        total = Decimal(0)
        for point, weight in zip(points, weights):
            total += _call(function, point) * weight
        # (-1)^n folded into the (1/h)^n scale
        constant = cfg.over_epsilon_power(order) * (-1 if order % 2 else 1)
        return total * constant
