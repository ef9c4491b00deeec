"""Forward-difference stencil helpers.

The ``n``-th forward difference samples ``f`` at ``x, x + h, ..., x + n h``
and combines the values with alternating binomial weights::

    Δ_h^n f(x) = sum_{i=0}^{n} (-1)^(n - i) C(n, i) f(x + i h)
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from decikit.combinatorics import combination
from decikit.config import NumericConfig, resolve_config
from decikit.utils.validate import as_decimal, validate_non_negative_int

__all__ = [
    "alternating_binomial_weights",
    "stencil_points",
]


def alternating_binomial_weights(order: int) -> tuple[int, ...]:
    """Returns ``(-1)^i C(order, i)`` for ``i = 0..order``.

    The overall sign ``(-1)^order`` is left out; callers fold it into
    the ``(1/h)^order`` scale.
    """
    order = validate_non_negative_int(order, name="order")
    return tuple(
        (-1 if i % 2 else 1) * combination(order, i) for i in range(order + 1)
    )


def stencil_points(
    x: Decimal,
    order: int,
    *,
    config: NumericConfig | None = None,
) -> tuple[Decimal, ...]:
    """Returns the sample locations ``x + i * epsilon`` for ``i = 0..order``."""
    cfg = resolve_config(config)
    order = validate_non_negative_int(order, name="order")
    x = as_decimal(x, name="x")
    with localcontext(cfg.context):
        return tuple(x + cfg.epsilon * i for i in range(order + 1))
