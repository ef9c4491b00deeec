"""Provides the FiniteDifferenceDerivative class.

The user must specify the function to differentiate and the point at
which the derivative should be evaluated.

Examples:
--------
>>> from decimal import Decimal
>>> from decikit.finite.finite_difference import FiniteDifferenceDerivative
>>> d = FiniteDifferenceDerivative(function=lambda x: x**3, x0=2)
>>> abs(d.differentiate(order=1) - 12) < Decimal("1e-5")
True
"""

from __future__ import annotations

from decimal import Decimal

from decikit.config import NumericConfig
from decikit.finite.core import approximate_nth_derivative
from decikit.utils.types import DecimalFunction, Numeric
from decikit.utils.validate import as_decimal


class FiniteDifferenceDerivative:
    """Computes derivatives of any order with forward finite differences.

    Attributes:
        function: The function to differentiate. Must accept a single
            ``Decimal`` and return a scalar.
        x0: The point at which the derivative is evaluated.
    """

    def __init__(self, function: DecimalFunction, x0: Numeric) -> None:
        """Initialises the class based on function and evaluation point.

        Arguments:
            function: The function to differentiate.
            x0: The point at which the derivative is evaluated.
        """
        if not callable(function):
            raise TypeError("function must be callable.")
        self.function = function
        self.x0 = as_decimal(x0, name="x0")

    def differentiate(
        self,
        order: int = 1,
        *,
        config: NumericConfig | None = None,
    ) -> Decimal:
        """Returns the ``order``-th derivative estimate at ``x0``.

        Args:
            order: Derivative order; ``0`` returns ``function(x0)``.
            config: Numeric configuration; ``None`` selects the default.
        """
        return approximate_nth_derivative(self.function, order, self.x0, config=config)
