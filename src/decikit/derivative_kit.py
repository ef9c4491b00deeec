"""Provides the DerivativeKit class.

A light front end over the finite-difference engine, the Newton solver
and the Maclaurin reconstruction, all bound to one function.

Typical usage example:

>>> from decimal import Decimal
>>> from decikit.derivative_kit import DerivativeKit
>>> dk = DerivativeKit(lambda x: x**2 - 4, x0=1)
>>> abs(dk.differentiate(order=1) - 2) < Decimal("1e-6")
True
>>> abs(dk.solve() - 2) < Decimal("1e-40")
True
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping

from decikit.config import NumericConfig
from decikit.expansion.maclaurin import function_to_polynomial
from decikit.finite.finite_difference import FiniteDifferenceDerivative
from decikit.solvers.newton import NewtonResult, solve_function
from decikit.solvers.options import SolverOptions, names_option, resolve_options
from decikit.utils.types import DecimalFunction, Numeric, Polynomial


class DerivativeKit:
    """Derivatives, roots and polynomial reconstruction of one function.

    Attributes:
        function: The callable under study.
        x0: Point used for derivatives and as the default Newton start.
        config: Numeric configuration shared by every call; ``None``
            selects the default.
    """

    def __init__(
        self,
        function: DecimalFunction,
        x0: Numeric = 0,
        *,
        config: NumericConfig | None = None,
    ):
        """Initialises the kit with a target function and point.

        Args:
            function: Callable taking a ``Decimal`` and returning a scalar.
            x0: Point at which derivatives are evaluated.
            config: Numeric configuration; ``None`` selects the default.
        """
        self._finite = FiniteDifferenceDerivative(function, x0)
        self.config = config

    @property
    def function(self) -> DecimalFunction:
        """The callable under study."""
        return self._finite.function

    @property
    def x0(self) -> Decimal:
        """The evaluation point."""
        return self._finite.x0

    def differentiate(self, order: int = 1) -> Decimal:
        """Returns the ``order``-th derivative estimate at ``x0``."""
        return self._finite.differentiate(order, config=self.config)

    def solve(
        self,
        options: SolverOptions | Mapping[str, Any] | None = None,
        *,
        return_result: bool = False,
    ) -> Decimal | NewtonResult:
        """Finds a root with Newton's method.

        The search starts from ``x0`` unless ``options`` is a
        :class:`SolverOptions` or a mapping that names a starting point.
        """
        if isinstance(options, SolverOptions):
            opts = options
        elif options is None or not names_option(options, "starting_point"):
            opts = resolve_options(options, starting_point=self.x0)
        else:
            opts = resolve_options(options)
        return solve_function(
            self.function, opts, config=self.config, return_result=return_result
        )

    def to_polynomial(self, degree: int) -> Polynomial:
        """Returns the Maclaurin polynomial of the function up to ``degree``."""
        return function_to_polynomial(self.function, degree, config=self.config)
