"""Newton's method root finders.

Two variants are provided:

* :func:`solve_function` works on any callable and replaces the derivative
  with the forward-difference slope ``(f(x + h) - f(x)) / h``.
* :func:`solve_polynomial` works on coefficient sequences and uses the
  exact derivative polynomial.

Both stop as soon as ``|f(x)| < epsilon_max`` (``epsilon ** 10`` with the
default config). When the iteration budget runs out they return the last
iterate; pass ``return_result=True`` to receive a :class:`NewtonResult`
that tells whether the threshold was reached, or set
``SolverOptions(strict=True)`` to raise :class:`ConvergenceError`.

Examples:
    >>> from decimal import Decimal
    >>> from decikit.solvers.newton import solve_polynomial
    >>> root = solve_polynomial([-4, 0, 1], {"starting_point": 1})
    >>> abs(root - 2) < Decimal("1e-40")
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Any, Callable, Mapping

from decikit.config import NumericConfig, resolve_config
from decikit.logger import decikit_logger
from decikit.polynomial.algebra import derivative, evaluate
from decikit.solvers.options import SolverOptions, resolve_options
from decikit.utils.types import DecimalFunction, PolynomialLike
from decikit.utils.validate import as_decimal, as_polynomial

__all__ = [
    "ConvergenceError",
    "NewtonResult",
    "solve_function",
    "solve_polynomial",
]


class ConvergenceError(RuntimeError):
    """Raises when a strict Newton solve exhausts its iteration budget."""

    def __init__(self, message: str, result: NewtonResult):
        """Stores the last iterate alongside the message."""
        super().__init__(message)
        self.result = result


@dataclass(frozen=True)
class NewtonResult:
    """Outcome of a Newton iteration.

    Attributes:
        root: The last iterate.
        converged: True if ``|f(root)| < epsilon_max``.
        iterations: Number of Newton updates performed.
        residual: ``f(root)``.
    """

    root: Decimal
    converged: bool
    iterations: int
    residual: Decimal


def _newton(
    residual: Callable[[Decimal], Decimal],
    step: Callable[[Decimal, Decimal], Decimal],
    opts: SolverOptions,
    cfg: NumericConfig,
    label: str,
) -> NewtonResult:
    """Runs the Newton loop shared by both solvers.

    Args:
        residual: ``x -> f(x)``.
        step: ``(x, f(x)) -> f(x) / slope``.
        opts: Starting point, budget and strictness.
        cfg: Numeric configuration; the loop runs in its decimal context.
        label: Solver name used in log messages.
    """
    x = opts.starting_point
    with localcontext(cfg.context):
        for i in range(opts.max_iterations):
            fx = residual(x)
            if abs(fx) < cfg.epsilon_max:
                decikit_logger.info("%s converged after %d iterations.", label, i)
                return NewtonResult(root=x, converged=True, iterations=i, residual=fx)
            x = x - step(x, fx)
            decikit_logger.debug("%s iteration %d: x=%s", label, i + 1, x)

        fx = residual(x)
        result = NewtonResult(
            root=x,
            converged=abs(fx) < cfg.epsilon_max,
            iterations=opts.max_iterations,
            residual=fx,
        )

    if not result.converged:
        message = (
            f"{label} did not reach |f(x)| < {cfg.epsilon_max} within "
            f"{opts.max_iterations} iterations; returning last iterate."
        )
        if opts.strict:
            raise ConvergenceError(message, result)
        decikit_logger.warning(message)
    return result


def solve_function(
    function: DecimalFunction,
    options: SolverOptions | Mapping[str, Any] | None = None,
    *,
    config: NumericConfig | None = None,
    return_result: bool = False,
) -> Decimal | NewtonResult:
    """Finds a root of ``function`` with a finite-difference Newton method.

    Each update is ``x <- x - f(x) * h / (f(x + h) - f(x))`` with
    ``h = epsilon``. A zero slope is replaced by ``epsilon ** 3``.

    Each update costs two evaluations of ``function``. If the budget runs
    out, ``function`` is evaluated once more at the last iterate to fill
    in ``NewtonResult.residual`` and ``converged``, so a non-converging
    solve costs ``2 * max_iterations + 1`` evaluations.

    Args:
        function: Callable taking a ``Decimal``. Must be free of side effects.
        options: :class:`SolverOptions` or a mapping of option names.
        config: Numeric configuration; ``None`` selects the default.
        return_result: If True, return a :class:`NewtonResult` instead of
            the bare root.

    Returns:
        The last iterate, or a :class:`NewtonResult` if requested.

    Raises:
        ConvergenceError: If ``options.strict`` is set and the budget runs out.
    """
    if not callable(function):
        raise TypeError("function must be callable.")
    cfg = resolve_config(config)
    opts = resolve_options(options)

    def residual(x: Decimal) -> Decimal:
        """Evaluates the target function as a Decimal."""
        return as_decimal(function(x), name=f"function({x})")

    def step(x: Decimal, fx: Decimal) -> Decimal:
        """Newton step using the forward-difference slope."""
        rise = residual(x + cfg.epsilon) - fx
        if rise.is_zero():
            return fx / cfg.epsilon_3
        return fx * cfg.epsilon / rise

    result = _newton(residual, step, opts, cfg, "solve_function")
    return result if return_result else result.root


def solve_polynomial(
    poly: PolynomialLike,
    options: SolverOptions | Mapping[str, Any] | None = None,
    *,
    config: NumericConfig | None = None,
    return_result: bool = False,
) -> Decimal | NewtonResult:
    """Finds a root of a polynomial with Newton's method.

    The slope comes from the exact derivative polynomial. Where the
    derivative evaluates to exactly zero, ``epsilon ** 3`` is used as the
    divisor so the iteration can move on.

    If the budget runs out, the polynomial is evaluated once more at the
    last iterate to fill in ``NewtonResult.residual`` and ``converged``.

    Args:
        poly: Coefficients indexed by degree.
        options: :class:`SolverOptions` or a mapping of option names.
        config: Numeric configuration; ``None`` selects the default.
        return_result: If True, return a :class:`NewtonResult` instead of
            the bare root.

    Returns:
        The last iterate, or a :class:`NewtonResult` if requested.

    Raises:
        ConvergenceError: If ``options.strict`` is set and the budget runs out.
    """
    cfg = resolve_config(config)
    opts = resolve_options(options)
    p = as_polynomial(poly)
    dp = derivative(p, config=cfg)

    def residual(x: Decimal) -> Decimal:
        """Evaluates the polynomial."""
        return evaluate(p, x, config=cfg)

    def step(x: Decimal, fx: Decimal) -> Decimal:
        """Newton step using the exact derivative."""
        dfx = evaluate(dp, x, config=cfg)
        if dfx.is_zero():
            decikit_logger.debug("solve_polynomial: zero derivative at x=%s.", x)
            return fx / cfg.epsilon_3
        return fx / dfx

    result = _newton(residual, step, opts, cfg, "solve_polynomial")
    return result if return_result else result.root
