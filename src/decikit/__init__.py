"""Provides all decikit methods."""

from importlib.metadata import PackageNotFoundError, version

from decikit.combinatorics import (
    InvalidArgumentError,
    combination,
    factorial,
    permutation,
)
from decikit.config import DEFAULT_CONFIG, NumericConfig
from decikit.derivative_kit import DerivativeKit
from decikit.expansion.maclaurin import function_to_polynomial
from decikit.finite.core import approximate_nth_derivative
from decikit.finite.finite_difference import FiniteDifferenceDerivative
from decikit.polynomial.algebra import (
    add,
    derivative,
    evaluate,
    integral,
    multiply,
    power,
)
from decikit.polynomial_kit import PolynomialKit
from decikit.solvers.newton import (
    ConvergenceError,
    NewtonResult,
    solve_function,
    solve_polynomial,
)
from decikit.solvers.options import SolverOptions

try:
    __version__ = version("decikit")
except PackageNotFoundError:
    pass

__all__ = [
    "ConvergenceError",
    "DEFAULT_CONFIG",
    "DerivativeKit",
    "FiniteDifferenceDerivative",
    "InvalidArgumentError",
    "NewtonResult",
    "NumericConfig",
    "PolynomialKit",
    "SolverOptions",
    "add",
    "approximate_nth_derivative",
    "combination",
    "derivative",
    "evaluate",
    "factorial",
    "function_to_polynomial",
    "integral",
    "multiply",
    "permutation",
    "power",
    "solve_function",
    "solve_polynomial",
]
