"""Newton's method root finders."""

from decikit.solvers.newton import (
    ConvergenceError,
    NewtonResult,
    solve_function,
    solve_polynomial,
)
from decikit.solvers.options import SolverOptions

__all__ = [
    "ConvergenceError",
    "NewtonResult",
    "SolverOptions",
    "solve_function",
    "solve_polynomial",
]
