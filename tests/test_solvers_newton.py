"""Tests for decikit.solvers.newton."""

import logging
from decimal import Decimal, localcontext

import pytest

from decikit.config import DEFAULT_CONFIG, NumericConfig
from decikit.polynomial.algebra import evaluate
from decikit.solvers.newton import (
    ConvergenceError,
    NewtonResult,
    solve_function,
    solve_polynomial,
)
from decikit.solvers.options import SolverOptions

X2_MINUS_4 = [-4, 0, 1]
ROOT_TOL = DEFAULT_CONFIG.epsilon_power(6)


def square_minus_four(x):
    """Returns x^2 - 4."""
    return x * x - 4


def test_solve_polynomial_from_zero_uses_derivative_guard():
    """Tests that the zero derivative at x=0 does not stop the search."""
    root = solve_polynomial(X2_MINUS_4, {})
    assert isinstance(root, Decimal)
    assert abs(root - 2) < ROOT_TOL


@pytest.mark.parametrize("start, expected", [(1, 2), (3, 2), (-1, -2), (-10, -2)])
def test_solve_polynomial_follows_starting_sign(start, expected):
    """Tests that the root found depends on the sign of the starting point."""
    root = solve_polynomial(X2_MINUS_4, {"starting_point": start})
    assert abs(root - expected) < ROOT_TOL


def test_solve_polynomial_result_reports_convergence():
    """Tests the NewtonResult returned with return_result=True."""
    result = solve_polynomial(X2_MINUS_4, SolverOptions(starting_point=1), return_result=True)
    assert isinstance(result, NewtonResult)
    assert result.converged
    assert result.iterations > 0
    assert abs(result.residual) < DEFAULT_CONFIG.epsilon_max
    assert result.residual == evaluate(X2_MINUS_4, result.root)


def test_solve_polynomial_linear_converges_in_one_step():
    """Tests that Newton solves a linear polynomial in one update."""
    result = solve_polynomial([-3, 2], return_result=True)
    assert result.root == Decimal("1.5")
    assert result.iterations == 1


def test_solve_polynomial_already_at_root():
    """Tests that a converged start returns immediately."""
    result = solve_polynomial(X2_MINUS_4, {"x": 2}, return_result=True)
    assert result.root == 2
    assert result.iterations == 0


def test_zero_iterations_returns_starting_point():
    """Tests that an empty budget returns the start unchanged."""
    assert solve_polynomial(X2_MINUS_4, {"x": 5, "iterations": 0}) == 5


def test_non_convergence_returns_last_iterate_and_logs(caplog):
    """Tests the silent fallback on a polynomial without real roots."""
    with caplog.at_level(logging.WARNING, logger="decikit"):
        result = solve_polynomial([1, 0, 1], {"max_iterations": 50}, return_result=True)
    assert not result.converged
    assert result.iterations == 50
    assert isinstance(result.root, Decimal)
    assert "did not reach" in caplog.text


def test_non_convergence_strict_raises():
    """Tests that strict mode raises ConvergenceError carrying the result."""
    opts = SolverOptions(max_iterations=20, strict=True)
    with pytest.raises(ConvergenceError) as excinfo:
        solve_polynomial([1, 0, 1], opts)
    assert excinfo.value.result.converged is False
    assert excinfo.value.result.iterations == 20


def test_solve_function_converges_near_two():
    """Tests the finite-difference Newton solver on x^2 - 4."""
    root = solve_function(square_minus_four, {"startingPoint": 1})
    assert abs(root - 2) < ROOT_TOL


def test_solve_function_negative_root():
    """Tests that a negative start finds the negative root."""
    result = solve_function(square_minus_four, {"x": -1}, return_result=True)
    assert result.converged
    assert abs(result.root + 2) < ROOT_TOL


def test_solve_function_transcendental():
    """Tests a root of exp(x) - 2, which is ln(2)."""
    root = solve_function(lambda x: x.exp() - 2, {"x": 1})
    with localcontext(DEFAULT_CONFIG.context):
        ln2 = Decimal(2).ln()
    assert abs(root - ln2) < ROOT_TOL


def test_solve_function_flat_function_does_not_divide_by_zero():
    """Tests that a zero slope falls back to epsilon^3 as divisor."""
    result = solve_function(lambda x: Decimal(1), {"iterations": 3}, return_result=True)
    assert not result.converged
    assert result.root == Decimal("-3e21")


def test_solve_function_requires_callable():
    """Tests that non-callables are rejected."""
    with pytest.raises(TypeError):
        solve_function([1, 2])


def test_looser_config_stops_earlier():
    """Tests that the convergence threshold follows the config."""
    loose = NumericConfig(precision=40, epsilon=Decimal("1e-4"), tolerance_exponent=2)
    result = solve_polynomial(X2_MINUS_4, {"x": 1}, config=loose, return_result=True)
    strict = solve_polynomial(X2_MINUS_4, {"x": 1}, return_result=True)
    assert result.converged
    assert abs(result.residual) < loose.epsilon_max
    assert result.iterations < strict.iterations


def test_debug_log_traces_iterations(caplog):
    """Tests that each Newton update is logged at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger="decikit"):
        solve_polynomial([-3, 2])
    assert "iteration 1" in caplog.text
    assert "converged after 1 iterations" in caplog.text


def test_solve_function_evaluation_count_without_convergence():
    """Tests that an exhausted budget costs two evaluations per step plus one."""
    calls = []

    def f(x):
        calls.append(x)
        return x * x + 1

    result = solve_function(f, {"x": 1, "iterations": 5}, return_result=True)
    assert not result.converged
    assert len(calls) == 2 * 5 + 1
    assert calls[-1] == result.root
