"""Tests for decikit.expansion.maclaurin."""

from decimal import Decimal, localcontext

import pytest
from numpy.testing import assert_allclose

from decikit.config import DEFAULT_CONFIG
from decikit.expansion.maclaurin import function_to_polynomial, one_over_factorial
from decikit.polynomial.algebra import evaluate, to_numpy

TOL = Decimal("1e-5")


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (2, Decimal("0.5")), (4, Decimal(1) / 24)])
def test_one_over_factorial(n, expected):
    """Tests 1 / n! for small n."""
    assert abs(one_over_factorial(n) - expected) < Decimal("1e-25")


def test_one_over_factorial_keeps_precision():
    """Tests that 1 / 30! is accurate to the configured precision."""
    with localcontext(DEFAULT_CONFIG.context):
        product = one_over_factorial(30) * 265252859812191058636308480000000
    assert abs(product - 1) < Decimal("1e-95")


def test_square_reconstructs_to_x_squared():
    """Tests that x^2 reconstructs to approximately (0, 0, 1)."""
    coeffs = function_to_polynomial(lambda x: x ** 2, 2)
    assert len(coeffs) == 3
    for got, want in zip(coeffs, (0, 0, 1)):
        assert abs(got - want) < TOL


def test_degree_zero_is_value_at_origin():
    """Tests that degree 0 keeps only f(0)."""
    assert function_to_polynomial(lambda x: x + 3, 0) == (3,)


def test_cubic_reconstruction():
    """Tests that a cubic polynomial is recovered from its values."""
    coeffs = function_to_polynomial(lambda x: x ** 3 - 2 * x + 5, 3)
    for got, want in zip(coeffs, (5, -2, 0, 1)):
        assert abs(got - want) < TOL


def test_exp_reconstruction_matches_taylor_coefficients():
    """Tests that exp reconstructs to 1 / n!."""
    coeffs = function_to_polynomial(lambda x: x.exp(), 5)
    expected = [1.0, 1.0, 1 / 2, 1 / 6, 1 / 24, 1 / 120]
    assert_allclose(to_numpy(coeffs), expected, rtol=1e-5)


def test_reconstruction_evaluates_close_to_function():
    """Tests that the reconstruction of 1 / (1 - x) tracks the function near 0."""
    coeffs = function_to_polynomial(lambda x: 1 / (1 - x), 4)
    for got in coeffs:
        assert abs(got - 1) < TOL
    for x in (Decimal("0.1"), Decimal("-0.2")):
        with localcontext(DEFAULT_CONFIG.context):
            exact = 1 / (1 - x)
        assert abs(evaluate(coeffs, x) - exact) < Decimal("1e-2")


def test_invalid_arguments():
    """Tests argument validation."""
    with pytest.raises(ValueError):
        function_to_polynomial(lambda x: x, -1)
    with pytest.raises(TypeError):
        function_to_polynomial("x", 2)
