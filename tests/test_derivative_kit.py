"""Tests for DerivativeKit."""

from decimal import Decimal

import pytest

from decikit.config import NumericConfig
from decikit.derivative_kit import DerivativeKit
from decikit.solvers.newton import NewtonResult


def test_differentiate_delegates_to_finite_engine():
    """Tests derivatives of x^3 at 2 through the kit."""
    dk = DerivativeKit(lambda x: x ** 3, x0=2)
    assert dk.x0 == 2
    assert abs(dk.differentiate() - 12) < Decimal("1e-5")
    assert abs(dk.differentiate(order=3) - 6) < Decimal("1e-50")
    assert dk.differentiate(order=0) == 8


def test_solve_starts_from_x0_by_default():
    """Tests that solve() uses x0 as the starting point."""
    f = lambda x: x * x - 4  # noqa: E731
    assert abs(DerivativeKit(f, x0=1).solve() - 2) < Decimal("1e-40")
    assert abs(DerivativeKit(f, x0=-1).solve() + 2) < Decimal("1e-40")


def test_solve_with_explicit_options():
    """Tests that explicit options override x0."""
    dk = DerivativeKit(lambda x: x * x - 4, x0=-1)
    result = dk.solve({"x": 3}, return_result=True)
    assert isinstance(result, NewtonResult)
    assert abs(result.root - 2) < Decimal("1e-40")


def test_to_polynomial():
    """Tests Maclaurin reconstruction through the kit."""
    coeffs = DerivativeKit(lambda x: 2 * x ** 2 + 1).to_polynomial(2)
    for got, want in zip(coeffs, (1, 0, 2)):
        assert abs(got - want) < Decimal("1e-5")


def test_config_is_forwarded(coarse_config):
    """Tests that the kit's config reaches the engines."""
    dk = DerivativeKit(lambda x: x * x, x0=1, config=coarse_config)
    assert dk.differentiate() == Decimal("2.001")
    assert isinstance(dk.config, NumericConfig)


def test_requires_callable():
    """Tests that non-callables are rejected."""
    with pytest.raises(TypeError):
        DerivativeKit(None)


@pytest.mark.parametrize("options", [{"iterations": 1000}, {"strict": True}, {}])
def test_solve_keeps_x0_when_options_omit_starting_point(options):
    """Tests that options without a starting point still start from x0."""
    dk = DerivativeKit(lambda x: x * x - 4, x0=-1)
    assert abs(dk.solve(options) + 2) < Decimal("1e-40")


def test_solve_budget_applies_with_x0_start():
    """Tests that a partial mapping keeps its other settings."""
    dk = DerivativeKit(lambda x: x * x - 4, x0=-1)
    result = dk.solve({"iterations": 0}, return_result=True)
    assert result.root == -1
    assert result.iterations == 0
