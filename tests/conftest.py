"""Pytest configuration file with shared numeric configs."""

from decimal import Decimal, localcontext

import pytest

from decikit.config import NumericConfig

__all__ = ["coarse_config"]


@pytest.fixture(autouse=True)
def _isolated_decimal_context():
    """Run every test in its own copy of the ambient decimal context."""
    with localcontext():
        yield


@pytest.fixture(scope="session")
def coarse_config():
    """A config with a large step so finite-difference errors are visible."""
    return NumericConfig(precision=50, epsilon=Decimal("1e-3"))
