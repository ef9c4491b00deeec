"""Validation and coercion utilities for DeciKit inputs."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import numpy as np

from decikit.utils.types import Polynomial, PolynomialLike

__all__ = [
    "as_decimal",
    "as_polynomial",
    "validate_non_negative_int",
]


def as_decimal(value: Any, *, name: str = "value") -> Decimal:
    """Converts a scalar into a finite ``Decimal``.

    Floats are converted through their shortest ``repr`` so that ``0.1``
    becomes ``Decimal("0.1")`` rather than its exact binary expansion.

    Args:
        value: A ``Decimal``, ``int``, ``float``, NumPy integer or floating
            scalar, or a numeric string.
        name: Name used in error messages.

    Returns:
        The value as a ``Decimal``.

    Raises:
        TypeError: If ``value`` is a bool or not a supported numeric type.
        ValueError: If ``value`` is not finite or is an unparsable string.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"{name} must be numeric; got bool.")

    if isinstance(value, Decimal):
        out = value
    elif isinstance(value, (int, np.integer)):
        out = Decimal(int(value))
    elif isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            raise ValueError(f"{name} must be finite; got {value!r}.")
        out = Decimal(repr(float(value)))
    elif isinstance(value, str):
        try:
            out = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"{name} is not a valid number: {value!r}.") from e
    else:
        raise TypeError(
            f"{name} must be a Decimal, int, float or numeric string; "
            f"got {type(value).__name__}."
        )

    if not out.is_finite():
        raise ValueError(f"{name} must be finite; got {out}.")
    return out


def as_polynomial(coefficients: PolynomialLike, *, name: str = "polynomial") -> Polynomial:
    """Converts a coefficient sequence into an immutable polynomial.

    Index ``i`` of the sequence holds the coefficient of ``x**i``. Trailing
    zeros are kept as given.

    Args:
        coefficients: 1D sequence or NumPy array of scalars accepted by
            :func:`as_decimal`.
        name: Name used in error messages.

    Returns:
        Tuple of ``Decimal`` coefficients.

    Raises:
        TypeError: If ``coefficients`` is a string or not iterable.
        ValueError: If ``coefficients`` is empty or not one-dimensional.
    """
    if isinstance(coefficients, (str, bytes)):
        raise TypeError(f"{name} must be a sequence of coefficients, not a string.")
    if isinstance(coefficients, np.ndarray) and coefficients.ndim != 1:
        raise ValueError(f"{name} must be 1D; got shape {coefficients.shape}.")
    try:
        items = list(coefficients)
    except TypeError as e:
        raise TypeError(
            f"{name} must be a sequence of coefficients; got {type(coefficients).__name__}."
        ) from e
    if not items:
        raise ValueError(f"{name} must have at least one coefficient.")
    return tuple(as_decimal(c, name=f"{name}[{i}]") for i, c in enumerate(items))


def validate_non_negative_int(value: Any, *, name: str) -> int:
    """Checks that ``value`` is a non-negative integer and returns it as ``int``.

    Raises:
        TypeError: If ``value`` is not an integer (bools are rejected).
        ValueError: If ``value`` is negative.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an int; got {type(value).__name__}.")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative; got {value}.")
    return value
