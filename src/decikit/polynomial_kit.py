"""Provides the PolynomialKit class.

An immutable wrapper around a coefficient tuple that exposes the
polynomial algebra, the exact-derivative Newton solver and the textual
notation as methods.

Typical usage example:

>>> from decikit.polynomial_kit import PolynomialKit
>>> p = PolynomialKit.from_string("x^2 - 4")
>>> str(p.derivative())
'2x'
>>> str(p * PolynomialKit([1, 1]))
'x^3 + x^2 - 4x - 4'
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterator, Mapping

from decikit.config import NumericConfig
from decikit.polynomial import algebra
from decikit.polynomial.notation import format_polynomial, parse_polynomial
from decikit.solvers.newton import NewtonResult, solve_polynomial
from decikit.solvers.options import SolverOptions
from decikit.utils.types import DecimalFunction, Numeric, Polynomial, PolynomialLike
from decikit.utils.validate import as_polynomial


class PolynomialKit:
    """Polynomial with ``Decimal`` coefficients indexed by degree."""

    def __init__(
        self,
        coefficients: PolynomialLike | PolynomialKit,
        *,
        config: NumericConfig | None = None,
    ):
        """Initialise from coefficients.

        Args:
            coefficients: Sequence of scalars, lowest degree first, or
                another ``PolynomialKit``.
            config: Numeric configuration; ``None`` selects the default.
        """
        if isinstance(coefficients, PolynomialKit):
            coefficients = coefficients.coefficients
        self._coefficients = as_polynomial(coefficients, name="coefficients")
        self.config = config

    @classmethod
    def from_string(cls, text: str, *, config: NumericConfig | None = None) -> PolynomialKit:
        """Parses notation such as ``"3x^2 - x + 1"``."""
        return cls(parse_polynomial(text), config=config)

    @property
    def coefficients(self) -> Polynomial:
        """The coefficient tuple."""
        return self._coefficients

    @property
    def degree(self) -> int:
        """Highest power with a non-zero coefficient (``0`` for the zero polynomial)."""
        return len(algebra.trim(self._coefficients)) - 1

    def _wrap(self, coefficients: Polynomial) -> PolynomialKit:
        """Wraps a coefficient tuple with this kit's config."""
        return PolynomialKit(coefficients, config=self.config)

    @staticmethod
    def _unwrap(other: PolynomialLike | PolynomialKit) -> PolynomialLike:
        """Returns the coefficients of a kit, or ``other`` unchanged."""
        return other.coefficients if isinstance(other, PolynomialKit) else other

    def __call__(self, x: Numeric) -> Decimal:
        """Evaluates the polynomial at ``x``."""
        return self.evaluate(x)

    def __len__(self) -> int:
        """Returns the nominal length, trailing zeros included."""
        return len(self._coefficients)

    def __iter__(self) -> Iterator[Decimal]:
        """Iterates over the coefficients, lowest degree first."""
        return iter(self._coefficients)

    def __eq__(self, other: object) -> bool:
        """Compares polynomials, ignoring trailing zeros."""
        if not isinstance(other, PolynomialKit):
            return NotImplemented
        return algebra.trim(self._coefficients) == algebra.trim(other._coefficients)

    def __hash__(self) -> int:
        """Hashes the trimmed coefficients, consistent with ``__eq__``."""
        return hash(algebra.trim(self._coefficients))

    def __repr__(self) -> str:
        """Returns the coefficients as strings."""
        return f"PolynomialKit({[str(c) for c in self._coefficients]})"

    def __str__(self) -> str:
        """Renders the polynomial in textual notation."""
        return format_polynomial(self._coefficients)

    def __add__(self, other: PolynomialLike | PolynomialKit) -> PolynomialKit:
        """Same as :meth:`add`."""
        return self.add(other)

    def __mul__(self, other: PolynomialLike | PolynomialKit) -> PolynomialKit:
        """Same as :meth:`multiply`."""
        return self.multiply(other)

    def __pow__(self, n: int) -> PolynomialKit:
        """Same as :meth:`power`."""
        return self.power(n)

    def evaluate(self, x: Numeric) -> Decimal:
        """Returns the value of the polynomial at ``x``."""
        return algebra.evaluate(self._coefficients, x, config=self.config)

    def add(self, *others: PolynomialLike | PolynomialKit) -> PolynomialKit:
        """Returns the sum with the other polynomials."""
        operands = [self._unwrap(o) for o in others]
        return self._wrap(algebra.add(self._coefficients, *operands, config=self.config))

    def multiply(self, *others: PolynomialLike | PolynomialKit) -> PolynomialKit:
        """Returns the product with the other polynomials."""
        operands = [self._unwrap(o) for o in others]
        return self._wrap(algebra.multiply(self._coefficients, *operands, config=self.config))

    def power(self, n: int) -> PolynomialKit:
        """Returns the polynomial raised to the non-negative integer ``n``."""
        return self._wrap(algebra.power(self._coefficients, n, config=self.config))

    def derivative(self) -> PolynomialKit:
        """Returns the exact derivative."""
        return self._wrap(algebra.derivative(self._coefficients, config=self.config))

    def integral(self) -> PolynomialKit:
        """Returns the antiderivative with zero constant term."""
        return self._wrap(algebra.integral(self._coefficients, config=self.config))

    def solve(
        self,
        options: SolverOptions | Mapping[str, Any] | None = None,
        *,
        return_result: bool = False,
    ) -> Decimal | NewtonResult:
        """Finds a root with Newton's method using the exact derivative."""
        return solve_polynomial(
            self._coefficients, options, config=self.config, return_result=return_result
        )

    def to_function(self) -> DecimalFunction:
        """Returns a plain callable ``x -> p(x)``."""
        return algebra.to_function(self._coefficients, config=self.config)
