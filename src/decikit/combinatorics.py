"""Factorials, permutations and combinations over plain integers.

These feed the binomial weights of the finite-difference engine. All
arguments and results are Python ``int``, so the values are exact.
"""

from __future__ import annotations

from decikit.utils.validate import validate_non_negative_int

__all__ = [
    "InvalidArgumentError",
    "factorial",
    "permutation",
    "combination",
]


class InvalidArgumentError(ValueError):
    """Raises when a counting function receives ``a < b`` or a negative argument."""


def _counting_argument(value: int, name: str) -> int:
    """Validates a counting argument, reporting negatives as InvalidArgumentError."""
    try:
        return validate_non_negative_int(value, name=name)
    except ValueError as e:
        raise InvalidArgumentError(str(e)) from e


def factorial(n: int) -> int:
    """Returns ``n!``, with ``0! == 1``.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    n = _counting_argument(n, "n")
    product = 1
    for i in range(2, n + 1):
        product *= i
    return product


def permutation(a: int, b: int) -> int:
    """Returns the number of ordered selections of ``b`` items out of ``a``.

    Args:
        a: Size of the pool.
        b: Number of items selected.

    Returns:
        ``a! / (a - b)!``, i.e. the product of the ``b`` consecutive
        integers ending at ``a``.

    Raises:
        InvalidArgumentError: If ``a < b`` or either argument is negative.
    """
    a = _counting_argument(a, "a")
    b = _counting_argument(b, "b")
    if a < b:
        raise InvalidArgumentError(f"Invalid permutation argument: a={a} < b={b}.")
    if b == 0:
        return 1
    if a == b:
        return factorial(a)
    product = 1
    # e.g. (6, 2) -> 5 * 6
    for i in range(a - b + 1, a + 1):
        product *= i
    return product


def combination(a: int, b: int) -> int:
    """Returns the binomial coefficient ``C(a, b)``.

    Uses ``C(a, b) == C(a, a - b)`` to keep the product short.

    Raises:
        InvalidArgumentError: If ``a < b`` or either argument is negative.
    """
    a = _counting_argument(a, "a")
    b = _counting_argument(b, "b")
    if a < b:
        raise InvalidArgumentError(f"Invalid combination argument: a={a} < b={b}.")
    if a == b or b == 0:
        return 1
    if b > a / 2:
        b = a - b
    if b == 1:
        return a
    return permutation(a, b) // factorial(b)
