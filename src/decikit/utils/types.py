"""Shared typing aliases for DeciKit."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

Numeric: TypeAlias = Decimal | int | float | str | np.integer | np.floating
Polynomial: TypeAlias = tuple[Decimal, ...]
PolynomialLike: TypeAlias = Sequence[Numeric] | NDArray
DecimalFunction: TypeAlias = Callable[[Decimal], Decimal]
