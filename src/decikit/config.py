"""Numeric configuration shared by every DeciKit engine.

A :class:`NumericConfig` fixes the significant-digit precision of the
decimal arithmetic and the finite-difference step size ``epsilon``. All
constants derived from ``epsilon`` are computed once, in the config's own
decimal context, when the config is built.

Engines take an optional ``config`` keyword. Passing ``None`` selects
:data:`DEFAULT_CONFIG` (100 significant digits, ``epsilon = 1e-7``).

Examples:
    >>> from decimal import Decimal
    >>> from decikit.config import NumericConfig
    >>> cfg = NumericConfig(precision=50, epsilon=Decimal("1e-5"))
    >>> cfg.over_epsilon == 100000
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Context, Decimal, localcontext

from decikit.utils.validate import as_decimal

__all__ = [
    "NumericConfig",
    "DEFAULT_CONFIG",
    "resolve_config",
]


@dataclass(frozen=True)
class NumericConfig:
    """Immutable precision and step-size settings.

    Attributes:
        precision: Number of significant digits used by every decimal
            operation performed by the engines.
        epsilon: Finite-difference step size. Also sets the solver
            convergence threshold through ``epsilon_max``.
        tolerance_exponent: Power of ``epsilon`` used as the absolute
            residual threshold of the Newton solvers.
    """

    precision: int = 100
    epsilon: Decimal = Decimal("1e-7")
    tolerance_exponent: int = 10

    epsilon_2: Decimal = field(init=False, repr=False, compare=False)
    epsilon_3: Decimal = field(init=False, repr=False, compare=False)
    epsilon_max: Decimal = field(init=False, repr=False, compare=False)
    two_epsilon: Decimal = field(init=False, repr=False, compare=False)
    three_epsilon: Decimal = field(init=False, repr=False, compare=False)
    over_epsilon: Decimal = field(init=False, repr=False, compare=False)
    over_epsilon_2: Decimal = field(init=False, repr=False, compare=False)
    over_epsilon_3: Decimal = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validates the settings and precomputes the epsilon family."""
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ValueError(f"precision must be an int; got {self.precision!r}.")
        if self.precision < 1:
            raise ValueError(f"precision must be positive; got {self.precision}.")
        if isinstance(self.tolerance_exponent, bool) or not isinstance(self.tolerance_exponent, int):
            raise ValueError(
                f"tolerance_exponent must be an int; got {self.tolerance_exponent!r}."
            )
        if self.tolerance_exponent < 1:
            raise ValueError(
                f"tolerance_exponent must be positive; got {self.tolerance_exponent}."
            )

        eps = as_decimal(self.epsilon, name="epsilon")
        if eps <= 0:
            raise ValueError(f"epsilon must be positive; got {eps}.")

        # frozen dataclass: derived fields are written through object.__setattr__
        set_ = object.__setattr__
        set_(self, "epsilon", eps)
        with localcontext(self.context):
            over = 1 / eps
            set_(self, "epsilon_2", eps ** 2)
            set_(self, "epsilon_3", eps ** 3)
            set_(self, "epsilon_max", eps ** self.tolerance_exponent)
            set_(self, "two_epsilon", eps * 2)
            set_(self, "three_epsilon", eps * 3)
            set_(self, "over_epsilon", over)
            set_(self, "over_epsilon_2", over ** 2)
            set_(self, "over_epsilon_3", over ** 3)

    @property
    def context(self) -> Context:
        """A fresh decimal context carrying the configured precision."""
        return Context(prec=self.precision)

    def epsilon_power(self, n: int) -> Decimal:
        """Returns ``epsilon ** n`` at the configured precision."""
        with localcontext(self.context):
            return self.epsilon ** n

    def over_epsilon_power(self, n: int) -> Decimal:
        """Returns ``(1 / epsilon) ** n`` at the configured precision."""
        with localcontext(self.context):
            return self.over_epsilon ** n


DEFAULT_CONFIG = NumericConfig()


def resolve_config(config: NumericConfig | None) -> NumericConfig:
    """Returns ``config``, or :data:`DEFAULT_CONFIG` when it is ``None``."""
    if config is None:
        return DEFAULT_CONFIG
    if not isinstance(config, NumericConfig):
        raise TypeError(
            f"config must be a NumericConfig or None; got {type(config).__name__}."
        )
    return config
