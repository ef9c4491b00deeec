"""Options accepted by the Newton solvers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from decikit.utils.types import Numeric
from decikit.utils.validate import as_decimal, validate_non_negative_int

__all__ = [
    "SolverOptions",
    "names_option",
    "resolve_options",
]

# Accepted spellings for each option, mapped onto the dataclass fields.
_ALIASES = {
    "starting_point": "starting_point",
    "startingPoint": "starting_point",
    "x": "starting_point",
    "x0": "starting_point",
    "max_iterations": "max_iterations",
    "maxIterations": "max_iterations",
    "iterations": "max_iterations",
    "strict": "strict",
}


@dataclass(frozen=True)
class SolverOptions:
    """Search origin and termination settings for Newton's method.

    Attributes:
        starting_point: Initial guess. Defaults to ``0``.
        max_iterations: Iteration budget. Defaults to ``1000``.
        strict: If True, running out of iterations raises
            :class:`~decikit.solvers.newton.ConvergenceError` instead of
            returning the last iterate.
    """

    starting_point: Decimal = Decimal(0)
    max_iterations: int = 1000
    strict: bool = False

    def __post_init__(self) -> None:
        """Coerces the starting point and checks the iteration budget."""
        object.__setattr__(
            self, "starting_point", as_decimal(self.starting_point, name="starting_point")
        )
        object.__setattr__(
            self,
            "max_iterations",
            validate_non_negative_int(self.max_iterations, name="max_iterations"),
        )
        if not isinstance(self.strict, bool):
            raise TypeError(f"strict must be a bool; got {type(self.strict).__name__}.")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> SolverOptions:
        """Builds options from a mapping, filling in defaults.

        Both ``starting_point``/``max_iterations`` and the short spellings
        ``x``/``startingPoint`` and ``iterations``/``maxIterations`` are
        recognised.

        Raises:
            ValueError: On unknown keys or when two spellings of the same
                option are given.
        """
        if mapping is None:
            return cls()
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            field_name = _ALIASES.get(key)
            if field_name is None:
                known = ", ".join(sorted(_ALIASES))
                raise ValueError(f"Unknown solver option {key!r}. Choose one of {{{known}}}.")
            if field_name in kwargs:
                raise ValueError(f"Solver option {field_name!r} given more than once.")
            kwargs[field_name] = value
        return cls(**kwargs)


def names_option(mapping: Mapping[str, Any], field_name: str) -> bool:
    """Returns True if any key of ``mapping`` is a spelling of ``field_name``."""
    return any(_ALIASES.get(key) == field_name for key in mapping)


def resolve_options(
    options: SolverOptions | Mapping[str, Any] | None = None,
    *,
    starting_point: Numeric | None = None,
    max_iterations: int | None = None,
) -> SolverOptions:
    """Merges an options object or mapping with keyword overrides."""
    if isinstance(options, SolverOptions):
        opts = options
    else:
        opts = SolverOptions.from_mapping(options)
    if starting_point is None and max_iterations is None:
        return opts
    return SolverOptions(
        starting_point=opts.starting_point if starting_point is None else starting_point,
        max_iterations=opts.max_iterations if max_iterations is None else max_iterations,
        strict=opts.strict,
    )
