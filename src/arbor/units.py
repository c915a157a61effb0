"""Leaf value types: unit-tagged numbers and CSS function calls.

These are opaque to the compiler; it only needs to turn them into text.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable

__all__ = [
    "Unit",
    "CSSFunction",
    "format_number",
    "px",
    "em",
    "rem",
    "percent",
    "vw",
    "vh",
    "pt",
    "deg",
    "ms",
    "s",
]


def format_number(number: Any) -> str:
    """Format a magnitude the way CSS expects it.

    Fractions become floats and integral floats lose their ``.0``.
    """
    if isinstance(number, Fraction):
        number = float(number)
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


@dataclass(frozen=True)
class Unit:
    """A number tagged with a CSS unit, e.g. ``Unit(10, "px")``."""

    magnitude: int | float | Fraction
    unit: str

    def __post_init__(self) -> None:
        if not self.unit:
            raise ValueError("Unit must have a non-empty unit name")

    def __str__(self) -> str:
        return f"{format_number(self.magnitude)}{self.unit}"


@dataclass(frozen=True)
class CSSFunction:
    """A CSS function call expression, e.g. ``CSSFunction("rgba", (0, 0, 0, 0.5))``."""

    name: str
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("CSSFunction name must be a non-empty string")
        if not isinstance(self.args, tuple):
            object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def call(cls, name: str, *args: Any) -> CSSFunction:
        return cls(name=name, args=args)


def _unit(name: str, func_name: str = "") -> Callable[[int | float | Fraction], Unit]:
    def make(magnitude: int | float | Fraction) -> Unit:
        return Unit(magnitude, name)

    make.__name__ = func_name or name
    make.__doc__ = f"Return *magnitude* tagged with ``{name}``."
    return make


px = _unit("px")
em = _unit("em")
rem = _unit("rem")
percent = _unit("%", "percent")
vw = _unit("vw")
vh = _unit("vh")
pt = _unit("pt")
deg = _unit("deg")
ms = _unit("ms")
s = _unit("s")
