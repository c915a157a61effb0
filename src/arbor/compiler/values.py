"""Leaf value rendering and the join helpers shared by the compiler."""

from __future__ import annotations

from fractions import Fraction
from typing import Any, Iterable

from arbor.config import COMPRESSED, Punctuation
from arbor.units import CSSFunction, Unit

__all__ = ["render_value", "to_str", "space_join", "comma_join", "is_sequence"]


def is_sequence(value: Any) -> bool:
    """True for lists and tuples, the containers allowed inside a value."""
    return isinstance(value, (list, tuple))


def render_value(value: Any, punctuation: Punctuation) -> str:
    """Render a single leaf value as CSS text.

    ``None`` renders as the empty string; anything without a dedicated
    branch falls back to ``str()``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Fraction):
        return str(float(value))
    if isinstance(value, Unit):
        return str(value)
    if isinstance(value, CSSFunction):
        args = (
            space_join(arg, punctuation) if is_sequence(arg) else render_value(arg, punctuation)
            for arg in value.args
        )
        return f"{value.name}({punctuation.comma.join(args)})"
    return str(value)


def to_str(value: Any) -> str:
    """Render a selector fragment or property name.

    Names never depend on the output style, so the compressed table is used
    for any nested function arguments.
    """
    return render_value(value, COMPRESSED)


def comma_join(values: Iterable[Any], punctuation: Punctuation) -> str:
    return punctuation.comma.join(render_value(v, punctuation) for v in values)


def space_join(values: Iterable[Any], punctuation: Punctuation) -> str:
    """Space-join *values*; a nested list or tuple is comma-joined.

    ``["1px", "solid", "red"]`` -> ``1px solid red``
    ``[["Helvetica", "sans-serif"]]`` -> ``Helvetica, sans-serif``
    """
    return " ".join(
        comma_join(v, punctuation) if is_sequence(v) else render_value(v, punctuation)
        for v in values
    )
