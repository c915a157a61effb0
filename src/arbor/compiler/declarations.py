"""Declaration flattening and rendering.

Nested mappings express shared property prefixes::

    {"font": {"family": "serif", "size": "12px"}}
    -> {"font-family": "serif", "font-size": "12px"}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from arbor.config import Punctuation
from arbor.compiler.values import is_sequence, render_value, space_join, to_str

__all__ = ["flatten_declaration", "make_declaration", "render_declaration"]


def flatten_declaration(declaration: Mapping[Any, Any]) -> dict[str, Any]:
    """Expand nested property mappings into dashed property names.

    Keys keep the position of their first assignment; a later duplicate
    overwrites the value. Flattening a flat mapping returns an equal mapping.
    """
    flat: dict[str, Any] = {}
    for prop, value in declaration.items():
        name = to_str(prop)
        if isinstance(value, Mapping):
            for inner, inner_value in flatten_declaration(value).items():
                flat[f"{name}-{inner}"] = inner_value
        else:
            flat[name] = value
    return flat


def make_declaration(prop: str, value: Any, punctuation: Punctuation, indent: str = "") -> str:
    """Render one ``prop:value`` pair.

    A list or tuple value is space-joined; a nested one is comma-joined.
    """
    text = space_join(value, punctuation) if is_sequence(value) else render_value(value, punctuation)
    return f"{indent}{prop}{punctuation.colon}{text}"


def render_declaration(
    declaration: Mapping[Any, Any], punctuation: Punctuation, indent: str = ""
) -> str:
    """Flatten *declaration* and render its pairs joined by semicolons."""
    return punctuation.semicolon.join(
        make_declaration(prop, value, punctuation, indent)
        for prop, value in flatten_declaration(declaration).items()
    )
