"""Media-query register and media expression rendering.

Rules annotated with a media expression are not rendered where they appear.
They are collected in a :class:`MediaQueryRegister` during the first pass of
a compile and rendered as ``@media`` blocks afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterator, Mapping
from typing import Any

from arbor.config import COMPRESSED, Punctuation
from arbor.compiler.values import to_str
from arbor.model.rule import MediaExpression

__all__ = ["MediaQueryEntry", "MediaQueryRegister", "make_media_expression", "media_expression"]


@dataclass(frozen=True)
class MediaQueryEntry:
    """A deferred media block: expression, rules and the selector context they belong to."""

    expression: MediaExpression
    rules: tuple[Any, ...]
    context: tuple[tuple[Any, ...], ...] = ()


class MediaQueryRegister:
    """Append-only buffer of deferred media blocks for one compile call."""

    def __init__(self) -> None:
        self._entries: list[MediaQueryEntry] = []

    def add(self, expression: MediaExpression, rules: list[Any], context: list[list[Any]] | None = None) -> MediaQueryEntry:
        """Record *rules* for rendering under *expression* and *context*."""
        entry = MediaQueryEntry(
            expression=expression,
            rules=tuple(rules),
            context=tuple(tuple(fragments) for fragments in context or ()),
        )
        self._entries.append(entry)
        return entry

    def drain(self) -> list[MediaQueryEntry]:
        """Remove and return every entry in insertion order."""
        entries, self._entries = self._entries, []
        return entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[MediaQueryEntry]:
        return iter(list(self._entries))

    def __repr__(self) -> str:
        return f"MediaQueryRegister(entries={len(self._entries)})"


def _feature(feature: Any, value: Any, punctuation: Punctuation) -> str:
    name = to_str(feature)
    if value is True:
        return name
    if value is False:
        return f"not {name}"
    text = to_str(value)
    if text == "only":
        return f"only {name}"
    if value is not None and text:
        return f"({name}{punctuation.colon}{text})"
    return f"({name})"


def make_media_expression(*expressions: Mapping[Any, Any], punctuation: Punctuation = COMPRESSED) -> str:
    """Render one or more feature mappings as a media query expression.

    Keys are not validated. Values translate as follows:

        ``{"screen": True}``     -> ``screen``
        ``{"screen": False}``    -> ``not screen``
        ``{"screen": "only"}``   -> ``only screen``
        ``{"max-width": "600px"}`` -> ``(max-width:600px)``
        ``{"color": None}``      -> ``(color)``

    Pairs within a mapping are joined with `` and ``; several mappings are
    comma-joined.
    """
    return punctuation.comma.join(
        " and ".join(_feature(feature, value, punctuation) for feature, value in expression.items())
        for expression in expressions
    )


def media_expression(expression: MediaExpression, punctuation: Punctuation = COMPRESSED) -> str:
    """Render an annotation that is either one mapping or a sequence of them."""
    if isinstance(expression, Mapping):
        return make_media_expression(expression, punctuation=punctuation)
    return make_media_expression(*expression, punctuation=punctuation)
