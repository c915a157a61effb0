"""Rule tree model: Rule and RuleGroup dataclasses plus authoring helpers.

A plain ``list`` is also a rule (one without annotations); ``Rule`` exists so
that a rule can carry a media annotation as an explicit field.

Example::

    rule(".btn", {"color": "red"},
         rule("&:hover", {"color": "blue"}),
         rule(".icon", {"display": "none"}, media={"max-width": "600px"}))
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Sequence, Union

# One feature mapping, or several of them OR-ed together.
MediaExpression = Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]


@dataclass(frozen=True)
class Rule:
    """A selector head, declarations and child rules, in authoring order.

    Attributes:
        items: Leading selector fragments followed by declaration mappings,
            child rules and splice sequences.
        media: Media expression; when set the rule is rendered inside an
            ``@media`` block instead of in place.
        doc: Free-form note attached to the rule; never rendered.
    """

    items: tuple[Any, ...]
    media: MediaExpression | None = None
    doc: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise ValueError("Rule must have at least a selector or a declaration")

    def without_annotations(self) -> Rule:
        """Return a copy with ``media`` and ``doc`` stripped."""
        return replace(self, media=None, doc=None)


@dataclass(frozen=True)
class RuleGroup:
    """A sequence of sibling rules, optionally sharing a media annotation.

    Inside a rule an unannotated group is spliced into its parent; an
    annotated group is deferred as a whole to one ``@media`` block.
    """

    items: tuple[Any, ...]
    media: MediaExpression | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


def rule(
    *items: Any, media: MediaExpression | None = None, doc: str | None = None
) -> Rule:
    """Build a :class:`Rule` from positional items."""
    return Rule(items=items, media=media, doc=doc)


def group(*rules: Any, media: MediaExpression | None = None) -> RuleGroup:
    """Build a :class:`RuleGroup` from positional rules."""
    return RuleGroup(items=rules, media=media)


def at_media(expression: MediaExpression, *rules: Any) -> RuleGroup:
    """Wrap *rules* in a media annotation."""
    return RuleGroup(items=rules, media=expression)


def media_query(node: Any) -> MediaExpression | None:
    """Return the media annotation carried by *node*, if any.

    Empty annotations count as none.
    """
    if isinstance(node, (Rule, RuleGroup)):
        return node.media or None
    return None


def annotated_rules(node: Rule | RuleGroup) -> list[Any]:
    """Return the rules to store for a deferred *node*, annotations stripped."""
    if isinstance(node, RuleGroup):
        return list(node.items)
    return [node.without_annotations()]

