"""Arbor model layer -- public type re-exports."""

from arbor.model.rule import (
    MediaExpression,
    Rule,
    RuleGroup,
    annotated_rules,
    at_media,
    group,
    media_query,
    rule,
)

__all__ = [
    "MediaExpression",
    "Rule",
    "RuleGroup",
    "annotated_rules",
    "at_media",
    "group",
    "media_query",
    "rule",
]
