"""Rule division and selector expansion."""

from __future__ import annotations

import itertools
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from arbor.config import Punctuation
from arbor.compiler.values import to_str
from arbor.errors import CompileError
from arbor.model.rule import Rule, RuleGroup, media_query

__all__ = [
    "SelectorContext",
    "divide_rule",
    "expand_selector",
    "extract_reference",
    "is_collection",
    "is_rule",
    "render_selector",
    "splice",
]

logger = logging.getLogger(__name__)

# One fragment list per expanded ancestor selector.
SelectorContext = list[list[Any]]

_REFERENCE_RE = re.compile(r"^&.+|^&$", re.DOTALL)


def is_collection(item: Any) -> bool:
    """True for anything that ends a rule's selector head."""
    if isinstance(item, (str, bytes)):
        return False
    if isinstance(item, (Mapping, Rule, RuleGroup)):
        return True
    return isinstance(item, Iterable)


def is_rule(item: Any) -> bool:
    """True for child positions rendered as rules rather than spliced."""
    if isinstance(item, (list, Rule)):
        return True
    return isinstance(item, RuleGroup) and media_query(item) is not None


def splice(items: Iterable[Any]) -> Iterator[Any]:
    """Yield *items*, expanding splice sequences in place, recursively.

    Tuples, generators and unannotated groups splice; lists, rules and
    mappings are yielded as they are.
    """
    for item in items:
        if isinstance(item, RuleGroup) and media_query(item) is None:
            yield from splice(item.items)
        elif is_collection(item) and not is_rule(item) and not isinstance(item, Mapping):
            yield from splice(item)
        else:
            yield item


def divide_rule(rule: Any) -> tuple[list[Any], list[Mapping[Any, Any]], list[Any]]:
    """Divide a rule into its selector head, declarations and child rules.

    The head is the run of leading non-collection items. Unclassifiable
    items after the head are skipped.
    """
    items = list(rule.items) if isinstance(rule, Rule) else list(rule)
    if not items:
        raise CompileError("Rule has no selector, declarations or children", rule=rule)

    head = list(itertools.takewhile(lambda item: not is_collection(item), items))
    selector = head
    declarations: list[Mapping[Any, Any]] = []
    children: list[Any] = []
    for child in splice(items[len(head):]):
        if isinstance(child, Mapping):
            declarations.append(child)
        elif is_rule(child):
            children.append(child)
        else:
            logger.debug("Skipping unclassifiable item %r in rule %r", child, selector)
    return selector, declarations, children


def extract_reference(fragments: list[Any]) -> str | None:
    """Return the suffix of a trailing ``&`` parent reference, if present.

    ``["a", "&:hover"]`` -> ``":hover"``; ``["a", "&"]`` -> ``""``.
    """
    if not fragments:
        return None
    match = _REFERENCE_RE.match(to_str(fragments[-1]))
    if match is None:
        return None
    return match.group(0)[1:]


def expand_selector(selector: list[Any], context: SelectorContext) -> SelectorContext:
    """Combine *selector* with every ancestor selector in *context*.

    With a context the result is the cartesian product, ancestor-major.
    A trailing parent reference is glued onto the last ancestor fragment.
    """
    if context:
        combined = [list(parent) + [fragment] for parent, fragment in itertools.product(context, selector)]
    else:
        combined = [[fragment] for fragment in selector]

    expanded: SelectorContext = []
    for fragments in combined:
        reference = extract_reference(fragments)
        if reference is None:
            expanded.append(fragments)
            continue
        parent = fragments[:-1]
        if parent:
            expanded.append(parent[:-1] + [to_str(parent[-1]) + reference])
        else:
            expanded.append([reference])
    return expanded


def render_selector(context: SelectorContext, punctuation: Punctuation) -> str:
    """Render expanded selectors: fragments space-joined, selectors comma-joined."""
    return punctuation.comma.join(
        " ".join(to_str(fragment) for fragment in fragments) for fragments in context
    )
