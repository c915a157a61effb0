"""Load rule trees from decoded JSON.

JSON mapping:
    array                              -> rule (``["a", {"color": "red"}]``)
    object                             -> declaration
    {"@media": {...}, "rule": [...]}   -> Rule with a media annotation
    {"@media": {...}, "rules": [...]}  -> RuleGroup with a media annotation

The top-level document is either one rule or an array of rules.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from arbor.errors import LoadError
from arbor.model.rule import Rule, RuleGroup

__all__ = ["load_rules", "load_file", "MEDIA_KEY"]

MEDIA_KEY = "@media"


def _is_rule_like(value: Any) -> bool:
    return isinstance(value, list) or (isinstance(value, dict) and MEDIA_KEY in value)


def _convert_media(raw: Any) -> Any:
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, list) and raw and all(isinstance(expr, dict) for expr in raw):
        return raw
    raise LoadError(f"{MEDIA_KEY} must be an object or a non-empty array of objects, got {raw!r}")


def _convert(value: Any) -> Any:
    if isinstance(value, list):
        return [_convert(item) for item in value]
    if isinstance(value, dict) and MEDIA_KEY in value:
        media = _convert_media(value[MEDIA_KEY])
        if "rule" in value:
            items = value["rule"]
            if not isinstance(items, list) or not items:
                raise LoadError(f"'rule' must be a non-empty array, got {items!r}")
            return Rule(items=tuple(_convert(item) for item in items), media=media)
        if "rules" in value:
            rules = value["rules"]
            if not isinstance(rules, list):
                raise LoadError(f"'rules' must be an array, got {rules!r}")
            return RuleGroup(items=tuple(_convert(item) for item in rules), media=media)
        raise LoadError(f"{MEDIA_KEY} object needs a 'rule' or 'rules' key")
    return value


def load_rules(data: Any) -> list[Any]:
    """Convert a decoded JSON document into a list of top-level rules."""
    if not isinstance(data, list):
        if isinstance(data, dict) and MEDIA_KEY in data:
            return [_convert(data)]
        raise LoadError(f"Expected an array of rules, got {type(data).__name__}")
    if not data:
        return []
    if _is_rule_like(data[0]):
        return [_convert(item) for item in data]
    return [_convert(data)]


def load_file(path: str | Path) -> list[Any]:
    """Read a JSON file and convert it with :func:`load_rules`."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise LoadError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})", path=str(path)
        ) from exc
    try:
        return load_rules(data)
    except LoadError as exc:
        raise LoadError(str(exc), path=str(path)) from exc
