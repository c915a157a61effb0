"""Two-pass stylesheet compiler.

Pass one renders the rule tree, diverting media-annotated rules into a
:class:`MediaQueryRegister`. Pass two drains the register into ``@media``
blocks appended after the top-level rules.
"""

from __future__ import annotations

import logging
import textwrap
from collections.abc import Iterable, Mapping
from typing import Any

from arbor.config import CompilerConfig
from arbor.compiler.declarations import render_declaration
from arbor.compiler.media import MediaQueryRegister, media_expression
from arbor.compiler.rules import (
    SelectorContext,
    divide_rule,
    expand_selector,
    is_rule,
    render_selector,
    splice,
)
from arbor.compiler.values import render_value
from arbor.model.rule import MediaExpression, Rule, RuleGroup, annotated_rules, media_query

__all__ = ["Compiler", "compile_css"]

logger = logging.getLogger(__name__)


class Compiler:
    """Renders rule trees to CSS with a fixed configuration.

    A compiler holds no per-compile state: each :meth:`compile` call creates
    its own register and passes it down explicitly.
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        self.config = config or CompilerConfig()
        self.punctuation = self.config.punctuation

    # --- entry point ----------------------------------------------------------

    def compile(self, *rules: Any) -> str:
        """Render *rules* followed by any ``@media`` blocks they produced."""
        register = MediaQueryRegister()
        top_level = self.render_css(rules, register)
        media_queries = self.render_media_queries(register)
        if not media_queries:
            return top_level
        if top_level:
            return top_level + self.punctuation.rule_separator + media_queries
        return media_queries

    # --- value dispatch -------------------------------------------------------

    def render_css(self, value: Any, register: MediaQueryRegister) -> str:
        """Render any node of a rule tree.

        Rules render with an empty selector context, mappings render as
        declarations, other sequences render element by element.
        """
        if value is None:
            return ""
        if isinstance(value, (list, Rule)):
            return self.render_rule(value, [], register)
        if isinstance(value, RuleGroup) and media_query(value) is not None:
            self._defer(value, [], register)
            return ""
        if isinstance(value, RuleGroup):
            return self._render_sequence(value.items, register)
        if isinstance(value, Mapping):
            return render_declaration(value, self.punctuation, self.config.indent())
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return self._render_sequence(value, register)
        return render_value(value, self.punctuation)

    def _render_sequence(self, values: Iterable[Any], register: MediaQueryRegister) -> str:
        rendered = (self.render_css(value, register) for value in values)
        return self.punctuation.newline.join(text for text in rendered if text)

    # --- rules ----------------------------------------------------------------

    def render_rule(
        self, rule: Any, context: SelectorContext, register: MediaQueryRegister
    ) -> str:
        """Render *rule* and its descendants under *context*.

        Returns the empty string when the rule was deferred to *register* or
        has nothing to render.
        """
        if media_query(rule) is not None:
            self._defer(rule, context, register)
            return ""

        selector, declarations, children = divide_rule(rule)
        new_context = expand_selector(selector, context)

        parts: list[str] = []
        if selector and declarations:
            parts.append(self.make_rule(new_context, declarations))
        for child in children:
            text = self.render_rule(child, new_context, register)
            if text:
                parts.append(text)
        return self.punctuation.rule_separator.join(parts)

    def make_rule(self, context: SelectorContext, declarations: list[Mapping[Any, Any]]) -> str:
        p = self.punctuation
        rendered = (render_declaration(declaration, p, self.config.indent()) for declaration in declarations)
        body = p.semicolon.join(text for text in rendered if text)
        return f"{render_selector(context, p)}{p.left_brace}{body}{p.right_brace}"

    def _defer(
        self, node: Rule | RuleGroup, context: SelectorContext, register: MediaQueryRegister
    ) -> None:
        expression = media_query(node)
        rules = annotated_rules(node)
        register.add(expression, rules, context)
        logger.debug(
            "Deferred %d rule(s) to @media %s (context=%r)",
            len(rules),
            media_expression(expression),
            context,
        )

    # --- media queries --------------------------------------------------------

    def make_media_query(
        self,
        expression: MediaExpression,
        rules: Iterable[Any],
        context: SelectorContext,
        register: MediaQueryRegister,
    ) -> str:
        """Render *rules* under *context* wrapped in one ``@media`` block.

        Bare declaration mappings among *rules* apply to the context selector.
        """
        p = self.punctuation
        declarations: list[Mapping[Any, Any]] = []
        rendered: list[str] = []
        for node in splice(rules):
            if isinstance(node, Mapping):
                declarations.append(node)
            elif is_rule(node):
                rendered.append(self.render_rule(node, context, register))
        if context and declarations:
            rendered.insert(0, self.make_rule(context, declarations))
        body = p.rule_separator.join(text for text in rendered if text)
        if not self.config.compressed:
            body = textwrap.indent(body, self.config.indent())
        return f"@media {media_expression(expression, p)}{p.media_left_brace}{body}{p.media_right_brace}"

    def render_media_queries(self, register: MediaQueryRegister) -> str:
        """Drain *register* into ``@media`` blocks until it stays empty.

        Media rules nested inside a deferred rule are deferred again while
        their parent block renders and are picked up by a later drain.
        """
        blocks: list[str] = []
        while register:
            entries = register.drain()
            logger.debug("Rendering %d deferred media block(s)", len(entries))
            for entry in entries:
                context = [list(fragments) for fragments in entry.context]
                blocks.append(self.make_media_query(entry.expression, entry.rules, context, register))
        return self.punctuation.rule_separator.join(blocks)


def compile_css(*rules: Any, config: CompilerConfig | None = None) -> str:
    """Compile *rules* to CSS text using *config* (expanded output by default)."""
    return Compiler(config).compile(*rules)
