"""End-to-end tests for the two-pass compiler."""

import re

import pytest

from arbor import css
from arbor.config import CompilerConfig, OutputStyle
from arbor.compiler import Compiler, compile_css
from arbor.compiler.media import MediaQueryRegister
from arbor.errors import CompileError
from arbor.model import at_media, rule
from arbor.units import CSSFunction, px


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _compressed(*rules) -> str:
    return compile_css(*rules, config=CompilerConfig(output_style=OutputStyle.COMPRESSED))


def _expanded(*rules, indent_width: int = 2) -> str:
    return compile_css(*rules, config=CompilerConfig(indent_width=indent_width))


# ---------------------------------------------------------------------------
# Plain rules
# ---------------------------------------------------------------------------


class TestSingleRule:
    def test_one_declaration_compressed(self):
        assert _compressed(["a", {"color": "red"}]) == "a{color:red}"

    def test_one_declaration_expanded(self):
        assert _expanded(["a", {"color": "red"}]) == "a {\n  color: red\n}"

    def test_several_declarations(self):
        assert _compressed(["a", {"color": "red", "margin": 0}]) == "a{color:red;margin:0}"
        assert _expanded(["a", {"color": "red", "margin": 0}]) == "a {\n  color: red;\n  margin: 0\n}"

    def test_several_declaration_maps(self):
        assert _compressed(["a", {"x": 1}, {"y": 2}]) == "a{x:1;y:2}"

    def test_empty_declaration_map_ignored(self):
        assert _compressed(["a", {}, {"y": 2}]) == "a{y:2}"

    def test_indent_width(self):
        assert _expanded(["a", {"x": 1}], indent_width=4) == "a {\n    x: 1\n}"

    def test_selector_alternatives(self):
        assert _compressed(["h1", "h2", {"x": 1}]) == "h1,h2{x:1}"
        assert _expanded(["h1", "h2", {"x": 1}]) == "h1, h2 {\n  x: 1\n}"

    def test_nested_properties_and_values(self):
        result = _compressed(
            [".box", {"border": {"width": px(1), "style": "solid"}, "font-family": [["a", "b"]]}]
        )
        assert result == ".box{border-width:1px;border-style:solid;font-family:a,b}"

    def test_function_value(self):
        result = _compressed(["a", {"color": CSSFunction.call("rgb", 1, 2, 3)}])
        assert result == "a{color:rgb(1,2,3)}"

    def test_rule_object_with_doc_renders_in_place(self):
        assert _compressed(rule("a", {"x": 1}, doc="a note")) == "a{x:1}"


class TestTopLevel:
    def test_two_rules_compressed(self):
        assert _compressed(["a", {"x": 1}], ["b", {"y": 2}]) == "a{x:1}b{y:2}"

    def test_two_rules_expanded(self):
        assert _expanded(["a", {"x": 1}], ["b", {"y": 2}]) == "a {\n  x: 1\n}\nb {\n  y: 2\n}"

    def test_nothing_to_render(self):
        assert _compressed() == ""
        assert _compressed(None) == ""

    def test_generator_of_rules(self):
        rules = ([f".m-{i}", {"margin": px(i)}] for i in (1, 2))
        assert _compressed(rules) == ".m-1{margin:1px}.m-2{margin:2px}"

    def test_bare_declaration(self):
        assert _compressed({"color": "red"}) == "color:red"


# ---------------------------------------------------------------------------
# Nesting
# ---------------------------------------------------------------------------


class TestNesting:
    def test_child_rule(self):
        assert _compressed([".a", {"x": 1}, ["span", {"y": 2}]]) == ".a{x:1}.a span{y:2}"

    def test_cartesian_expansion(self):
        result = _compressed([".a", ".b", {"x": 1}, [".c", {"y": 2}]])
        assert result == ".a,.b{x:1}.a .c,.b .c{y:2}"

    def test_cartesian_expansion_expanded(self):
        result = _expanded([".a", ".b", [".c", {"y": 2}]])
        assert result == ".a .c, .b .c {\n  y: 2\n}"

    def test_parent_reference(self):
        result = _compressed([".btn", {"color": "red"}, ["&:hover", {"color": "blue"}]])
        assert result == ".btn{color:red}.btn:hover{color:blue}"

    def test_deep_parent_reference(self):
        result = _compressed(["nav", ["a", ["&.active", {"x": 1}]]])
        assert result == "nav a.active{x:1}"

    def test_rule_without_declarations_renders_children(self):
        assert _compressed([".a", [".b", {"x": 1}]]) == ".a .b{x:1}"

    def test_rule_without_selector_renders_nothing_itself(self):
        assert _compressed([{"x": 1}]) == ""

    def test_selectorless_rule_children_render_without_context(self):
        assert _compressed([{"x": 1}, ["b", {"y": 2}]]) == "b{y:2}"

    def test_spliced_children(self):
        result = _compressed(["ul", (["li", {"x": i}] for i in (1, 2))])
        assert result == "ul li{x:1}ul li{x:2}"

    def test_empty_rule_fails_fast(self):
        with pytest.raises(CompileError):
            _compressed([])

    def test_nested_empty_rule_fails_fast(self):
        with pytest.raises(CompileError):
            _compressed(["a", {"x": 1}, []])


# ---------------------------------------------------------------------------
# Media queries
# ---------------------------------------------------------------------------


class TestMediaQueries:
    def test_media_only(self):
        assert _compressed(rule("a", {"x": 1}, media={"screen": True})) == "@media screen{a{x:1}}"

    def test_sibling_media_rules_in_encounter_order(self):
        result = _compressed(
            rule("a", {"x": 1}, media={"screen": True}),
            rule("b", {"y": 2}, media={"print": True}),
            ["c", {"z": 3}],
        )
        assert result == "c{z:3}@media screen{a{x:1}}@media print{b{y:2}}"

    def test_nested_media_rule_keeps_context(self):
        result = _compressed([".a", {"x": 1}, rule(".b", {"y": 2}, media={"max-width": "600px"})])
        assert result == ".a{x:1}@media (max-width:600px){.a .b{y:2}}"

    def test_media_parent_reference(self):
        result = _compressed([".btn", rule("&:hover", {"x": 1}, media={"hover": "hover"})])
        assert result == "@media (hover:hover){.btn:hover{x:1}}"

    def test_depth_first_order(self):
        result = _compressed(
            [
                ".p",
                rule(".x", {"a": 1}, media={"m1": True}),
                [".q", rule(".y", {"b": 2}, media={"m2": True})],
            ],
            rule(".z", {"c": 3}, media={"m3": True}),
        )
        assert result == "@media m1{.p .x{a:1}}@media m2{.p .q .y{b:2}}@media m3{.z{c:3}}"

    def test_media_inside_media_is_drained_later(self):
        result = _compressed(
            rule(".a", {"x": 1}, rule(".b", {"y": 2}, media={"print": True}), media={"screen": True}),
            rule(".c", {"z": 3}, media={"tv": True}),
        )
        assert result == "@media screen{.a{x:1}}@media tv{.c{z:3}}@media print{.a .b{y:2}}"

    def test_group_of_rules(self):
        result = _compressed(at_media({"print": True}, ["a", {"x": 1}], ["b", {"y": 2}]))
        assert result == "@media print{a{x:1}b{y:2}}"

    def test_bare_declarations_under_media(self):
        result = _compressed([".a", {"color": "red"}, at_media({"max-width": "600px"}, {"color": "blue"})])
        assert result == ".a{color:red}@media (max-width:600px){.a{color:blue}}"

    def test_several_expressions(self):
        result = _compressed(rule("a", {"x": 1}, media=[{"screen": True}, {"print": True}]))
        assert result == "@media screen,print{a{x:1}}"

    def test_empty_media_renders_in_place(self):
        assert _compressed(rule("a", {"x": 1}, media={})) == "a{x:1}"

    def test_expanded_media_block(self):
        result = _expanded(["a", {"x": 1}], rule("b", {"y": 2}, media={"screen": True}))
        assert result == "a {\n  x: 1\n}\n@media screen {\n  b {\n    y: 2\n  }\n}"

    def test_expanded_feature_value(self):
        result = _expanded(rule("b", {"y": 2}, media={"min-width": px(100)}))
        assert result.startswith("@media (min-width: 100px) {\n")


# ---------------------------------------------------------------------------
# Compiler lifecycle
# ---------------------------------------------------------------------------


class TestCompilerLifecycle:
    def test_register_does_not_leak_between_calls(self):
        compiler = Compiler(CompilerConfig(output_style="compressed"))
        first = compiler.compile(rule("a", {"x": 1}, media={"screen": True}))
        second = compiler.compile(["b", {"y": 2}])
        assert first == "@media screen{a{x:1}}"
        assert second == "b{y:2}"

    def test_deterministic(self):
        tree = (
            [".a", ".b", {"x": 1}, ["&:hover", {"y": 2}], rule(".c", {"z": 3}, media={"print": True})],
            ["d", {"w": [px(1), "solid"]}],
        )
        assert _compressed(*tree) == _compressed(*tree)
        assert _expanded(*tree) == _expanded(*tree)

    def test_styles_differ_only_in_whitespace(self):
        tree = (
            [".a", ".b", {"x": 1, "font": {"size": px(2)}}, [".c", {"y": 2}]],
            rule("d", {"z": 3}, media={"screen": True, "max-width": "9px"}),
        )
        compressed = _compressed(*tree)
        expanded = _expanded(*tree)
        assert compressed != expanded
        assert re.sub(r"\s+", "", expanded) == re.sub(r"\s+", "", compressed)

    def test_render_rule_defers_to_given_register(self):
        compiler = Compiler()
        register = MediaQueryRegister()
        text = compiler.render_rule(rule("a", {"x": 1}, media={"print": True}), [[".p"]], register)
        assert text == ""
        [entry] = register.drain()
        assert entry.context == ((".p",),)
        assert entry.rules[0].media is None


class TestCssWrapper:
    def test_default_is_expanded(self):
        assert css(["a", {"x": 1}]) == "a {\n  x: 1\n}"

    def test_compressed_option(self):
        assert css(["a", {"x": 1}], output_style="compressed") == "a{x:1}"

    def test_indent_option(self):
        assert css(["a", {"x": 1}], indent_width=3) == "a {\n   x: 1\n}"
