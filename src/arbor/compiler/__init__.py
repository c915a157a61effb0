"""Stylesheet compiler: rule trees in, CSS text out."""

from arbor.compiler.compiler import Compiler, compile_css
from arbor.compiler.declarations import flatten_declaration, render_declaration
from arbor.compiler.media import (
    MediaQueryEntry,
    MediaQueryRegister,
    make_media_expression,
    media_expression,
)
from arbor.compiler.rules import divide_rule, expand_selector, extract_reference
from arbor.compiler.values import render_value

__all__ = [
    "Compiler",
    "compile_css",
    "flatten_declaration",
    "render_declaration",
    "MediaQueryEntry",
    "MediaQueryRegister",
    "make_media_expression",
    "media_expression",
    "divide_rule",
    "expand_selector",
    "extract_reference",
    "render_value",
]
