"""Top-level convenience wrapper around :class:`~arbor.compiler.Compiler`."""

from __future__ import annotations

from typing import Any

from arbor.config import CompilerConfig, OutputStyle
from arbor.compiler import compile_css


def css(
    *rules: Any,
    output_style: OutputStyle | str | None = None,
    indent_width: int | None = None,
) -> str:
    """Compile any number of rule trees to a CSS string.

    >>> css([".btn", {"color": "red"}], output_style="compressed")
    '.btn{color:red}'
    """
    config = CompilerConfig.from_options(output_style=output_style, indent_width=indent_width)
    return compile_css(*rules, config=config)
