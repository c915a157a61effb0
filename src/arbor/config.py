"""Compiler configuration: output style, indentation and punctuation tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from arbor.errors import ConfigError


class OutputStyle(Enum):
    """How much whitespace the compiler emits."""

    EXPANDED = "expanded"
    COMPRESSED = "compressed"


@dataclass(frozen=True)
class Punctuation:
    """The separator tokens used while rendering one stylesheet."""

    comma: str
    colon: str
    semicolon: str
    left_brace: str
    right_brace: str
    media_left_brace: str
    media_right_brace: str
    rule_separator: str
    newline: str


COMPRESSED = Punctuation(
    comma=",",
    colon=":",
    semicolon=";",
    left_brace="{",
    right_brace="}",
    media_left_brace="{",
    media_right_brace="}",
    rule_separator="",
    newline="",
)

EXPANDED = Punctuation(
    comma=", ",
    colon=": ",
    semicolon=";\n",
    left_brace=" {\n",
    right_brace="\n}",
    media_left_brace=" {\n",
    media_right_brace="\n}",
    rule_separator="\n",
    newline="\n",
)


@dataclass(frozen=True)
class CompilerConfig:
    """Options consulted while rendering.

    Attributes:
        output_style: ``OutputStyle.EXPANDED`` (default) or ``OutputStyle.COMPRESSED``.
            A style name string is accepted and coerced.
        indent_width: Spaces per nesting level for declarations and
            ``@media`` bodies. Ignored when compressed.
    """

    output_style: OutputStyle = OutputStyle.EXPANDED
    indent_width: int = 2

    def __post_init__(self) -> None:
        if not isinstance(self.output_style, OutputStyle):
            try:
                style = OutputStyle(str(self.output_style).lower())
            except ValueError:
                names = ", ".join(s.value for s in OutputStyle)
                raise ConfigError(
                    f"Unknown output style {self.output_style!r} (expected one of: {names})"
                ) from None
            object.__setattr__(self, "output_style", style)
        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int):
            raise ConfigError(f"indent_width must be an int, got {self.indent_width!r}")
        if self.indent_width < 0:
            raise ConfigError(f"indent_width must be >= 0, got {self.indent_width}")

    @classmethod
    def from_options(
        cls,
        output_style: OutputStyle | str | None = None,
        indent_width: int | None = None,
    ) -> CompilerConfig:
        """Build a config, keeping the defaults for options left as ``None``."""
        kwargs: dict[str, object] = {}
        if output_style is not None:
            kwargs["output_style"] = output_style
        if indent_width is not None:
            kwargs["indent_width"] = indent_width
        return cls(**kwargs)  # type: ignore[arg-type]

    @property
    def compressed(self) -> bool:
        return self.output_style is OutputStyle.COMPRESSED

    @property
    def punctuation(self) -> Punctuation:
        return COMPRESSED if self.compressed else EXPANDED

    def indent(self, levels: int = 1) -> str:
        """Return the indentation prefix for *levels* nesting levels."""
        if self.compressed:
            return ""
        return " " * (self.indent_width * levels)
