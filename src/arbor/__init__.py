"""Arbor -- compile nested Python rule trees into CSS."""

__version__ = "0.1.0"

from arbor.config import CompilerConfig, OutputStyle  # noqa: E402
from arbor.core import css  # noqa: E402
from arbor.compiler import Compiler, compile_css  # noqa: E402
from arbor.errors import ArborError, CompileError, ConfigError, LoadError  # noqa: E402
from arbor.model import Rule, RuleGroup, at_media, group, rule  # noqa: E402
from arbor.units import CSSFunction, Unit  # noqa: E402

__all__ = [
    "__version__",
    "css",
    "compile_css",
    "Compiler",
    "CompilerConfig",
    "OutputStyle",
    "Rule",
    "RuleGroup",
    "rule",
    "group",
    "at_media",
    "Unit",
    "CSSFunction",
    "ArborError",
    "CompileError",
    "ConfigError",
    "LoadError",
]
