"""Error types raised by the compiler, configuration and loader."""

from __future__ import annotations

from typing import Any


class ArborError(Exception):
    """Base class for all arbor errors."""


class CompileError(ArborError):
    """Raised when a rule tree violates the minimal structural contract."""

    def __init__(self, message: str, rule: Any = None) -> None:
        self.rule = rule
        super().__init__(message)


class ConfigError(ArborError):
    """Raised for an unknown output style or an invalid indent width."""


class LoadError(ArborError):
    """Raised when a JSON rule tree cannot be read or converted."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
