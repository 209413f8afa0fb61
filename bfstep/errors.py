"""Exceptions raised by the interpreter and its helpers."""

from typing import Optional


class BrainfuckError(Exception):
    """Base class for all bfstep errors."""


class ScriptInvalidError(BrainfuckError, ValueError):
    """Raised when a script has unbalanced brackets."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class InternalInconsistencyError(BrainfuckError, RuntimeError):
    """The loop skip-scan ran off the end of a script that passed validation."""


class ConfigError(BrainfuckError, ValueError):
    """Invalid interpreter configuration."""
