"""Application-level exception types for minishell."""

from __future__ import annotations


class MinishellError(Exception):
    """Base exception for minishell."""


class ConfigurationError(MinishellError):
    """Raised when settings fail startup validation."""


class LaunchError(MinishellError):
    """Raised when the OS cannot start an external program."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: command not found")
        self.command = command


class MissingArgumentError(MinishellError):
    """Raised when a builtin is invoked without a required argument."""

    def __init__(self, builtin: str) -> None:
        super().__init__(f"{builtin}: missing argument")
        self.builtin = builtin
