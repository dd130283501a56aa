"""Command parsing, resolution and dispatch."""

from .builtins import Builtin, BuiltinKind, BuiltinRegistry, default_registry
from .commands import parse_command
from .dispatcher import Dispatcher
from .loop import Shell
from .resolver import find_executable, resolve_command, search_path
from .session import ShellSession
from .types import NOT_FOUND, BuiltinMatch, ExecutableMatch, ParsedCommand, ShellState

__all__ = [
    "NOT_FOUND",
    "Builtin",
    "BuiltinKind",
    "BuiltinMatch",
    "BuiltinRegistry",
    "Dispatcher",
    "ExecutableMatch",
    "ParsedCommand",
    "Shell",
    "ShellSession",
    "ShellState",
    "default_registry",
    "find_executable",
    "parse_command",
    "resolve_command",
    "search_path",
]
