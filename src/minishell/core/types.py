"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ShellState(Enum):
    """Dispatcher states; TERMINATED is reached only through process exit."""

    IDLE = "idle"
    PARSING = "parsing"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class ParsedCommand:
    """Command word and arguments parsed from one input line."""

    command: str
    args: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.command


@dataclass(frozen=True)
class BuiltinMatch:
    """Resolution hit against the builtin registry."""

    name: str


@dataclass(frozen=True)
class ExecutableMatch:
    """Resolution hit on an executable file."""

    path: str


class NotFound(Enum):
    """Resolution miss."""

    NOT_FOUND = "not_found"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound.NOT_FOUND

Resolution = BuiltinMatch | ExecutableMatch | NotFound
