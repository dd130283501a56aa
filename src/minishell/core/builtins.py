"""Builtin commands and the read-only registry that holds them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TextIO

from loguru import logger

from minishell.core.resolver import find_executable
from minishell.core.types import ExecutableMatch
from minishell.errors import MissingArgumentError


class BuiltinKind(Enum):
    """The fixed set of builtins."""

    ECHO = "echo"
    TYPE = "type"
    EXIT = "exit"


@dataclass(frozen=True)
class BuiltinContext:
    """What a builtin may touch while it runs."""

    stdout: TextIO
    environ: Mapping[str, str]
    registry: BuiltinRegistry


class Builtin(ABC):
    """A command executed inside the shell process without suspending."""

    kind: BuiltinKind

    @property
    def name(self) -> str:
        return self.kind.value

    @abstractmethod
    def handle(self, args: Sequence[str], context: BuiltinContext) -> None:
        """Run the builtin with the parsed arguments."""


class EchoBuiltin(Builtin):
    kind = BuiltinKind.ECHO

    def handle(self, args: Sequence[str], context: BuiltinContext) -> None:
        context.stdout.write(" ".join(args) + "\n")


class TypeBuiltin(Builtin):
    """Report how a name would be interpreted."""

    kind = BuiltinKind.TYPE

    def handle(self, args: Sequence[str], context: BuiltinContext) -> None:
        if not args:
            raise MissingArgumentError(self.name)

        target = args[0]
        if target in context.registry:
            context.stdout.write(f"{target} is a shell builtin\n")
            return

        # Names containing a slash are checked as paths rather than searched on PATH.
        found = find_executable(target, context.environ)
        if isinstance(found, ExecutableMatch):
            context.stdout.write(f"{target} is {found.path}\n")
        else:
            context.stdout.write(f"{target}: not found\n")


class ExitBuiltin(Builtin):
    kind = BuiltinKind.EXIT

    def handle(self, args: Sequence[str], context: BuiltinContext) -> None:
        # Any status argument is ignored; the shell always exits 0.
        _ = args, context
        logger.debug("builtin.exit status=0")
        raise SystemExit(0)


class BuiltinRegistry(Mapping[str, Builtin]):
    """Immutable name -> builtin lookup, populated once at construction."""

    def __init__(self, builtins: Sequence[Builtin]) -> None:
        self._builtins: Mapping[str, Builtin] = MappingProxyType({item.name: item for item in builtins})

    def __getitem__(self, name: str) -> Builtin:
        return self._builtins[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._builtins)

    def __len__(self) -> int:
        return len(self._builtins)

    def names(self) -> list[str]:
        return sorted(self._builtins)


def default_registry() -> BuiltinRegistry:
    """Build the registry with one handler per ``BuiltinKind``."""

    handlers: dict[BuiltinKind, Builtin] = {
        BuiltinKind.ECHO: EchoBuiltin(),
        BuiltinKind.TYPE: TypeBuiltin(),
        BuiltinKind.EXIT: ExitBuiltin(),
    }
    missing = set(BuiltinKind) - set(handlers)
    if missing:
        raise RuntimeError(f"builtins without handler: {sorted(kind.value for kind in missing)}")
    return BuiltinRegistry(list(handlers.values()))
