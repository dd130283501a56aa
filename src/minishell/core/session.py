"""Process-wide shell session state."""

from __future__ import annotations

import asyncio
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, TextIO

from minishell.config import DEFAULT_PROMPT
from minishell.core.types import ShellState


class LineSource(Protocol):
    """Yields completed input lines, rendering ``prompt`` before each read.

    Raises ``EOFError`` at end of input and ``KeyboardInterrupt`` when the
    user abandons the current line.
    """

    async def read_line(self, prompt: str) -> str: ...


def _stdout() -> TextIO:
    return sys.stdout


def _stderr() -> TextIO:
    return sys.stderr


@dataclass
class ShellSession:
    """State threaded through the read-dispatch loop."""

    line_source: LineSource
    prompt: str = DEFAULT_PROMPT
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)
    stdout: TextIO = field(default_factory=_stdout)
    stderr: TextIO = field(default_factory=_stderr)
    state: ShellState = ShellState.IDLE
    pending: asyncio.Future[int] | None = None
    last_status: int | None = None

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def write_error(self, text: str) -> None:
        self.stderr.write(text)
        self.stderr.flush()
