"""Terminal line sources for the shell."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory, History, InMemoryHistory


class PromptLineSource:
    """Line source backed by prompt_toolkit, with editing and history."""

    def __init__(self, history_file: Path | None = None) -> None:
        history: History = FileHistory(str(history_file)) if history_file else InMemoryHistory()
        self._prompt_session: PromptSession[str] = PromptSession(history=history)

    async def read_line(self, prompt: str) -> str:
        """Prompt user for input."""
        return await self._prompt_session.prompt_async(prompt)


class StreamLineSource:
    """Plain line source for non-interactive input such as a pipe."""

    def __init__(self, stream: TextIO, output: TextIO) -> None:
        self._stream = stream
        self._output = output

    async def read_line(self, prompt: str) -> str:
        self._output.write(prompt)
        self._output.flush()
        line = await asyncio.to_thread(self._stream.readline)
        if not line:
            raise EOFError
        return line.rstrip("\n")


def create_line_source(history_file: Path | None = None) -> PromptLineSource | StreamLineSource:
    """Use prompt_toolkit on a terminal and plain reads otherwise."""
    if sys.stdin.isatty() and sys.stdout.isatty():
        return PromptLineSource(history_file)
    return StreamLineSource(sys.stdin, sys.stdout)
