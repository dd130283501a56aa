"""Routing of parsed commands to builtins or external programs."""

from __future__ import annotations

import asyncio
import contextlib
import signal
from collections.abc import Iterator

from loguru import logger

from minishell.core.builtins import BuiltinContext, BuiltinRegistry
from minishell.core.commands import parse_command
from minishell.core.launcher import ProcessLauncher
from minishell.core.resolver import resolve_command
from minishell.core.session import ShellSession
from minishell.core.types import BuiltinMatch, ExecutableMatch, ParsedCommand, ShellState
from minishell.errors import LaunchError


def _ignore_signal() -> None:
    return None


@contextlib.contextmanager
def interrupts_ignored() -> Iterator[None]:
    """Keep SIGINT from reaching the shell while a foreground child runs.

    The terminal still delivers the signal to the child itself.
    """
    loop = asyncio.get_running_loop()
    previous = signal.getsignal(signal.SIGINT)
    try:
        loop.add_signal_handler(signal.SIGINT, _ignore_signal)
    except (NotImplementedError, RuntimeError, ValueError):
        # No signal support (non-Unix loop or not the main thread).
        installed = False
    else:
        installed = True
    try:
        yield
    finally:
        if installed:
            loop.remove_signal_handler(signal.SIGINT)
            if previous is not None:
                signal.signal(signal.SIGINT, previous)


class Dispatcher:
    """Parse one line and run it, returning once the command has finished."""

    def __init__(
        self,
        session: ShellSession,
        registry: BuiltinRegistry,
        launcher: ProcessLauncher,
    ) -> None:
        self._session = session
        self._registry = registry
        self._launcher = launcher

    @property
    def registry(self) -> BuiltinRegistry:
        return self._registry

    async def dispatch(self, line: str) -> int | None:
        """Execute ``line``; returns the child's exit status for external commands."""
        session = self._session
        session.state = ShellState.PARSING
        parsed = parse_command(line)
        if parsed.is_empty:
            session.state = ShellState.IDLE
            return None

        session.state = ShellState.DISPATCHING
        resolution = resolve_command(parsed.command, self._registry, session.environ)
        if isinstance(resolution, BuiltinMatch):
            self._run_builtin(parsed)
            session.state = ShellState.IDLE
            return None
        if isinstance(resolution, ExecutableMatch):
            return await self._run_external(parsed, resolution.path)

        self._report_not_found(parsed.command)
        session.state = ShellState.IDLE
        return None

    def _run_builtin(self, parsed: ParsedCommand) -> None:
        session = self._session
        builtin = self._registry[parsed.command]
        context = BuiltinContext(stdout=session.stdout, environ=session.environ, registry=self._registry)
        try:
            builtin.handle(parsed.args, context)
        except SystemExit:
            session.state = ShellState.TERMINATED
            raise
        finally:
            session.stdout.flush()

    async def _run_external(self, parsed: ParsedCommand, path: str) -> int | None:
        session = self._session
        # Anything buffered must reach the terminal before the child writes to it.
        session.stdout.flush()
        session.stderr.flush()
        # The child exists as soon as the fork happens, before launch returns.
        with interrupts_ignored():
            try:
                process = await self._launcher.launch(
                    [parsed.command, *parsed.args],
                    executable=path,
                    environ=session.environ,
                )
            except LaunchError:
                self._report_not_found(parsed.command)
                session.state = ShellState.IDLE
                return None

            session.pending = asyncio.ensure_future(process.wait())
            try:
                status = await session.pending
            finally:
                session.pending = None
                session.state = ShellState.IDLE

        session.last_status = status
        logger.debug("process.exit name={} pid={} status={}", parsed.command, process.pid, status)
        return status

    def _report_not_found(self, command: str) -> None:
        self._session.write(f"{command}: command not found\n")
