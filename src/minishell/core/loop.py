"""Interactive read-dispatch loop."""

from __future__ import annotations

from loguru import logger

from minishell.core.dispatcher import Dispatcher
from minishell.core.session import ShellSession
from minishell.core.types import ShellState
from minishell.errors import MinishellError

EXIT_SUCCESS = 0


class Shell:
    """Prompt, read a line, dispatch it, repeat until ``exit`` or end of input."""

    def __init__(self, session: ShellSession, dispatcher: Dispatcher) -> None:
        self.session = session
        self.dispatcher = dispatcher

    async def run(self) -> int:
        session = self.session
        while True:
            session.state = ShellState.IDLE
            try:
                line = await session.line_source.read_line(session.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                session.write("\n")
                session.state = ShellState.TERMINATED
                logger.debug("shell.eof status={}", EXIT_SUCCESS)
                return EXIT_SUCCESS

            try:
                await self.handle_line(line)
            except SystemExit as exc:
                session.state = ShellState.TERMINATED
                return exc.code if isinstance(exc.code, int) else EXIT_SUCCESS

    async def handle_line(self, line: str) -> None:
        """Dispatch one line; no failure other than ``exit`` escapes."""
        session = self.session
        try:
            await self.dispatcher.dispatch(line)
        except MinishellError as exc:
            session.write(f"{exc}\n")
        except Exception as exc:
            logger.opt(exception=exc).debug("dispatch.error line={!r}", line)
            session.write_error(f"Error: {exc}\n")
        finally:
            if session.state is not ShellState.TERMINATED:
                session.state = ShellState.IDLE
