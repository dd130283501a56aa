"""Shell assembly from settings and collaborators."""

from __future__ import annotations

import os
from collections.abc import Mapping

from loguru import logger

from minishell.config import Settings
from minishell.core import Dispatcher, Shell, ShellSession, default_registry
from minishell.core.launcher import ProcessLauncher, SubprocessLauncher
from minishell.core.session import LineSource
from minishell.terminal import create_line_source


def build_shell(
    settings: Settings,
    *,
    line_source: LineSource | None = None,
    launcher: ProcessLauncher | None = None,
    environ: Mapping[str, str] | None = None,
) -> Shell:
    """Wire a shell; collaborators default to the terminal, asyncio and os.environ."""

    session = ShellSession(
        line_source=line_source or create_line_source(settings.history_file),
        prompt=settings.prompt,
        environ=os.environ if environ is None else environ,
    )
    registry = default_registry()
    dispatcher = Dispatcher(session, registry, launcher or SubprocessLauncher())
    logger.debug("shell.start prompt={!r} builtins={}", settings.prompt, registry.names())
    return Shell(session, dispatcher)
