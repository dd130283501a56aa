"""External process launching."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from typing import Protocol

from loguru import logger

from minishell.errors import LaunchError


class RunningProcess(Protocol):
    pid: int

    async def wait(self) -> int: ...


class ProcessLauncher(Protocol):
    """Starts a child that shares the shell's standard streams."""

    async def launch(
        self,
        argv: Sequence[str],
        *,
        executable: str,
        environ: Mapping[str, str],
    ) -> RunningProcess: ...


class SubprocessLauncher:
    """Launch children with ``asyncio.create_subprocess_exec``."""

    async def launch(
        self,
        argv: Sequence[str],
        *,
        executable: str,
        environ: Mapping[str, str],
    ) -> RunningProcess:
        # stdin/stdout/stderr left as None: the child inherits the shell's streams.
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                executable=executable,
                env=dict(environ),
            )
        except (OSError, ValueError) as exc:
            logger.debug("process.launch_failed name={} path={} error={}", argv[0], executable, exc)
            raise LaunchError(argv[0]) from exc
        logger.debug("process.start name={} pid={} path={}", argv[0], process.pid, executable)
        return process
