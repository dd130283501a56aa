import os
import shutil

import pytest

from minishell.core.launcher import SubprocessLauncher
from minishell.errors import LaunchError

SH = shutil.which("sh")


@pytest.mark.skipif(SH is None, reason="requires /bin/sh")
@pytest.mark.asyncio
async def test_launch_reports_exit_status() -> None:
    process = await SubprocessLauncher().launch(["sh", "-c", "exit 3"], executable=SH, environ=os.environ)
    assert process.pid > 0
    assert await process.wait() == 3


@pytest.mark.skipif(SH is None, reason="requires /bin/sh")
@pytest.mark.asyncio
async def test_child_sees_command_name_as_argv0(tmp_path) -> None:
    marker = tmp_path / "argv0"
    script = f'printf %s "$0" > "{marker}"'
    process = await SubprocessLauncher().launch(["mysh", "-c", script], executable=SH, environ=os.environ)
    assert await process.wait() == 0
    assert marker.read_text() == "mysh"


@pytest.mark.asyncio
async def test_missing_program_raises_launch_error(tmp_path) -> None:
    with pytest.raises(LaunchError) as exc_info:
        await SubprocessLauncher().launch(["ghost"], executable=str(tmp_path / "ghost"), environ={})
    assert exc_info.value.command == "ghost"
    assert str(exc_info.value) == "ghost: command not found"


@pytest.mark.skipif(SH is None, reason="requires /bin/sh")
@pytest.mark.asyncio
async def test_null_byte_argument_raises_launch_error() -> None:
    with pytest.raises(LaunchError) as exc_info:
        await SubprocessLauncher().launch(["sh", "a\x00b"], executable=SH, environ=os.environ)
    assert exc_info.value.command == "sh"
