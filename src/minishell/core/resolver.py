"""Builtin lookup and PATH-based executable resolution."""

from __future__ import annotations

import os
import stat
from collections.abc import Mapping

from loguru import logger

from minishell.core.types import NOT_FOUND, BuiltinMatch, ExecutableMatch, NotFound, Resolution

PATH_VARIABLE = "PATH"


def search_path(environ: Mapping[str, str]) -> tuple[str, ...]:
    """Return the ordered directories listed in PATH, re-read on every call."""

    raw = environ.get(PATH_VARIABLE)
    if not raw:
        return ()
    return tuple(raw.split(os.pathsep))


def is_executable_file(path: str) -> bool:
    try:
        info = os.stat(path)
    except (OSError, ValueError) as exc:
        logger.debug("resolve.skip path={} reason={}", path, exc.__class__.__name__)
        return False
    if not stat.S_ISREG(info.st_mode):
        return False
    return os.access(path, os.X_OK)


def find_executable(name: str, environ: Mapping[str, str]) -> ExecutableMatch | NotFound:
    """Find the first executable regular file called ``name`` on PATH."""

    if not name:
        return NOT_FOUND

    # A name with a separator is already a path and is not searched for.
    if os.sep in name:
        return ExecutableMatch(path=name) if is_executable_file(name) else NOT_FOUND

    for directory in search_path(environ):
        if not directory:
            continue
        candidate = os.path.join(directory, name)
        if is_executable_file(candidate):
            logger.debug("resolve.hit name={} path={}", name, candidate)
            return ExecutableMatch(path=candidate)
    logger.debug("resolve.miss name={}", name)
    return NOT_FOUND


def resolve_command(name: str, builtins: Mapping[str, object], environ: Mapping[str, str]) -> Resolution:
    """Classify ``name`` as a builtin, an executable on PATH, or not found."""

    if not name:
        return NOT_FOUND
    if name in builtins:
        return BuiltinMatch(name=name)
    return find_executable(name, environ)
