"""Command line parsing."""

from __future__ import annotations

from minishell.core.types import ParsedCommand


def parse_command(line: str) -> ParsedCommand:
    """Split one line into a command word and its arguments.

    Tokens are separated by runs of whitespace; there is no quoting or
    escaping. A blank line yields an empty command.
    """

    words = line.split()
    if not words:
        return ParsedCommand(command="", args=())
    return ParsedCommand(command=words[0], args=tuple(words[1:]))
