"""CLI entry point for minishell."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from minishell import __version__
from minishell.bootstrap import build_shell
from minishell.config import get_settings
from minishell.errors import ConfigurationError
from minishell.logging_utils import configure_logging

app = typer.Typer(
    name="minishell",
    help="A minimal interactive command interpreter.",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Prompt string"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Diagnostic log level"),
    history_file: Optional[Path] = typer.Option(None, "--history-file", help="Persistent history file"),  # noqa: B008
) -> None:
    """Start the interactive shell."""
    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = get_settings(prompt=prompt, log_level=log_level, history_file=history_file)
    except ConfigurationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc

    configure_logging(level=settings.log_level, profile=settings.log_profile)  # type: ignore[arg-type]
    shell = build_shell(settings)
    status = asyncio.run(shell.run())
    raise typer.Exit(status)


@app.command()
def version() -> None:
    """Print the minishell version."""
    typer.echo(__version__)
