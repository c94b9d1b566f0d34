"""CLI output and error rendering helpers."""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import LookupCommandError


def exit_with_command_error(exc: LookupCommandError) -> NoReturn:
    """Print concise diagnostics for lookup failures and exit with code 1."""

    typer.secho(exc.detail, fg=typer.colors.RED, err=True)
    if exc.hint:
        typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1) from exc


def echo_resolved_path(path: str) -> None:
    """Print one resolved executable path to standard output."""

    typer.echo(path)
