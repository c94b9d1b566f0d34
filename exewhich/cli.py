"""Command-line interface for exewhich.

Responsibilities:
- Expose the single `exewhich <program>` lookup command.
- Map lookup outcomes to standard output, diagnostics, and exit codes.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from typing import Annotated

import typer
from loguru import logger as loguru_logger

from .cli_rendering import echo_resolved_path, exit_with_command_error
from .errors import LookupCommandError
from .lookup import resolve
from .telemetry.logger import LookupLogger

app = typer.Typer(
    name="exewhich",
    add_completion=False,
    help="Locate an executable on the search path.",
)


def _open_trace_logger() -> LookupLogger:
    """Route loguru output for this process to the trace sink only."""

    loguru_logger.remove()
    return LookupLogger()


def _resolve_or_raise(program: str | None, verbose: bool) -> str:
    """Resolve `program` and convert missing input or no match to command errors."""

    if program is None:
        raise LookupCommandError(
            detail="Usage: exewhich <program>",
            hint="Run `exewhich --help` for available options.",
        )

    logger = _open_trace_logger() if verbose else None
    try:
        found = resolve(program, logger=logger)
    finally:
        if logger is not None:
            logger.close()
    if found is None:
        raise LookupCommandError(detail=f"{program} not found in PATH")
    return found


@app.command()
def which_command(
    program: Annotated[
        str | None,
        typer.Argument(help="Program name or path to resolve.", show_default=False),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            envvar="EXEWHICH_VERBOSE",
            help="Trace each probed candidate to standard error.",
        ),
    ] = False,
) -> None:
    """Print the path of the executable that would run for PROGRAM."""

    try:
        found = _resolve_or_raise(program, verbose)
    except LookupCommandError as exc:
        exit_with_command_error(exc)
    echo_resolved_path(found)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()
