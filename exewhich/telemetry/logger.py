"""Structured lookup trace logging.

Responsibilities:
- Emit concise, deterministic stage-level lookup traces.
- Route trace lines through `loguru` to a caller-chosen text sink.
"""

from __future__ import annotations

import itertools
import sys
from typing import TextIO

from loguru import logger as _loguru_logger


_instance_tokens = itertools.count()


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/", "\\"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class LookupLogger:
    """Emit deterministic trace lines for one or more executable lookups.

    Each instance owns one loguru handler that only receives its own lines;
    handlers installed elsewhere are left untouched.
    """

    def __init__(self, sink: TextIO | None = None, level: str = "DEBUG") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        token = next(_instance_tokens)
        self._logger = _loguru_logger.bind(lookup_logger=token)
        self._handler_id: int | None = _loguru_logger.add(
            self._sink,
            format="{message}",
            level=level,
            colorize=False,
            filter=lambda record: record["extra"].get("lookup_logger") == token,
        )

    def close(self) -> None:
        """Remove the handler installed by this logger."""

        if self._handler_id is not None:
            _loguru_logger.remove(self._handler_id)
            self._handler_id = None

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured trace line."""

        line = f"[lookup] level={level} stage={stage} event={event}{_format_context(context)}"
        self._logger.log(level, line)


    def log_search_plan(self, name: str, directories: list[str]) -> None:
        """Emit the ordered directory plan for a bare-name lookup."""

        self._emit("INFO", "plan", "search", name=name, directories=len(directories))

    def log_probe(self, candidate: str, matched: bool) -> None:
        """Emit the outcome of testing one candidate file."""

        self._emit("DEBUG", "hit" if matched else "miss", "probe", path=candidate)

    def log_outcome(self, name: str, path: str | None) -> None:
        """Emit the final outcome of one lookup."""

        if path is None:
            self._emit("INFO", "not_found", "resolve", name=name)
            return
        self._emit("INFO", "found", "resolve", name=name, path=path)
