"""Exceptions surfaced at the command-line boundary."""

from __future__ import annotations


class LookupCommandError(RuntimeError):
    """Raised when a CLI lookup cannot produce a resolved path."""

    def __init__(
        self,
        *,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a command error with an optional remediation hint."""

        super().__init__(detail)
        self.detail = detail
        self.hint = hint
