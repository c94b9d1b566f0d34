"""Executable suffix policy for platforms that select programs by extension."""

from __future__ import annotations

from ..parsing import split_delimited


DEFAULT_EXTENSIONS: tuple[str, ...] = (".COM", ".EXE", ".BAT", ".CMD")
EXTENSION_SEPARATOR = ";"


def parse_path_ext(value: str | None) -> tuple[str, ...]:
    """Parse a `PATHEXT`-style value into an ordered suffix tuple.

    Args:
        value: Raw semicolon-delimited value, or `None` when unset.

    Returns:
        Trimmed non-empty entries in their original order, or
        `DEFAULT_EXTENSIONS` when the value is unset or empty.
    """

    if not value:
        return DEFAULT_EXTENSIONS
    return split_delimited(value, EXTENSION_SEPARATOR)


def matching_extension(name: str, extensions: tuple[str, ...]) -> str | None:
    """Return the first listed extension that `name` already ends with.

    Comparison is case-insensitive.
    """

    folded_name = name.upper()
    for extension in extensions:
        if folded_name.endswith(extension.upper()):
            return extension
    return None
