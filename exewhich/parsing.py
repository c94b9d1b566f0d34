"""Shared parsing helpers for environment-style configuration values."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def split_delimited(value: str, separator: str) -> tuple[str, ...]:
    """Split a delimited value into trimmed entries, dropping blank segments.

    Order of the surviving entries is preserved.
    """

    entries: list[str] = []
    for segment in value.split(separator):
        normalized = normalize_optional_string(segment)
        if normalized is not None:
            entries.append(normalized)
    return tuple(entries)


def split_quoted_list(value: str, separator: str) -> list[str]:
    """Split a list value where double quotes protect embedded separators.

    Quote characters are removed from the resulting entries. Empty entries
    are kept so callers see the list exactly as written.
    """

    entries: list[str] = []
    current: list[str] = []
    quoted = False
    for character in value:
        if character == '"':
            quoted = not quoted
        elif character == separator and not quoted:
            entries.append("".join(current))
            current = []
        else:
            current.append(character)
    entries.append("".join(current))
    return entries
