"""Unit tests for shared configuration parsing helpers."""

import pytest

from exewhich.parsing import (
    normalize_optional_string,
    split_delimited,
    split_quoted_list,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  .EXE  ") == ".EXE"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (".EXE;;.BAT", (".EXE", ".BAT")),
        (" .COM ; .EXE ", (".COM", ".EXE")),
        (";;", ()),
        ("", ()),
    ],
)
def test_split_delimited_drops_blank_segments_and_keeps_order(
    value: str, expected: tuple[str, ...]
) -> None:
    """Delimited splitting should trim entries and discard empty segments."""

    assert split_delimited(value, ";") == expected


def test_split_quoted_list_keeps_quoted_separators_and_empty_entries() -> None:
    """Quoted segments should survive as one entry with the quotes removed."""

    assert split_quoted_list('C:\\bin;"C:\\odd;dir";', ";") == [
        "C:\\bin",
        "C:\\odd;dir",
        "",
    ]


def test_split_quoted_list_returns_single_entry_without_separator() -> None:
    """A value without separators should produce exactly one entry."""

    assert split_quoted_list("/usr/bin", ":") == ["/usr/bin"]
