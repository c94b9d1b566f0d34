"""Platform-aware checks for whether a filesystem entry can be run.

A missing entry or a failing `stat` call is an expected outcome during
search-path probing and is reported as "not runnable", never raised.
"""

from __future__ import annotations

import os
import stat


_ANY_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def has_execute_permission(path: str) -> bool:
    """Return whether `path` is a non-directory entry with any execute bit set."""

    status = _stat_non_directory(path)
    if status is None:
        return False
    return bool(status.st_mode & _ANY_EXECUTE_BITS)


def is_existing_file(path: str) -> bool:
    """Return whether `path` exists and is not a directory."""

    return _stat_non_directory(path) is not None


def _stat_non_directory(path: str) -> os.stat_result | None:
    """Stat `path`, following links, and drop directories and unreadable entries."""

    try:
        status = os.stat(path)
    except (OSError, ValueError):
        return None
    if stat.S_ISDIR(status.st_mode):
        return None
    return status
