"""Platform capability policies for executable lookup.

Responsibilities:
- Describe how one platform family decides executability, extension matching,
  search-path splitting, working-directory search, and path normalization.
- Select the policy matching the host once, via `select_platform_policy`.

Key types:
- `PlatformPolicy`: protocol consumed by the prober and resolver.
- `PosixPolicy`: permission-bit rules with no extension matching.
- `WindowsPolicy`: `PATHEXT` extension rules with link normalization.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Protocol

from ..config import LookupConfig
from ..parsing import split_quoted_list
from .executability import has_execute_permission, is_existing_file
from .extensions import parse_path_ext
from .normalization import normalize_linked_path


class PlatformPolicy(Protocol):
    """Protocol for platform-specific lookup rules."""

    @property
    def name(self) -> str:
        """Return a short identifier for diagnostics."""

    @property
    def searches_working_directory(self) -> bool:
        """Return whether bare names are searched in the working directory first."""

    @property
    def path_list_separator(self) -> str:
        """Return the separator between search-path entries."""

    def extensions(self, config: LookupConfig) -> tuple[str, ...]:
        """Return acceptable executable suffixes in precedence order."""

    def is_executable(self, path: str) -> bool:
        """Return whether `path` is a runnable non-directory file."""

    def split_search_path(self, value: str) -> list[str]:
        """Split a non-empty search-path value into ordered directory entries."""

    def normalize(self, path: str) -> str:
        """Return the canonical form of a matched executable path."""


@dataclass(frozen=True, slots=True)
class PosixPolicy:
    """Lookup rules for Unix-like systems."""

    name: str = "posix"
    searches_working_directory: bool = False
    path_list_separator: str = ":"

    def extensions(self, config: LookupConfig) -> tuple[str, ...]:
        _ = config
        return ()

    def is_executable(self, path: str) -> bool:
        return has_execute_permission(path)

    def split_search_path(self, value: str) -> list[str]:
        return value.split(self.path_list_separator)

    def normalize(self, path: str) -> str:
        return path


@dataclass(frozen=True, slots=True)
class WindowsPolicy:
    """Lookup rules for Windows-like systems."""

    name: str = "windows"
    searches_working_directory: bool = True
    path_list_separator: str = ";"

    def extensions(self, config: LookupConfig) -> tuple[str, ...]:
        return parse_path_ext(config.path_ext)

    def is_executable(self, path: str) -> bool:
        return is_existing_file(path)

    def split_search_path(self, value: str) -> list[str]:
        return split_quoted_list(value, self.path_list_separator)

    def normalize(self, path: str) -> str:
        return normalize_linked_path(path)


def select_platform_policy(os_name: str | None = None) -> PlatformPolicy:
    """Return the lookup policy for `os_name`, defaulting to the host platform."""

    resolved_name = os_name if os_name is not None else os.name
    if resolved_name == "nt":
        return WindowsPolicy()
    return PosixPolicy()
