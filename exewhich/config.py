"""Lookup configuration model and loaders for exewhich.

Responsibilities:
- Capture the environment inputs of one lookup as an immutable value.
- Provide loader entry points for process-environment and mapping-based configuration.

Key types:
- `LookupConfig`: search-path, extension-list, and working-directory inputs.
- `ConfigLoader`: static construction helpers for `LookupConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


SEARCH_PATH_ENV_KEY = "PATH"
PATH_EXT_ENV_KEY = "PATHEXT"


@dataclass(frozen=True, slots=True)
class LookupConfig:
    """Environment snapshot consumed by a single executable lookup.

    Attributes:
        search_path: Raw search-path value, or `None` when unset.
        path_ext: Raw extension-list value, or `None` when unset.
        working_directory: Current working directory, or `None` when it could not be read.
    """

    search_path: str | None = None
    path_ext: str | None = None
    working_directory: str | None = None


class ConfigLoader:
    """Factory methods for constructing `LookupConfig` objects."""

    @staticmethod
    def from_environ(environ: Mapping[str, str] | None = None) -> LookupConfig:
        """Create a config from process environment variables and the current directory.

        Variable names are matched case-insensitively only on Windows hosts.
        """

        source = environ if environ is not None else os.environ
        return ConfigLoader.from_mapping(
            source,
            working_directory=_current_working_directory(),
            case_insensitive=_host_folds_env_case(),
        )

    @staticmethod
    def from_mapping(
        values: Mapping[str, str],
        working_directory: str | None = None,
        case_insensitive: bool = False,
    ) -> LookupConfig:
        """Create a config from an arbitrary environment-style mapping."""

        return LookupConfig(
            search_path=_lookup_env_value(values, SEARCH_PATH_ENV_KEY, case_insensitive),
            path_ext=_lookup_env_value(values, PATH_EXT_ENV_KEY, case_insensitive),
            working_directory=working_directory,
        )


def _lookup_env_value(
    values: Mapping[str, str], key: str, case_insensitive: bool
) -> str | None:
    """Return a mapping value by exact key, then optionally by case-insensitive key."""

    if key in values:
        return values[key]
    if not case_insensitive:
        return None
    folded_key = key.casefold()
    for candidate_key, value in values.items():
        if candidate_key.casefold() == folded_key:
            return value
    return None


def _host_folds_env_case() -> bool:
    """Return whether the host treats environment variable names case-insensitively."""

    return os.name == "nt"


def _current_working_directory() -> str | None:
    """Return the current working directory, or `None` when it is unavailable."""

    try:
        return os.getcwd()
    except OSError:
        return None
