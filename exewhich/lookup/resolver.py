"""Search-path resolution of executable names.

Responsibilities:
- Distinguish explicit paths from bare names.
- Build the ordered directory list for bare names and probe it first-match-wins.

Key public symbols:
- `ExecutableResolver`: resolver bound to a platform policy and optional config.
- `resolve`: one-shot lookup against the live process environment.
"""

from __future__ import annotations

import os

from ..config import ConfigLoader, LookupConfig
from ..telemetry.logger import LookupLogger
from .platforms import PlatformPolicy, select_platform_policy
from .prober import probe_directory


_PATH_SEPARATORS = ("/", "\\")


def is_explicit_path(name: str) -> bool:
    """Return whether `name` contains a forward or backward slash."""

    return any(separator in name for separator in _PATH_SEPARATORS)


def split_explicit_path(name: str) -> tuple[str, str]:
    """Split an explicit path into the directory to probe and the name to find.

    A trailing separator names the last component inside itself, so `bin/`
    probes `bin/bin`. A root path keeps an empty name.
    """

    separators = "".join(separator for separator in (os.sep, os.altsep) if separator)
    directory = os.path.dirname(name)
    _, tail = os.path.splitdrive(name)
    stripped = tail.rstrip(separators)
    if not stripped:
        return directory, ""
    return directory, os.path.basename(stripped)


class ExecutableResolver:
    """Resolve executable names the way the platform's `which`/`where` does."""

    def __init__(
        self,
        policy: PlatformPolicy | None = None,
        config: LookupConfig | None = None,
        logger: LookupLogger | None = None,
    ) -> None:
        """Bind a policy and optional fixed config.

        Without a config, every `resolve` call snapshots the process environment.
        """

        self._policy = policy if policy is not None else select_platform_policy()
        self._config = config
        self._logger = logger

    def resolve(self, name: str) -> str | None:
        """Return the first matching executable path for `name`, or `None`."""

        config = self._config if self._config is not None else ConfigLoader.from_environ()
        if is_explicit_path(name):
            directory, base = split_explicit_path(name)
            found = probe_directory(
                directory or os.curdir, base, self._policy, config, self._logger
            )
            self._log_outcome(name, found)
            return found

        directories = self.search_directories(config)
        if self._logger is not None:
            self._logger.log_search_plan(name, directories)
        for directory in directories:
            found = probe_directory(directory, name, self._policy, config, self._logger)
            if found is not None:
                self._log_outcome(name, found)
                return found

        self._log_outcome(name, None)
        return None

    def search_directories(self, config: LookupConfig) -> list[str]:
        """Return directories probed for a bare name, in precedence order."""

        directories: list[str] = []
        if self._policy.searches_working_directory and config.working_directory:
            directories.append(config.working_directory)
        if config.search_path:
            directories.extend(self._policy.split_search_path(config.search_path))
        return directories

    def _log_outcome(self, name: str, path: str | None) -> None:
        if self._logger is not None:
            self._logger.log_outcome(name, path)


def resolve(
    name: str,
    *,
    policy: PlatformPolicy | None = None,
    config: LookupConfig | None = None,
    logger: LookupLogger | None = None,
) -> str | None:
    """Resolve `name` to an executable path, returning `None` when not found."""

    return ExecutableResolver(policy=policy, config=config, logger=logger).resolve(name)
