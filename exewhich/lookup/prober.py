"""Single-directory executable probing."""

from __future__ import annotations

import os

from ..config import LookupConfig
from ..telemetry.logger import LookupLogger
from .extensions import matching_extension
from .platforms import PlatformPolicy


def probe_directory(
    directory: str,
    name: str,
    policy: PlatformPolicy,
    config: LookupConfig,
    logger: LookupLogger | None = None,
) -> str | None:
    """Find `name` inside `directory` under the rules of `policy`.

    Candidates are tried in extension-list order and the first runnable one
    wins. A name that already carries a listed extension is only tried
    literally and is never combined with a second suffix.

    Returns:
        The normalized matching path, or `None` when this directory has no match.
    """

    extensions = policy.extensions(config)
    if not extensions or matching_extension(name, extensions) is not None:
        return _probe_candidate(os.path.join(directory, name), policy, logger)

    for extension in extensions:
        found = _probe_candidate(os.path.join(directory, name + extension), policy, logger)
        if found is not None:
            return found
    return None


def _probe_candidate(
    candidate: str,
    policy: PlatformPolicy,
    logger: LookupLogger | None,
) -> str | None:
    """Test one candidate file and normalize it on success."""

    matched = policy.is_executable(candidate)
    if logger is not None:
        logger.log_probe(candidate, matched)
    if not matched:
        return None
    return policy.normalize(candidate)
