"""Best-effort normalization of resolved executable paths.

Each step receives the best path computed so far and returns an improved
path, or `None` when it cannot make progress. A failed step never discards
earlier results.
"""

from __future__ import annotations

import os
from typing import Callable, Sequence


NormalizationStep = Callable[[str], str | None]


def apply_best_effort(path: str, steps: Sequence[NormalizationStep]) -> str:
    """Run `steps` in order and return the last successfully computed path."""

    best = path
    for step in steps:
        candidate = step(best)
        if candidate is not None:
            best = candidate
    return best


def resolve_directory_link(path: str) -> str | None:
    """Replace a linked or junctioned parent directory with its target.

    Relative link targets are interpreted against the link's own parent.
    """

    directory, base = os.path.split(path)
    try:
        target = os.readlink(directory)
    except (OSError, ValueError):
        return None
    if not os.path.isabs(target):
        target = os.path.join(os.path.dirname(directory), target)
    return os.path.join(target, base)


def resolve_symlinks(path: str) -> str | None:
    """Resolve every link component of an existing path, canonicalizing case."""

    try:
        return os.path.realpath(path, strict=True)
    except (OSError, ValueError):
        return None


LINK_NORMALIZATION_STEPS: tuple[NormalizationStep, ...] = (
    resolve_directory_link,
    resolve_symlinks,
)


def normalize_linked_path(path: str) -> str:
    """Normalize `path` through directory links and symbolic links."""

    return apply_best_effort(path, LINK_NORMALIZATION_STEPS)
