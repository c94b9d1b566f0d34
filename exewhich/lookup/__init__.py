"""Executable lookup components.

This package holds the executability predicate, extension policy, directory
prober, and search-path resolver, together with the platform policies that
parameterize them.
"""

from .executability import has_execute_permission, is_existing_file
from .extensions import DEFAULT_EXTENSIONS, matching_extension, parse_path_ext
from .normalization import apply_best_effort, normalize_linked_path
from .platforms import PlatformPolicy, PosixPolicy, WindowsPolicy, select_platform_policy
from .prober import probe_directory
from .resolver import ExecutableResolver, is_explicit_path, resolve, split_explicit_path

__all__ = [
    "DEFAULT_EXTENSIONS",
    "ExecutableResolver",
    "PlatformPolicy",
    "PosixPolicy",
    "WindowsPolicy",
    "apply_best_effort",
    "has_execute_permission",
    "is_existing_file",
    "is_explicit_path",
    "matching_extension",
    "normalize_linked_path",
    "parse_path_ext",
    "probe_directory",
    "resolve",
    "select_platform_policy",
    "split_explicit_path",
]
