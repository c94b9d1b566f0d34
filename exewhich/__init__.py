"""Top-level package for exewhich.

This package locates executables by name the way the platform's native
`which`/`where` command does. The main entry point is `resolve`.
"""

from .config import ConfigLoader, LookupConfig
from .lookup import ExecutableResolver, resolve

__all__ = ["ConfigLoader", "ExecutableResolver", "LookupConfig", "resolve", "__version__"]

__version__ = "0.1.0"
