"""Lookup tracing utilities.

This package emits deterministic trace lines describing how a lookup walked
the search path.
"""

from .logger import LookupLogger

__all__ = ["LookupLogger"]
