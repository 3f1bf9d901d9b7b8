# src/incpath/__init__.py
"""Resolve include-style file references against an ordered search path."""

from .config import SearchConfig, load_search_config, load_search_path
from .resolver import Filesystem, HostFilesystem, resolve
from .search_path import SearchPath

__version__ = "0.1.0"

__all__ = [
    "Filesystem",
    "HostFilesystem",
    "SearchConfig",
    "SearchPath",
    "load_search_config",
    "load_search_path",
    "resolve",
    "__version__",
]
