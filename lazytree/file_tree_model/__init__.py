"""Domain model for one directory listing run.

This package contains non-rendering primitives:
- traversal options and directory-child datatypes
- filesystem scanning with directories-first ordering
- one-level symlink resolution
"""

from __future__ import annotations

from .types import UNBOUNDED_DEPTH, DirectoryChild, TreeOptions
from .fs import list_directory_children, path_exists, read_symlink

__all__ = [
    "UNBOUNDED_DEPTH",
    "TreeOptions",
    "DirectoryChild",
    "list_directory_children",
    "path_exists",
    "read_symlink",
]
