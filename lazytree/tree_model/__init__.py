"""Tree rendering: connector prefixes, row formatting and the depth-first walk."""

from __future__ import annotations

from .rendering import (
    ERROR_MARKER,
    SYMLINK_ARROW,
    format_error_marker,
    format_tree_entry,
    tree_prefix,
)
from .walk import iter_tree_lines, write_tree

__all__ = [
    "ERROR_MARKER",
    "SYMLINK_ARROW",
    "tree_prefix",
    "format_tree_entry",
    "format_error_marker",
    "iter_tree_lines",
    "write_tree",
]
