"""Domain datatypes for one tree listing run."""

from __future__ import annotations

from dataclasses import dataclass

UNBOUNDED_DEPTH = -1


@dataclass(frozen=True)
class TreeOptions:
    """Immutable per-run traversal settings built once from CLI input."""

    start_path: str = "."
    show_hidden: bool = False
    dir_only: bool = False
    full_path: bool = False
    max_depth: int = UNBOUNDED_DEPTH
    show_errors: bool = False

    def depth_allows(self, depth: int) -> bool:
        """Return whether children at 1-based level ``depth + 1`` may be listed."""
        return self.max_depth < 0 or depth < self.max_depth


@dataclass(frozen=True)
class DirectoryChild:
    """One visible directory child.

    ``is_dir`` follows symlinks and only drives sort placement, coloring and
    the directories-only filter. ``is_symlink`` never follows and decides
    whether the walker may descend.
    """

    name: str
    path: str
    is_dir: bool
    is_symlink: bool = False

    @property
    def can_descend(self) -> bool:
        return self.is_dir and not self.is_symlink


__all__ = [
    "UNBOUNDED_DEPTH",
    "TreeOptions",
    "DirectoryChild",
]
