"""Formatting helpers for tree rows."""

from __future__ import annotations

from collections.abc import Sequence

from ..file_tree_model import DirectoryChild
from ..ui_theme import DEFAULT_THEME, UITheme

BRANCH_PIPE = "│   "
BRANCH_BLANK = "    "
BRANCH_TEE = "├── "
BRANCH_LAST = "└── "
SYMLINK_ARROW = " -> "
ERROR_MARKER = "[error opening dir]"


def tree_prefix(last_flags: Sequence[bool], is_dir: bool = False, theme: UITheme | None = None) -> str:
    """Build the connector prefix for a row from its ancestors' last-sibling flags.

    Every flag but the final one belongs to an ancestor and contributes a
    continuation segment; the final flag is the row's own status. Directory
    prefixes are wrapped in the theme's directory color.
    """
    if not last_flags:
        raise ValueError("tree prefix needs at least one last-sibling flag")
    active_theme = theme or DEFAULT_THEME
    segments = [BRANCH_BLANK if last else BRANCH_PIPE for last in last_flags[:-1]]
    segments.append(BRANCH_LAST if last_flags[-1] else BRANCH_TEE)
    prefix = "".join(segments)
    if is_dir:
        return f"{active_theme.tree_dir}{prefix}{active_theme.reset}"
    return prefix


def format_tree_entry(
    child: DirectoryChild,
    last_flags: Sequence[bool],
    full_path: bool = False,
    symlink_target: str | None = None,
    theme: UITheme | None = None,
) -> str:
    """Render one child row: prefix, name or path, and symlink suffix."""
    label = child.path if full_path else child.name
    if child.is_symlink:
        label += SYMLINK_ARROW + (symlink_target or "")
    return tree_prefix(last_flags, child.is_dir, theme) + label


def format_error_marker(last_flags: Sequence[bool], theme: UITheme | None = None) -> str:
    """Render the leaf row standing in for an unreadable directory's children."""
    active_theme = theme or DEFAULT_THEME
    marker = f"{active_theme.tree_error}{ERROR_MARKER}{active_theme.reset}"
    return tree_prefix(last_flags, theme=active_theme) + marker
