"""Depth-first tree walk producing rendered rows.

Each directory frame owns an immutable tuple of ancestor last-sibling flags
whose length equals its depth. Children receive that tuple extended by their
own flag, so sibling iterations never share mutable state. Open directories
are kept on an explicit stack of row iterators, so nesting depth is not bound
by the interpreter's recursion limit. Symlinks are displayed but never
entered, which keeps the walk finite.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

from ..file_tree_model import DirectoryChild, TreeOptions, list_directory_children, read_symlink
from ..ui_theme import DEFAULT_THEME, UITheme
from .rendering import format_error_marker, format_tree_entry

_DirectoryRow = tuple[str, DirectoryChild | None, tuple[bool, ...]]


def _directory_rows(
    directory: str,
    ancestors: tuple[bool, ...],
    options: TreeOptions,
    theme: UITheme,
) -> Iterator[_DirectoryRow]:
    """Yield ``(row, child, flags)`` for the displayed children of ``directory``.

    ``child`` is ``None`` for the error-marker row.
    """
    if not options.depth_allows(len(ancestors)):
        return

    children, scan_error = list_directory_children(directory, options.show_hidden)
    if scan_error is not None:
        if options.show_errors and not isinstance(scan_error, NotADirectoryError):
            flags = ancestors + (True,)
            yield format_error_marker(flags, theme), None, flags
        return

    if options.dir_only:
        children = [child for child in children if child.is_dir]

    last_idx = len(children) - 1
    for idx, child in enumerate(children):
        flags = ancestors + (idx == last_idx,)
        target = read_symlink(child.path) if child.is_symlink else None
        yield format_tree_entry(child, flags, full_path=options.full_path, symlink_target=target, theme=theme), child, flags


def _walk_directory(directory: str, options: TreeOptions, theme: UITheme) -> Iterator[str]:
    """Yield rows for every displayed descendant of ``directory`` depth-first."""
    stack = [_directory_rows(directory, (), options, theme)]
    while stack:
        row = next(stack[-1], None)
        if row is None:
            stack.pop()
            continue
        line, child, flags = row
        yield line
        if child is not None and child.can_descend:
            stack.append(_directory_rows(child.path, flags, options, theme))


def iter_tree_lines(options: TreeOptions, theme: UITheme | None = None) -> Iterator[str]:
    """Yield the start path followed by one row per displayed entry, lazily."""
    active_theme = theme or DEFAULT_THEME
    yield options.start_path
    yield from _walk_directory(options.start_path, options, active_theme)


def write_tree(options: TreeOptions, stream: TextIO, theme: UITheme | None = None) -> None:
    """Write the tree to ``stream`` one newline-terminated row at a time."""
    for line in iter_tree_lines(options, theme):
        stream.write(line + "\n")
