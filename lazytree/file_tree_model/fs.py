"""Filesystem scanning helpers for directory listings."""

from __future__ import annotations

import os

from .types import DirectoryChild


def read_symlink(path: str) -> str:
    """Return the one-level target of symlink ``path`` or ``""`` on failure."""
    try:
        return os.readlink(path)
    except OSError:
        return ""


def path_exists(path: str) -> bool:
    """Return whether ``path`` exists, following symlinks."""
    return os.path.exists(path)


def list_directory_children(
    directory: str,
    show_hidden: bool,
) -> tuple[list[DirectoryChild], OSError | None]:
    """List visible children of ``directory`` in display order.

    Directories (symlinks to directories included) sort before everything
    else, then names compare case-sensitively by codepoint. Returns
    ``(children, scan_error)``; on scan failure ``children`` is empty and
    ``scan_error`` holds the raised ``OSError``.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue

                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                try:
                    is_symlink = child.is_symlink()
                except OSError:
                    is_symlink = False

                children.append(
                    DirectoryChild(
                        name=name,
                        path=os.path.join(directory, name),
                        is_dir=is_dir,
                        is_symlink=is_symlink,
                    )
                )
    except OSError as exc:
        return [], exc

    children.sort(key=lambda item: (not item.is_dir, item.name))
    return children, None


__all__ = [
    "read_symlink",
    "path_exists",
    "list_directory_children",
]
