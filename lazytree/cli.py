"""Command-line front door for lazytree.

Parses CLI options into ``TreeOptions``, validates the start path, and streams
the rendered tree to stdout one row at a time.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from typing import TextIO

from .file_tree_model import TreeOptions, UNBOUNDED_DEPTH, path_exists
from .tree_model import write_tree
from .ui_theme import available_theme_names, resolve_theme, stream_supports_color

PROG = "lazytree"


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports usage errors on one line with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.exit(1, f"{self.prog}: {message}. Use -h for help.\n")


def _level_int(value: str) -> int:
    """argparse type for non-negative depth limits."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``lazytree`` command."""
    parser = _ArgumentParser(
        prog=PROG,
        description="Display directory contents in a tree-like format.",
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden files (those starting with '.').")
    parser.add_argument("-d", "--dir-only", action="store_true", help="List directories only.")
    parser.add_argument("-f", "--full-path", action="store_true", help="Print the full path prefix for each entry.")
    parser.add_argument(
        "-L",
        "--level",
        metavar="N",
        type=_level_int,
        default=None,
        help="Descend only N levels deep.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--show-errors",
        action="store_true",
        help="Mark directories that cannot be opened instead of showing them empty.",
    )
    return parser


def _passthrough_undecodable_names(stream: TextIO) -> None:
    """Let names that are not valid in the stream encoding round-trip as raw bytes."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def _silence_closed_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush stays quiet."""
    try:
        stdout_fd = sys.stdout.fileno()
        os.dup2(os.open(os.devnull, os.O_WRONLY), stdout_fd)
    except (OSError, ValueError):
        pass


def options_from_args(args: argparse.Namespace) -> TreeOptions:
    """Convert parsed arguments into immutable traversal options."""
    return TreeOptions(
        start_path=args.path,
        show_hidden=args.all,
        dir_only=args.dir_only,
        full_path=args.full_path,
        max_depth=UNBOUNDED_DEPTH if args.level is None else args.level,
        show_errors=args.show_errors,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested path.

    ``argv`` defaults to ``sys.argv[1:]``. Usage errors and a missing start
    path exit with status 1; nothing is written to stdout in either case.
    A reader closing the pipe early ends the run quietly with status 0.
    """
    args = build_parser().parse_args(argv)
    options = options_from_args(args)

    if not path_exists(options.start_path):
        raise SystemExit(f"Error: Path '{options.start_path}' does not exist.")

    no_color = args.no_color or not stream_supports_color(sys.stdout)
    theme = resolve_theme(args.theme, no_color=no_color)
    _passthrough_undecodable_names(sys.stdout)
    try:
        write_tree(options, sys.stdout, theme)
        sys.stdout.flush()
    except BrokenPipeError:
        # Reader closed the pipe early.
        _silence_closed_stdout()


if __name__ == "__main__":
    main()
