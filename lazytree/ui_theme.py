"""Output theme definitions and selection helpers.

Themes are ANSI palettes for tree rows. Only branch prefixes of directory rows
and inline error markers are colored; names are always printed verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
import sys
from typing import TextIO


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    tree_dir: str
    tree_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_dir="\033[1;34m",
    tree_error="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    tree_dir="\033[1;38;5;45m",
    tree_error="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_dir="",
    tree_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def stream_supports_color(stream: TextIO | None = None) -> bool:
    """Return whether ``stream`` (stdout by default) is an interactive terminal."""
    target = stream if stream is not None else sys.stdout
    try:
        return bool(target.isatty())
    except (AttributeError, ValueError):
        return False


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES.get(normalize_theme_name(name), DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "stream_supports_color",
    "resolve_theme",
]
