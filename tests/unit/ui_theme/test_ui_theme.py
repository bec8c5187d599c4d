"""Tests for theme selection and color-mode detection."""

from __future__ import annotations

import io
import unittest

from lazytree import ui_theme


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class ThemeSelectionTests(unittest.TestCase):
    def test_unknown_or_empty_names_fall_back_to_default(self) -> None:
        self.assertEqual(ui_theme.normalize_theme_name(None), "default")
        self.assertEqual(ui_theme.normalize_theme_name("  "), "default")
        self.assertEqual(ui_theme.normalize_theme_name("nope"), "default")
        self.assertEqual(ui_theme.normalize_theme_name(" Ocean "), "ocean")

    def test_no_color_always_resolves_plain_theme(self) -> None:
        self.assertIs(ui_theme.resolve_theme("ocean", no_color=True), ui_theme.PLAIN_THEME)
        self.assertIs(ui_theme.resolve_theme("ocean"), ui_theme.OCEAN_THEME)
        self.assertIs(ui_theme.resolve_theme(None), ui_theme.DEFAULT_THEME)

    def test_plain_theme_is_not_selectable_by_name(self) -> None:
        self.assertEqual(ui_theme.available_theme_names(), ("default", "ocean"))
        self.assertIs(ui_theme.resolve_theme("plain"), ui_theme.DEFAULT_THEME)

    def test_stream_supports_color_checks_isatty(self) -> None:
        self.assertFalse(ui_theme.stream_supports_color(io.StringIO()))
        self.assertTrue(ui_theme.stream_supports_color(_TtyStream()))

    def test_closed_stream_does_not_support_color(self) -> None:
        stream = io.StringIO()
        stream.close()
        self.assertFalse(ui_theme.stream_supports_color(stream))


if __name__ == "__main__":
    unittest.main()
