"""Tests for theming system."""

import pytest


def test_color_scheme_to_hex():
    from pyqt_inline_edit.theming import ColorScheme

    scheme = ColorScheme()
    assert scheme.to_hex((255, 0, 16)) == "#ff0010"
    assert "text_muted" in scheme.get_color_dict()


def test_light_theme_differs_from_dark():
    from pyqt_inline_edit.theming import ColorScheme

    assert ColorScheme.create_light_theme().panel_bg != ColorScheme.create_dark_theme().panel_bg


def test_placeholder_style_is_muted_italic():
    from pyqt_inline_edit.theming import ColorScheme, StyleSheetGenerator

    scheme = ColorScheme()
    style = StyleSheetGenerator(scheme).generate_placeholder_text_style()
    assert "italic" in style
    assert scheme.to_hex(scheme.text_muted) in style


def test_view_surface_hover_only_when_interactive():
    from pyqt_inline_edit.theming import ColorScheme, StyleSheetGenerator

    generator = StyleSheetGenerator(ColorScheme())
    assert ":hover" in generator.generate_view_surface_style(interactive=True)
    assert ":hover" not in generator.generate_view_surface_style(interactive=False)
