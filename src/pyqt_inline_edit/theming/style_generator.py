"""
QStyleSheet generator for inline edit widgets.

Builds stylesheet strings from a ColorScheme so widgets never hardcode colors.
"""

import logging
from .color_scheme import ColorScheme

logger = logging.getLogger(__name__)


class StyleSheetGenerator:
    """Generates QStyleSheet strings from a ColorScheme."""

    def __init__(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def update_color_scheme(self, color_scheme: ColorScheme):
        self.color_scheme = color_scheme

    def generate_view_surface_style(self, interactive: bool = True) -> str:
        """
        Generate QStyleSheet for the read-only surface shown in view mode.

        Args:
            interactive: Whether the surface reacts to hover (False when disabled)

        Returns:
            str: QStyleSheet for the view surface frame
        """
        cs = self.color_scheme
        hover = f"""
            QFrame#inline_view_surface:hover {{
                background-color: {cs.to_hex(cs.hover_bg)};
            }}
        """ if interactive else ""
        return f"""
            QFrame#inline_view_surface {{
                background-color: transparent;
                border-radius: 4px;
                padding: 4px;
            }}
            {hover}
        """

    def generate_value_text_style(self) -> str:
        cs = self.color_scheme
        return f"color: {cs.to_hex(cs.text_primary)}; font-style: normal;"

    def generate_placeholder_text_style(self) -> str:
        """Muted italic style for empty values."""
        cs = self.color_scheme
        return f"color: {cs.to_hex(cs.text_muted)}; font-style: italic;"

    def generate_editor_style(self) -> str:
        cs = self.color_scheme
        return f"""
            QPlainTextEdit, QLineEdit {{
                background-color: {cs.to_hex(cs.input_bg)};
                color: {cs.to_hex(cs.input_text)};
                border: 1px solid {cs.to_hex(cs.input_border)};
                border-radius: 3px;
                padding: 4px;
            }}
            QPlainTextEdit:focus, QLineEdit:focus {{
                border: 1px solid {cs.to_hex(cs.input_focus_border)};
            }}
        """

    def generate_button_style(self, primary: bool = False) -> str:
        """
        Generate QStyleSheet for buttons with all states.

        Args:
            primary: Use the accent background (Save buttons)

        Returns:
            str: Complete QStyleSheet for button styling
        """
        cs = self.color_scheme
        normal_bg = cs.button_primary_bg if primary else cs.button_normal_bg
        return f"""
            QPushButton {{
                background-color: {cs.to_hex(normal_bg)};
                color: {cs.to_hex(cs.button_text)};
                border: none;
                border-radius: 3px;
                padding: 4px 10px;
            }}
            QPushButton:hover {{
                background-color: {cs.to_hex(cs.button_hover_bg)};
            }}
            QPushButton:pressed {{
                background-color: {cs.to_hex(cs.button_pressed_bg)};
            }}
            QPushButton:disabled {{
                background-color: {cs.to_hex(cs.button_disabled_bg)};
                color: {cs.to_hex(cs.button_disabled_text)};
            }}
        """

    def generate_error_text_style(self) -> str:
        cs = self.color_scheme
        return f"color: {cs.to_hex(cs.status_error)};"

    def generate_separator_style(self) -> str:
        cs = self.color_scheme
        return f"border-top: 1px solid {cs.to_hex(cs.border_color)};"
