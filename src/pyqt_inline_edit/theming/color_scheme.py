"""
Color scheme for inline edit widgets.

Semantic color names shared by the view surfaces, editors and buttons so
every inline field in an application reads the same way.
"""

import logging
from dataclasses import dataclass, fields
from typing import Dict, Tuple
from PyQt6.QtGui import QColor

logger = logging.getLogger(__name__)

RGB = Tuple[int, int, int]


@dataclass
class ColorScheme:
    """
    Semantic colors for inline edit widgets. Defaults form the dark theme.
    """

    # Surfaces
    panel_bg: RGB = (30, 30, 30)          # #1e1e1e - Widget background
    hover_bg: RGB = (51, 51, 51)          # #333333 - View surface under the cursor
    border_color: RGB = (85, 85, 85)      # #555555 - Separators

    # Text
    text_primary: RGB = (255, 255, 255)   # #ffffff - Committed values
    text_muted: RGB = (136, 136, 136)     # #888888 - Placeholders
    text_accent: RGB = (0, 170, 255)      # #00aaff - List bullets

    # Inputs
    input_bg: RGB = (64, 64, 64)
    input_border: RGB = (102, 102, 102)
    input_text: RGB = (255, 255, 255)
    input_focus_border: RGB = (0, 170, 255)

    # Buttons
    button_normal_bg: RGB = (64, 64, 64)
    button_hover_bg: RGB = (80, 80, 80)
    button_pressed_bg: RGB = (48, 48, 48)
    button_disabled_bg: RGB = (42, 42, 42)
    button_text: RGB = (255, 255, 255)
    button_disabled_text: RGB = (102, 102, 102)
    button_primary_bg: RGB = (0, 120, 212)  # #0078d4 - Save

    # Status
    status_error: RGB = (255, 85, 85)

    def to_qcolor(self, color_tuple: RGB) -> QColor:
        return QColor(*color_tuple)

    def to_hex(self, color_tuple: RGB) -> str:
        """
        Convert RGB tuple to hex color string.

        Args:
            color_tuple: RGB color tuple (r, g, b)

        Returns:
            str: Hex color string (e.g., "#ff0000")
        """
        r, g, b = color_tuple
        return f"#{r:02x}{g:02x}{b:02x}"

    def get_color_dict(self) -> Dict[str, RGB]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def create_dark_theme(cls) -> "ColorScheme":
        return cls()

    @classmethod
    def create_light_theme(cls) -> "ColorScheme":
        """Light variant keeping the same semantic roles."""
        return cls(
            panel_bg=(255, 255, 255),
            hover_bg=(240, 240, 240),
            border_color=(180, 180, 180),
            text_primary=(33, 33, 33),
            text_muted=(117, 117, 117),
            text_accent=(0, 102, 204),
            input_bg=(255, 255, 255),
            input_border=(180, 180, 180),
            input_text=(33, 33, 33),
            input_focus_border=(0, 102, 204),
            button_normal_bg=(230, 230, 230),
            button_hover_bg=(215, 215, 215),
            button_pressed_bg=(200, 200, 200),
            button_disabled_bg=(245, 245, 245),
            button_text=(33, 33, 33),
            button_disabled_text=(160, 160, 160),
            button_primary_bg=(0, 102, 204),
            status_error=(198, 40, 40),
        )
