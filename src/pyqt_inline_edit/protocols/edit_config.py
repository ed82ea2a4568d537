"""Base configuration for inline edit widgets.

Provides hooks for applications to customize defaults shared by every widget.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class InlineEditConfig:
    """Defaults applied when a widget is created without explicit values.

    Attributes:
        placeholder: View text for an empty scalar field
        list_item_placeholder: Placeholder inside an empty list item input
        empty_list_text: View text for an empty list
        add_button_text: Label of the list "add" button
        single_line_rows: Visible editor rows for single-line fields
        multiline_rows: Visible editor rows for multiline fields
        enable_placeholder_styling: Whether placeholders render muted and italic
        sidebar_breakpoint: Window width below which the layout counts as mobile
        autosave_delay_ms: Inactivity delay before a draft autosave fires
    """

    placeholder: str = "Click to edit..."
    list_item_placeholder: str = "Add new item..."
    empty_list_text: str = "Click to add action items..."
    add_button_text: str = "Add item"
    single_line_rows: int = 2
    multiline_rows: int = 4
    enable_placeholder_styling: bool = True
    sidebar_breakpoint: int = 1024
    autosave_delay_ms: int = 800


# Global config instance (set by application)
_edit_config: Optional[InlineEditConfig] = None


def set_edit_config(config: Optional[InlineEditConfig]) -> None:
    """Set the global inline edit configuration. None restores defaults."""
    global _edit_config
    _edit_config = config


def get_edit_config() -> InlineEditConfig:
    """Get the current inline edit configuration, or defaults if unset."""
    if _edit_config is None:
        return InlineEditConfig()
    return _edit_config
