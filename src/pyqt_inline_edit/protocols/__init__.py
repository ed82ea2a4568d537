"""
Widget contracts and shared configuration.

ABC-based widget contracts plus the application-level configuration hook
read by every inline edit widget.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    PlaceholderCapable,
    PyQtWidgetMeta,
)
from .edit_config import InlineEditConfig, set_edit_config, get_edit_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "PlaceholderCapable",
    "PyQtWidgetMeta",
    "InlineEditConfig",
    "set_edit_config",
    "get_edit_config",
]
