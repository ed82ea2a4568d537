"""
Inline edit widgets.

PyQt6 renderings of the edit controllers: a scalar text field and an
ordered list of text items, both editable in place.
"""

from .clickable_surface import ClickableSurface
from .inline_edit import InlineEdit
from .inline_edit_list import InlineEditList

__all__ = [
    "ClickableSurface",
    "InlineEdit",
    "InlineEditList",
]
