"""
Widget ABC contracts for inline edit widgets.

Owners talk to every inline widget through the same explicit interface
instead of probing for attributes.
"""

from abc import ABC, ABCMeta, abstractmethod
from typing import Any

from PyQt6.QtCore import QObject


class PyQtWidgetMeta(type(QObject), ABCMeta):
    """Metaclass for PyQt widgets that also inherit ABC contracts."""


class ValueGettable(ABC):
    """ABC for widgets that expose their committed value."""

    @abstractmethod
    def get_value(self) -> Any:
        """Return the committed value currently displayed."""
        pass


class ValueSettable(ABC):
    """ABC for widgets whose committed value is supplied by the owner."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Replace the committed value.

        Args:
            value: New committed value. None clears the widget.
        """
        pass


class PlaceholderCapable(ABC):
    """ABC for widgets that show placeholder text when empty."""

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        pass
