"""
Signal blocking for programmatic widget updates.

Loading a draft into an editor must not look like a user edit, so editors
are filled with their signals blocked.
"""

from contextlib import contextmanager
from PyQt6.QtWidgets import QWidget
import logging

logger = logging.getLogger(__name__)


class SignalService:
    """
    Examples:
        with SignalService.block_signals(editor):
            editor.setPlainText(draft)

        with SignalService.block_signals(first_edit, second_edit):
            first_edit.setText("a")
            second_edit.setText("b")
    """

    @staticmethod
    @contextmanager
    def block_signals(*widgets: QWidget):
        """Block signals on every widget; always unblocks, even on exception."""
        previous = []
        for widget in widgets:
            if widget is not None:
                previous.append((widget, widget.blockSignals(True)))
                logger.debug(f"Blocked signals on {type(widget).__name__}")

        try:
            yield
        finally:
            for widget, was_blocked in previous:
                widget.blockSignals(was_blocked)
