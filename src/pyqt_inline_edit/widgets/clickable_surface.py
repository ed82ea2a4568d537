"""Clickable frame used as the view-mode surface of inline widgets."""

from PyQt6.QtWidgets import QFrame
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QCursor


class ClickableSurface(QFrame):
    """QFrame that emits ``clicked`` on left mouse press while interactive."""

    clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("inline_view_surface")
        self._interactive = True
        self.set_interactive(True)

    @property
    def interactive(self) -> bool:
        return self._interactive

    def set_interactive(self, interactive: bool):
        self._interactive = interactive
        shape = Qt.CursorShape.PointingHandCursor if interactive else Qt.CursorShape.ArrowCursor
        self.setCursor(QCursor(shape))

    def mousePressEvent(self, event):
        if self._interactive and event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
            event.accept()
            return
        super().mousePressEvent(event)
