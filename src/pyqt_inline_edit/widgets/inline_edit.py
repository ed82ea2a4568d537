"""Inline-editable text field: read-only label until clicked, then an editor with Save/Cancel."""

import logging
from typing import Any, Callable, Optional

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout, QLabel, QPlainTextEdit, QPushButton, QStackedWidget, QVBoxLayout, QWidget
)

from pyqt_inline_edit.core import (
    BackgroundSaveRunner, EditMode, InlineEditError, KeyAction, SavePolicy, ScalarEditController,
    scalar_key_action
)
from pyqt_inline_edit.protocols import (
    PlaceholderCapable, PyQtWidgetMeta, ValueGettable, ValueSettable, get_edit_config
)
from pyqt_inline_edit.services import SignalService
from pyqt_inline_edit.theming import ColorScheme, StyleSheetGenerator

from .clickable_surface import ClickableSurface

logger = logging.getLogger(__name__)

VIEW_PAGE = 0
EDIT_PAGE = 1
EDITOR_PADDING_PX = 12


class InlineEdit(QWidget, ValueGettable, ValueSettable, PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """
    Single text value shown as text until activated.

    The committed value belongs to the owner: after ``saved`` fires the owner
    persists the value and passes it back through set_value().

    Usage:
        summary = InlineEdit(
            value=assessment.summary,
            on_save=lambda text: api.update_summary(assessment.id, text),
            multiline=True,
            test_id="text-summary",
        )

    With ``save_worker`` the callable runs on a background thread and the
    field stays in SAVING until it returns; an exception reopens the editor
    with the error shown.
    """

    saved = pyqtSignal(str)
    draft_changed = pyqtSignal(str)
    editing_started = pyqtSignal()
    mode_changed = pyqtSignal(object)  # EditMode

    def __init__(
        self,
        value: Optional[str] = "",
        on_save: Optional[Callable[[str], None]] = None,
        on_change: Optional[Callable[[str], None]] = None,
        on_focus: Optional[Callable[[], None]] = None,
        placeholder: Optional[str] = None,
        multiline: bool = False,
        disabled: bool = False,
        test_id: Optional[str] = None,
        save_worker: Optional[Callable[[str], Any]] = None,
        save_policy: SavePolicy = SavePolicy.ON_CHANGE,
        color_scheme: Optional[ColorScheme] = None,
        parent=None,
    ):
        super().__init__(parent)
        config = get_edit_config()
        self._placeholder = placeholder if placeholder is not None else config.placeholder
        self._save_worker = save_worker
        self._save_runner = BackgroundSaveRunner() if save_worker is not None else None
        self._styles = StyleSheetGenerator(color_scheme or ColorScheme())
        self._previous_mode = EditMode.VIEWING

        if on_save is not None:
            self.saved.connect(on_save)
        if on_change is not None:
            self.draft_changed.connect(on_change)
        if on_focus is not None:
            self.editing_started.connect(on_focus)

        self._controller = ScalarEditController(
            value,
            on_save=self._handle_save,
            on_change=self.draft_changed.emit,
            on_focus=self.editing_started.emit,
            on_mode_changed=self._on_mode_changed,
            multiline=multiline,
            disabled=disabled,
            save_policy=save_policy,
            deferred_save=save_worker is not None,
        )

        self.setObjectName(test_id or "editable-text")
        self._setup_ui(config)
        self._render()

    def _setup_ui(self, config):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._stack = QStackedWidget()
        layout.addWidget(self._stack)

        # View page
        self._view_surface = ClickableSurface()
        self._view_surface.clicked.connect(self.activate)
        view_layout = QHBoxLayout(self._view_surface)
        view_layout.setContentsMargins(6, 6, 6, 6)

        self._view_label = QLabel()
        self._view_label.setTextFormat(Qt.TextFormat.PlainText)
        self._view_label.setWordWrap(True)
        view_layout.addWidget(self._view_label, 1)

        self._edit_button = QPushButton("Edit")
        self._edit_button.setObjectName("button-edit-text")
        self._edit_button.setStyleSheet(self._styles.generate_button_style())
        self._edit_button.clicked.connect(self.activate)
        view_layout.addWidget(self._edit_button)

        self._stack.addWidget(self._view_surface)

        # Edit page
        edit_page = QWidget()
        edit_layout = QVBoxLayout(edit_page)
        edit_layout.setContentsMargins(0, 0, 0, 0)
        edit_layout.setSpacing(6)

        self._editor = QPlainTextEdit()
        self._editor.setPlaceholderText(self._placeholder)
        self._editor.setStyleSheet(self._styles.generate_editor_style())
        rows = config.multiline_rows if self._controller.multiline else config.single_line_rows
        self._editor.setMinimumHeight(rows * self._editor.fontMetrics().lineSpacing() + EDITOR_PADDING_PX)
        self._editor.textChanged.connect(self._on_editor_text_changed)
        self._editor.installEventFilter(self)
        edit_layout.addWidget(self._editor)

        self._error_label = QLabel()
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(self._styles.generate_error_text_style())
        self._error_label.hide()
        edit_layout.addWidget(self._error_label)

        button_row = QHBoxLayout()
        self._save_button = QPushButton("Save")
        self._save_button.setObjectName("button-save-edit")
        self._save_button.setStyleSheet(self._styles.generate_button_style(primary=True))
        self._save_button.clicked.connect(self.confirm)
        button_row.addWidget(self._save_button)

        self._cancel_button = QPushButton("Cancel")
        self._cancel_button.setObjectName("button-cancel-edit")
        self._cancel_button.setStyleSheet(self._styles.generate_button_style())
        self._cancel_button.clicked.connect(self.cancel)
        button_row.addWidget(self._cancel_button)
        button_row.addStretch()
        edit_layout.addLayout(button_row)

        self._stack.addWidget(edit_page)

    # ========== PUBLIC API ==========

    @property
    def controller(self) -> ScalarEditController:
        return self._controller

    @property
    def mode(self) -> EditMode:
        return self._controller.mode

    @property
    def editor(self) -> QPlainTextEdit:
        return self._editor

    @property
    def view_surface(self) -> ClickableSurface:
        return self._view_surface

    @property
    def view_label(self) -> QLabel:
        return self._view_label

    @property
    def error_label(self) -> QLabel:
        return self._error_label

    def activate(self) -> bool:
        return self._controller.activate()

    def confirm(self) -> bool:
        return self._controller.confirm()

    def cancel(self) -> bool:
        return self._controller.cancel()

    def get_value(self) -> str:
        """Implement ValueGettable ABC."""
        return self._controller.committed_value

    def set_value(self, value: Optional[str]) -> None:
        """Implement ValueSettable ABC. An edit in progress keeps its draft."""
        self._controller.sync_committed(value)
        if self._controller.mode is EditMode.VIEWING:
            self._refresh_view()

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self._placeholder = text
        self._editor.setPlaceholderText(text)
        self._refresh_view()

    def set_disabled(self, disabled: bool) -> None:
        self._controller.disabled = disabled
        self._refresh_view()

    # ========== RENDERING ==========

    def _render(self):
        mode = self._controller.mode
        if mode is EditMode.VIEWING:
            self._refresh_view()
            self._stack.setCurrentIndex(VIEW_PAGE)
            return

        editing = mode is EditMode.EDITING
        if editing and self._previous_mode is EditMode.VIEWING:
            with SignalService.block_signals(self._editor):
                self._editor.setPlainText(self._controller.draft)
        self._editor.setReadOnly(not editing)
        self._save_button.setEnabled(editing)
        self._cancel_button.setEnabled(editing)
        self._save_button.setText("Save" if editing else "Saving...")
        self._show_error()
        self._stack.setCurrentIndex(EDIT_PAGE)

        if editing and self._previous_mode is EditMode.VIEWING:
            self._editor.setFocus()
            self._editor.selectAll()

    def _refresh_view(self):
        disabled = self._controller.disabled
        self._view_surface.set_interactive(not disabled)
        self._view_surface.setStyleSheet(self._styles.generate_view_surface_style(interactive=not disabled))
        self._edit_button.setVisible(not disabled)

        placeholder_shown = self._controller.is_placeholder_shown()
        self._view_label.setText(self._controller.display_text(self._placeholder))
        self._view_label.setProperty("is_placeholder", placeholder_shown)
        if placeholder_shown and get_edit_config().enable_placeholder_styling:
            self._view_label.setStyleSheet(self._styles.generate_placeholder_text_style())
        else:
            self._view_label.setStyleSheet(self._styles.generate_value_text_style())

    def _show_error(self):
        error = self._controller.last_error
        if error is None:
            self._error_label.clear()
            self._error_label.hide()
        else:
            self._error_label.setText(str(error))
            self._error_label.show()

    # ========== EVENT HANDLERS ==========

    def _on_mode_changed(self, mode: EditMode):
        self._render()
        self._previous_mode = mode
        self.mode_changed.emit(mode)

    def _on_editor_text_changed(self):
        self._controller.mutate_draft(self._editor.toPlainText())

    def _handle_save(self, value: str):
        logger.info(f"{self.objectName()}: saving {len(value)} characters")
        self.saved.emit(value)
        if self._save_runner is not None:
            self._save_runner.run(
                target=self._save_worker,
                value=value,
                on_success=self._on_background_save_done,
                on_error=self._controller.save_failed,
            )

    def _on_background_save_done(self, _result):
        self._controller.save_succeeded()

    def eventFilter(self, obj, event):
        if obj is self._editor and event.type() == QEvent.Type.KeyPress:
            action = scalar_key_action(event.key(), event.modifiers(), self._controller.multiline)
            if action is KeyAction.CANCEL:
                self.cancel()
                return True
            if action is KeyAction.CONFIRM:
                self.confirm()
                return True
        return super().eventFilter(obj, event)

    def closeEvent(self, event):
        if self._save_runner is not None:
            self._save_runner.cleanup()
        if self._controller.is_saving:
            self._controller.save_failed(InlineEditError("save interrupted because the editor closed"))
        super().closeEvent(event)
