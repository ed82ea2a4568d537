"""Inline-editable bulleted list with per-item inputs and keyboard focus chaining."""

import html
import logging
from typing import Any, Callable, List, Optional, Sequence

from PyQt6.QtCore import QEvent, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QLineEdit, QPushButton, QStackedWidget, QVBoxLayout, QWidget
)

from pyqt_inline_edit.core import (
    Append, BackgroundSaveRunner, EditMode, FocusRegistry, InlineEditError, KeyAction, ListEditController,
    MoveTo, SavePolicy, list_key_action
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


class InlineEditList(QWidget, ValueGettable, ValueSettable, PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """
    Ordered list of text items shown as bullets until activated.

    In edit mode every item gets its own input with a remove button. Enter on
    the last input appends an empty item and focuses it; Enter elsewhere moves
    to the next input. Escape cancels the whole edit. Empty items are dropped
    when saving.

    Usage:
        actions = InlineEditList(
            items=assessment.action_items,
            on_save=lambda items: api.update_actions(assessment.id, items),
        )
    """

    saved = pyqtSignal(list)
    draft_changed = pyqtSignal(list)
    editing_started = pyqtSignal()
    mode_changed = pyqtSignal(object)  # EditMode

    def __init__(
        self,
        items: Optional[Sequence[str]] = None,
        on_save: Optional[Callable[[List[str]], None]] = None,
        on_change: Optional[Callable[[List[str]], None]] = None,
        on_focus: Optional[Callable[[], None]] = None,
        placeholder: Optional[str] = None,
        empty_text: Optional[str] = None,
        add_button_text: Optional[str] = None,
        disabled: bool = False,
        test_id: Optional[str] = None,
        save_worker: Optional[Callable[[List[str]], Any]] = None,
        save_policy: SavePolicy = SavePolicy.ALWAYS,
        color_scheme: Optional[ColorScheme] = None,
        parent=None,
    ):
        super().__init__(parent)
        config = get_edit_config()
        self._placeholder = placeholder if placeholder is not None else config.list_item_placeholder
        self._empty_text = empty_text if empty_text is not None else config.empty_list_text
        self._add_button_text = add_button_text if add_button_text is not None else config.add_button_text
        self._save_worker = save_worker
        self._save_runner = BackgroundSaveRunner() if save_worker is not None else None
        self._color_scheme = color_scheme or ColorScheme()
        self._styles = StyleSheetGenerator(self._color_scheme)
        self._previous_mode = EditMode.VIEWING
        self._item_editors: List[QLineEdit] = []
        self._focus_registry = FocusRegistry(focus_fn=lambda editor: editor.setFocus())

        if on_save is not None:
            self.saved.connect(on_save)
        if on_change is not None:
            self.draft_changed.connect(on_change)
        if on_focus is not None:
            self.editing_started.connect(on_focus)

        self._controller = ListEditController(
            items,
            on_save=self._handle_save,
            on_change=self.draft_changed.emit,
            on_focus=self.editing_started.emit,
            on_mode_changed=self._on_mode_changed,
            disabled=disabled,
            save_policy=save_policy,
            deferred_save=save_worker is not None,
        )

        self.setObjectName(test_id or "editable-list")
        self._setup_ui()
        self._render()

    def _setup_ui(self):
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
        self._view_label.setWordWrap(True)
        self._view_label.setTextInteractionFlags(Qt.TextInteractionFlag.NoTextInteraction)
        view_layout.addWidget(self._view_label, 1)

        self._edit_button = QPushButton("Edit")
        self._edit_button.setObjectName("button-edit-list")
        self._edit_button.setStyleSheet(self._styles.generate_button_style())
        self._edit_button.clicked.connect(self.activate)
        view_layout.addWidget(self._edit_button)

        self._stack.addWidget(self._view_surface)

        # Edit page
        edit_page = QWidget()
        edit_layout = QVBoxLayout(edit_page)
        edit_layout.setContentsMargins(0, 0, 0, 0)
        edit_layout.setSpacing(8)

        rows_container = QWidget()
        self._rows_layout = QVBoxLayout(rows_container)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.setSpacing(4)
        edit_layout.addWidget(rows_container)

        add_row = QHBoxLayout()
        self._add_button = QPushButton(self._add_button_text)
        self._add_button.setObjectName("button-add-item")
        self._add_button.setStyleSheet(self._styles.generate_button_style())
        self._add_button.clicked.connect(self.add_item)
        add_row.addWidget(self._add_button)
        add_row.addStretch()
        edit_layout.addLayout(add_row)

        self._error_label = QLabel()
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(self._styles.generate_error_text_style())
        self._error_label.hide()
        edit_layout.addWidget(self._error_label)

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setStyleSheet(self._styles.generate_separator_style())
        edit_layout.addWidget(separator)

        button_row = QHBoxLayout()
        self._save_button = QPushButton("Save")
        self._save_button.setObjectName("button-save-list")
        self._save_button.setStyleSheet(self._styles.generate_button_style(primary=True))
        self._save_button.clicked.connect(self.confirm)
        button_row.addWidget(self._save_button)

        self._cancel_button = QPushButton("Cancel")
        self._cancel_button.setObjectName("button-cancel-list")
        self._cancel_button.setStyleSheet(self._styles.generate_button_style())
        self._cancel_button.clicked.connect(self.cancel)
        button_row.addWidget(self._cancel_button)
        button_row.addStretch()
        edit_layout.addLayout(button_row)

        self._stack.addWidget(edit_page)

    # ========== PUBLIC API ==========

    @property
    def controller(self) -> ListEditController:
        return self._controller

    @property
    def mode(self) -> EditMode:
        return self._controller.mode

    @property
    def item_editors(self) -> List[QLineEdit]:
        return list(self._item_editors)

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

    def add_item(self) -> bool:
        if not self._controller.add_item():
            return False
        self._rebuild_rows()
        return True

    def remove_item(self, index: int) -> bool:
        if not self._controller.remove_item(index):
            return False
        self._rebuild_rows()
        return True

    def get_value(self) -> List[str]:
        """Implement ValueGettable ABC."""
        return self._controller.committed_value

    def set_value(self, value: Optional[Sequence[str]]) -> None:
        """Implement ValueSettable ABC. An edit in progress keeps its draft."""
        self._controller.sync_committed(value)
        if self._controller.mode is EditMode.VIEWING:
            self._refresh_view()

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC. Applies to the item inputs."""
        self._placeholder = text
        for editor in self._item_editors:
            editor.setPlaceholderText(text)

    def set_empty_text(self, text: str) -> None:
        self._empty_text = text
        self._refresh_view()

    # ========== RENDERING ==========

    def _render(self):
        mode = self._controller.mode
        if mode is EditMode.VIEWING:
            self._clear_rows()
            self._refresh_view()
            self._stack.setCurrentIndex(VIEW_PAGE)
            return

        editing = mode is EditMode.EDITING
        entering = editing and self._previous_mode is EditMode.VIEWING
        if entering:
            self._rebuild_rows()
        for editor in self._item_editors:
            editor.setReadOnly(not editing)
        self._add_button.setEnabled(editing)
        self._save_button.setEnabled(editing)
        self._cancel_button.setEnabled(editing)
        self._save_button.setText("Save" if editing else "Saving...")
        self._show_error()
        self._stack.setCurrentIndex(EDIT_PAGE)

        if entering:
            self._focus_registry.focus(0)

    def _refresh_view(self):
        disabled = self._controller.disabled
        self._view_surface.set_interactive(not disabled)
        self._view_surface.setStyleSheet(self._styles.generate_view_surface_style(interactive=not disabled))
        self._edit_button.setVisible(not disabled)

        items = self._controller.committed_value
        self._view_label.setProperty("is_placeholder", not items)
        if not items:
            self._view_label.setTextFormat(Qt.TextFormat.PlainText)
            self._view_label.setText(self._empty_text)
            if get_edit_config().enable_placeholder_styling:
                self._view_label.setStyleSheet(self._styles.generate_placeholder_text_style())
            return

        self._view_label.setTextFormat(Qt.TextFormat.RichText)
        self._view_label.setText(self._bullet_html(items))
        self._view_label.setStyleSheet(self._styles.generate_value_text_style())

    def _bullet_html(self, items: Sequence[str]) -> str:
        cs = self._color_scheme
        bullet = cs.to_hex(cs.text_accent)
        rows = "".join(
            f'<li style="margin-bottom: 4px;"><span style="color: {bullet};">&#9679;</span>&nbsp;&nbsp;'
            f"{html.escape(item)}</li>"
            for item in items
        )
        return f'<ul style="list-style-type: none; margin-left: 0px;">{rows}</ul>'

    def _clear_rows(self):
        self._focus_registry.clear()
        self._item_editors = []
        while self._rows_layout.count():
            row = self._rows_layout.takeAt(0).widget()
            if row is not None:
                row.hide()
                row.deleteLater()

    def _rebuild_rows(self):
        """Recreate one input row per draft item; positions shift after add/remove."""
        self._clear_rows()
        for index, text in enumerate(self._controller.draft_items):
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)

            editor = QLineEdit()
            editor.setPlaceholderText(self._placeholder)
            editor.setStyleSheet(self._styles.generate_editor_style())
            with SignalService.block_signals(editor):
                editor.setText(text)
            editor.textEdited.connect(lambda value, i=index: self._controller.mutate_item(i, value))
            editor.installEventFilter(self)
            row_layout.addWidget(editor, 1)

            remove_button = QPushButton("Remove")
            remove_button.setObjectName(f"button-remove-item-{index}")
            remove_button.setStyleSheet(self._styles.generate_button_style())
            remove_button.clicked.connect(lambda _checked=False, i=index: self.remove_item(i))
            row_layout.addWidget(remove_button)

            self._rows_layout.addWidget(row)
            self._item_editors.append(editor)
            self._focus_registry.register(editor)

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

    def _navigate_from(self, index: int):
        action = self._controller.navigate(index)
        if isinstance(action, Append):
            self._rebuild_rows()
            self._focus_registry.focus(len(self._focus_registry) - 1)
        elif isinstance(action, MoveTo):
            self._focus_registry.focus(action.index)

    def _handle_save(self, items: List[str]):
        logger.info(f"{self.objectName()}: saving {len(items)} items")
        self.saved.emit(items)
        if self._save_runner is not None:
            self._save_runner.run(
                target=self._save_worker,
                value=items,
                on_success=self._on_background_save_done,
                on_error=self._controller.save_failed,
            )

    def _on_background_save_done(self, _result):
        self._controller.save_succeeded()

    def eventFilter(self, obj, event):
        if event.type() == QEvent.Type.KeyPress:
            index = self._focus_registry.index_of(obj)
            if index >= 0:
                action = list_key_action(event.key(), event.modifiers())
                if action is KeyAction.CANCEL:
                    self.cancel()
                    return True
                if action is KeyAction.NEXT_ITEM:
                    self._navigate_from(index)
                    return True
        return super().eventFilter(obj, event)

    def closeEvent(self, event):
        if self._save_runner is not None:
            self._save_runner.cleanup()
        if self._controller.is_saving:
            self._controller.save_failed(InlineEditError("save interrupted because the editor closed"))
        super().closeEvent(event)
