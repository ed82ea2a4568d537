"""Key press classification for inline editors."""

from enum import Enum

from PyQt6.QtCore import Qt

_ENTER_KEYS = (Qt.Key.Key_Return, Qt.Key.Key_Enter)


class KeyAction(Enum):
    CANCEL = "cancel"
    CONFIRM = "confirm"
    NEXT_ITEM = "next_item"
    PASS_THROUGH = "pass_through"  # Let the editor handle the key


def _shift_held(modifiers: Qt.KeyboardModifier) -> bool:
    return bool(modifiers & Qt.KeyboardModifier.ShiftModifier)


def scalar_key_action(key: int, modifiers: Qt.KeyboardModifier, multiline: bool = False) -> KeyAction:
    """
    Map a key press in a scalar editor to an action.

    Escape cancels. Enter confirms single-line fields unless Shift is held;
    multiline fields keep Enter as a line break.
    """
    if key == Qt.Key.Key_Escape:
        return KeyAction.CANCEL
    if key in _ENTER_KEYS and not multiline and not _shift_held(modifiers):
        return KeyAction.CONFIRM
    return KeyAction.PASS_THROUGH


def list_key_action(key: int, modifiers: Qt.KeyboardModifier) -> KeyAction:
    """Escape cancels the whole list edit; Enter without Shift moves to the next item."""
    if key == Qt.Key.Key_Escape:
        return KeyAction.CANCEL
    if key in _ENTER_KEYS and not _shift_held(modifiers):
        return KeyAction.NEXT_ITEM
    return KeyAction.PASS_THROUGH
