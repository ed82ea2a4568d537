"""
Core editing logic.

State machines for inline-editable fields plus the small PyQt6 utilities
they rely on (key classification, debouncing, background saves, responsive
sidebar state).
"""

from .edit_state import (
    EditMode,
    SavePolicy,
    EditController,
    ScalarEditController,
    ListEditController,
)
from .navigation import MoveTo, Append, NavigationAction, next_navigation, FocusRegistry
from .key_actions import KeyAction, scalar_key_action, list_key_action
from .exceptions import InlineEditError, SaveFailedError
from .debounce_timer import DebounceTimer
from .background_save import SaveTask, BackgroundSaveRunner
from .sidebar_state import SidebarState, SidebarResizeWatcher

__all__ = [
    "EditMode",
    "SavePolicy",
    "EditController",
    "ScalarEditController",
    "ListEditController",
    "MoveTo",
    "Append",
    "NavigationAction",
    "next_navigation",
    "FocusRegistry",
    "KeyAction",
    "scalar_key_action",
    "list_key_action",
    "InlineEditError",
    "SaveFailedError",
    "DebounceTimer",
    "SaveTask",
    "BackgroundSaveRunner",
    "SidebarState",
    "SidebarResizeWatcher",
]
