"""
Responsive sidebar state.

Open/collapsed/mobile flags for an application sidebar, owned by whoever
builds the main window and passed to the widgets that need it. A resize
watcher keeps the mobile flag in step with the window width between
mount() and unmount().
"""

import logging
from typing import Callable, List, Optional

from PyQt6.QtCore import QEvent, QObject
from PyQt6.QtWidgets import QWidget

from pyqt_inline_edit.protocols import get_edit_config

logger = logging.getLogger(__name__)

SidebarListener = Callable[["SidebarState"], None]


class SidebarState:
    """
    Sidebar flags with change notification.

    Usage:
        state = SidebarState(width=window.width())
        state.subscribe(lambda s: sidebar.setVisible(s.is_open or not s.is_mobile))
        state.toggle_sidebar()
    """

    def __init__(self, width: int, breakpoint: Optional[int] = None):
        self.breakpoint = breakpoint if breakpoint is not None else get_edit_config().sidebar_breakpoint
        self._is_mobile = width < self.breakpoint
        self._is_open = False
        self._is_collapsed = False
        self._listeners: List[SidebarListener] = []

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def is_mobile(self) -> bool:
        return self._is_mobile

    @property
    def is_collapsed(self) -> bool:
        return self._is_collapsed

    def subscribe(self, listener: SidebarListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SidebarListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _set_open(self, is_open: bool) -> None:
        if is_open == self._is_open:
            return
        self._is_open = is_open
        self._notify()

    def toggle_sidebar(self) -> None:
        self._set_open(not self._is_open)

    def open_sidebar(self) -> None:
        self._set_open(True)

    def close_sidebar(self) -> None:
        self._set_open(False)

    def toggle_collapse(self) -> None:
        self._is_collapsed = not self._is_collapsed
        self._notify()

    def update_width(self, width: int) -> bool:
        """
        Recompute the mobile flag for a new window width.

        Shrinking from desktop to mobile closes an open sidebar.

        Returns:
            True if any flag changed
        """
        mobile = width < self.breakpoint
        if mobile == self._is_mobile:
            return False

        was_mobile = self._is_mobile
        self._is_mobile = mobile
        if not was_mobile and mobile and self._is_open:
            self._is_open = False
        logger.debug(f"Sidebar mobile={mobile} at width {width}px")
        self._notify()
        return True


class SidebarResizeWatcher(QObject):
    """
    Event filter feeding window resizes into a SidebarState.

    mount() installs the filter and syncs the current width; unmount()
    removes it. A watcher follows at most one window at a time.
    """

    def __init__(self, state: SidebarState, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._state = state
        self._window: Optional[QWidget] = None

    @property
    def state(self) -> SidebarState:
        return self._state

    @property
    def is_mounted(self) -> bool:
        return self._window is not None

    def mount(self, window: QWidget) -> None:
        if self._window is not None:
            self.unmount()
        self._window = window
        window.installEventFilter(self)
        self._state.update_width(window.width())

    def unmount(self) -> None:
        if self._window is None:
            return
        self._window.removeEventFilter(self)
        self._window = None

    def eventFilter(self, obj, event):
        if obj is self._window and event.type() == QEvent.Type.Resize:
            self._state.update_width(event.size().width())
        return False
