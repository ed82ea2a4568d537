"""Reusable trailing debounce timer."""

from typing import Callable, Optional
from PyQt6.QtCore import QTimer


class DebounceTimer:
    """
    Trailing debounce timer.

    Each trigger() restarts the countdown; the handler fires once delay_ms
    after the last trigger.

    Usage:
        self._debounce = DebounceTimer(delay_ms=200, handler=self._persist)

        def on_draft_changed(self, text):
            self._debounce.trigger()
    """

    def __init__(self, delay_ms: int, handler: Callable[[], None]):
        self._delay_ms = delay_ms
        self._handler = handler
        self._timer: Optional[QTimer] = None

    @property
    def is_pending(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def trigger(self):
        """Restart the countdown."""
        if self._timer is None:
            self._timer = QTimer()
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self._handler)
        self._timer.start(self._delay_ms)

    def cancel(self):
        """Drop a pending trigger without firing."""
        if self._timer is not None:
            self._timer.stop()

    def force(self):
        """Cancel the countdown and fire the handler now."""
        self.cancel()
        self._handler()
