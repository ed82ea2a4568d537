"""
Debounced autosave for in-progress drafts.

Plugs into a field's live change notification and persists only the latest
draft once the user pauses typing. Nothing here marks the draft as committed.
"""

import copy
import logging
from typing import Any, Callable, Optional

from pyqt_inline_edit.core.debounce_timer import DebounceTimer
from pyqt_inline_edit.protocols import get_edit_config

logger = logging.getLogger(__name__)

_NOTHING = object()


class DraftAutosaver:
    """
    Callable sink for ``on_change`` / ``draft_changed``.

    Usage:
        autosaver = DraftAutosaver(persist=drafts_api.store, delay_ms=500)
        summary_edit.draft_changed.connect(autosaver)
        summary_edit.saved.connect(lambda _value: autosaver.discard())
    """

    def __init__(self, persist: Callable[[Any], None], delay_ms: Optional[int] = None):
        if delay_ms is None:
            delay_ms = get_edit_config().autosave_delay_ms
        self._persist = persist
        self._pending: Any = _NOTHING
        self._timer = DebounceTimer(delay_ms=delay_ms, handler=self._persist_pending)

    @property
    def has_pending(self) -> bool:
        return self._pending is not _NOTHING

    def __call__(self, value: Any) -> None:
        # Lists arrive by reference from some callers
        self._pending = copy.copy(value)
        self._timer.trigger()

    def flush(self) -> bool:
        """Persist the pending draft now. Returns False if nothing was pending."""
        if not self.has_pending:
            return False
        self._timer.force()
        return True

    def discard(self) -> None:
        """Drop the pending draft, e.g. after the field was saved or cancelled."""
        self._timer.cancel()
        self._pending = _NOTHING

    def _persist_pending(self) -> None:
        if not self.has_pending:
            return
        value, self._pending = self._pending, _NOTHING
        logger.debug("Autosaving draft")
        self._persist(value)
