"""
Service layer for inline edit widgets.

Signal management used by the widgets and owner-side helpers such as
debounced draft autosave.
"""

from .signal_service import SignalService
from .draft_autosave import DraftAutosaver

__all__ = [
    "SignalService",
    "DraftAutosaver",
]
