"""
pyqt-inline-edit: inline-editable fields for PyQt6 case management screens.

Architecture:
- Core: Qt-free edit controllers (view/edit/save lifecycle), keyboard
  navigation, sidebar responsive state, small PyQt6 utilities
- Protocols: Widget ABCs and the shared configuration hook
- Services: Signal blocking and debounced draft autosave
- Widgets: InlineEdit and InlineEditList

Key Features:
- Draft/committed separation with whitespace trimming and empty-item filtering
- Owner-driven committed values that never clobber an edit in progress
- Optional background saves with explicit SAVING state and error reopen
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
