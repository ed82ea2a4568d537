"""
Edit/commit/cancel state machine for inline-editable fields.

Qt-free controllers that hold the committed value supplied by the owner and
the draft copy used while editing. Widgets render from a controller and
forward user input to it; the owner hears about commits through callbacks.

Lifecycle:
    VIEWING --activate()--> EDITING --confirm()--> VIEWING
                               |    --cancel()---> VIEWING
                               |
                               +--confirm() with deferred_save--> SAVING
                                     SAVING --save_succeeded()--> VIEWING
                                     SAVING --save_failed(e)----> EDITING
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from .exceptions import SaveFailedError
from .navigation import Append, NavigationAction, next_navigation

logger = logging.getLogger(__name__)


class EditMode(Enum):
    """Which surface a field presents."""
    VIEWING = "viewing"
    EDITING = "editing"
    SAVING = "saving"  # Only reachable with deferred_save=True


class SavePolicy(Enum):
    """When confirm() hands the cleaned draft to the owner."""
    ON_CHANGE = "on_change"  # Only if the cleaned draft differs from the committed value
    ALWAYS = "always"


class EditController:
    """
    Shared lifecycle for scalar and list controllers.

    Subclasses define how a committed value is copied into a draft
    (``_normalize``) and how a draft is cleaned before saving (``_clean``).

    Args:
        value: Initial committed value
        on_save: Called with the cleaned value when a confirm produces a save
        on_change: Called with the draft after every draft mutation
        on_focus: Called when editing begins
        on_mode_changed: Called with the new EditMode after each transition
        disabled: When True, activate() never leaves VIEWING
        save_policy: Whether unchanged values are saved
        deferred_save: Wait in SAVING for save_succeeded()/save_failed()
            instead of returning to VIEWING immediately
    """

    default_save_policy = SavePolicy.ON_CHANGE

    def __init__(
        self,
        value: Any,
        on_save: Callable[[Any], None],
        on_change: Optional[Callable[[Any], None]] = None,
        on_focus: Optional[Callable[[], None]] = None,
        on_mode_changed: Optional[Callable[[EditMode], None]] = None,
        disabled: bool = False,
        save_policy: Optional[SavePolicy] = None,
        deferred_save: bool = False,
    ):
        self._on_save = on_save
        self._on_change = on_change
        self._on_focus = on_focus
        self._on_mode_changed = on_mode_changed
        self.disabled = disabled
        self.save_policy = save_policy or self.default_save_policy
        self.deferred_save = deferred_save

        self._committed = self._normalize(value)
        self._draft = self._normalize(value)
        self._mode = EditMode.VIEWING
        self._pending_value: Any = None
        self.last_error: Optional[SaveFailedError] = None

    # ========== SUBCLASS HOOKS ==========

    def _normalize(self, value: Any) -> Any:
        raise NotImplementedError

    def _clean(self, draft: Any) -> Any:
        raise NotImplementedError

    # ========== STATE ==========

    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def is_editing(self) -> bool:
        return self._mode is EditMode.EDITING

    @property
    def is_saving(self) -> bool:
        return self._mode is EditMode.SAVING

    @property
    def committed_value(self) -> Any:
        return self._normalize(self._committed)

    @property
    def pending_value(self) -> Any:
        """Value handed to the owner while SAVING, else None."""
        return self._pending_value

    def _set_mode(self, mode: EditMode) -> None:
        if mode is self._mode:
            return
        previous = self._mode
        self._mode = mode
        logger.debug(f"{type(self).__name__}: {previous.value} -> {mode.value}")
        if self._on_mode_changed is not None:
            self._on_mode_changed(mode)

    def _notify_change(self) -> None:
        if self._on_change is not None:
            self._on_change(self._normalize(self._draft))

    # ========== TRANSITIONS ==========

    def activate(self) -> bool:
        """Enter EDITING with a fresh draft. Returns False if not allowed."""
        if self.disabled:
            logger.debug(f"{type(self).__name__}: activate ignored, field disabled")
            return False
        if self._mode is not EditMode.VIEWING:
            return False

        self._draft = self._normalize(self._committed)
        self.last_error = None
        self._set_mode(EditMode.EDITING)
        if self._on_focus is not None:
            self._on_focus()
        return True

    def confirm(self) -> bool:
        """
        Clean the draft, hand it to the owner if the save policy says so, leave EDITING.

        Returns:
            True if the controller left EDITING, False if it was not editing
        """
        if self._mode is not EditMode.EDITING:
            return False

        cleaned = self._clean(self._draft)
        should_save = self.save_policy is SavePolicy.ALWAYS or cleaned != self._committed

        if not should_save:
            logger.debug(f"{type(self).__name__}: value unchanged, skipping save")
            self._leave_editing()
            return True

        if self.deferred_save:
            self._pending_value = cleaned
            self._set_mode(EditMode.SAVING)
            try:
                self._on_save(self._normalize(cleaned))
            except Exception as e:
                logger.exception(f"{type(self).__name__}: save callback raised")
                self.save_failed(e)
            return True

        # Optimistic: the owner persists and reflects the result via sync_committed()
        self._leave_editing()
        self._on_save(self._normalize(cleaned))
        return True

    def cancel(self) -> bool:
        """Discard the draft and return to VIEWING. No-op outside EDITING."""
        if self._mode is not EditMode.EDITING:
            return False
        self._leave_editing()
        return True

    def _leave_editing(self) -> None:
        self._draft = self._normalize(self._committed)
        self._set_mode(EditMode.VIEWING)

    def save_succeeded(self) -> bool:
        """Owner finished persisting the pending value."""
        if self._mode is not EditMode.SAVING:
            return False
        self._committed = self._pending_value
        self._pending_value = None
        self.last_error = None
        logger.info(f"{type(self).__name__}: save completed")
        self._leave_editing()
        return True

    def save_failed(self, error: BaseException) -> bool:
        """Owner could not persist the pending value; reopen the draft with the error attached."""
        if self._mode is not EditMode.SAVING:
            return False
        self.last_error = SaveFailedError(self._pending_value, error)
        self._pending_value = None
        logger.error(f"{type(self).__name__}: {self.last_error}")
        self._set_mode(EditMode.EDITING)
        return True

    # ========== OWNER INPUT ==========

    def sync_committed(self, value: Any) -> bool:
        """
        Record a new committed value from the owner.

        The draft mirror follows only while VIEWING so an in-progress edit is
        never overwritten.

        Returns:
            True if the draft was resynchronized
        """
        self._committed = self._normalize(value)
        if self._mode is EditMode.VIEWING:
            self._draft = self._normalize(self._committed)
            return True
        logger.debug(f"{type(self).__name__}: committed value changed during {self._mode.value}, draft kept")
        return False


class ScalarEditController(EditController):
    """Controller for one text value. Confirm trims surrounding whitespace."""

    def __init__(self, value: Optional[str] = "", on_save: Callable[[str], None] = None,
                 multiline: bool = False, **kwargs):
        if on_save is None:
            raise TypeError("ScalarEditController requires an on_save callback")
        self.multiline = multiline
        super().__init__(value, on_save, **kwargs)

    def _normalize(self, value: Any) -> str:
        return "" if value is None else str(value)

    def _clean(self, draft: str) -> str:
        return draft.strip()

    @property
    def draft(self) -> str:
        return self._draft

    def mutate_draft(self, text: str) -> bool:
        if self._mode is not EditMode.EDITING:
            return False
        self._draft = self._normalize(text)
        self._notify_change()
        return True

    def is_placeholder_shown(self) -> bool:
        return self._committed == ""

    def display_text(self, placeholder: str) -> str:
        """Text for the view surface: the committed value or the placeholder when empty."""
        return self._committed or placeholder


class ListEditController(EditController):
    """
    Controller for an ordered list of text items addressed by position.

    The draft may hold empty placeholders while editing; confirm drops every
    empty or whitespace-only entry and keeps the order of the rest.
    """

    default_save_policy = SavePolicy.ALWAYS

    def __init__(self, items: Optional[Sequence[str]] = None,
                 on_save: Callable[[List[str]], None] = None, **kwargs):
        if on_save is None:
            raise TypeError("ListEditController requires an on_save callback")
        super().__init__(items, on_save, **kwargs)

    def _normalize(self, value: Any) -> List[str]:
        return list(value or [])

    def _clean(self, draft: List[str]) -> List[str]:
        return [item for item in draft if item.strip() != ""]

    @property
    def draft_items(self) -> List[str]:
        return list(self._draft)

    def __len__(self) -> int:
        return len(self._draft)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._draft):
            raise IndexError(f"Item index {index} out of range for {len(self._draft)} items")

    def add_item(self) -> bool:
        if self._mode is not EditMode.EDITING:
            return False
        self._draft.append("")
        self._notify_change()
        return True

    def remove_item(self, index: int) -> bool:
        if self._mode is not EditMode.EDITING:
            return False
        self._check_index(index)
        del self._draft[index]
        self._notify_change()
        return True

    def mutate_item(self, index: int, text: str) -> bool:
        if self._mode is not EditMode.EDITING:
            return False
        self._check_index(index)
        self._draft[index] = text
        self._notify_change()
        return True

    def navigate(self, index: int) -> Optional[NavigationAction]:
        """
        Handle Enter on item ``index``.

        Appends an empty item when on the last one. The caller moves focus.

        Returns:
            The NavigationAction taken, or None outside EDITING
        """
        if self._mode is not EditMode.EDITING:
            return None
        action = next_navigation(index, len(self._draft))
        if isinstance(action, Append):
            self.add_item()
        return action

    def is_placeholder_shown(self) -> bool:
        return not self._committed
