"""Tests for the edit controllers."""

import pytest

from pyqt_inline_edit.core import (
    Append, EditMode, ListEditController, MoveTo, SaveFailedError, SavePolicy, ScalarEditController
)


class Recorder:
    """Collects callback invocations."""

    def __init__(self):
        self.saves = []
        self.changes = []
        self.focuses = 0
        self.modes = []

    def on_save(self, value):
        self.saves.append(value)

    def on_change(self, value):
        self.changes.append(value)

    def on_focus(self):
        self.focuses += 1

    def on_mode_changed(self, mode):
        self.modes.append(mode)


def make_scalar(value="Hello", **kwargs):
    rec = Recorder()
    controller = ScalarEditController(
        value,
        on_save=rec.on_save,
        on_change=rec.on_change,
        on_focus=rec.on_focus,
        on_mode_changed=rec.on_mode_changed,
        **kwargs,
    )
    return controller, rec


def make_list(items=("a", "b"), **kwargs):
    rec = Recorder()
    controller = ListEditController(
        list(items),
        on_save=rec.on_save,
        on_change=rec.on_change,
        on_focus=rec.on_focus,
        on_mode_changed=rec.on_mode_changed,
        **kwargs,
    )
    return controller, rec


# ========== SCALAR ==========

def test_scalar_activate_copies_committed_and_notifies_focus():
    controller, rec = make_scalar("Hello")
    assert controller.mode is EditMode.VIEWING

    assert controller.activate() is True
    assert controller.mode is EditMode.EDITING
    assert controller.draft == "Hello"
    assert rec.focuses == 1
    assert rec.modes == [EditMode.EDITING]


def test_scalar_activate_twice_is_ignored():
    controller, rec = make_scalar()
    controller.activate()
    assert controller.activate() is False
    assert rec.focuses == 1


def test_scalar_mutate_reports_live_changes():
    controller, rec = make_scalar()
    controller.activate()
    controller.mutate_draft("Hel")
    controller.mutate_draft("Help")
    assert rec.changes == ["Hel", "Help"]
    assert rec.saves == []


def test_scalar_mutate_outside_editing_is_ignored():
    controller, rec = make_scalar()
    assert controller.mutate_draft("x") is False
    assert rec.changes == []


@pytest.mark.parametrize("typed, expected", [
    ("Hello world", ["Hello world"]),
    ("  Goodbye  ", ["Goodbye"]),
    ("  Hello  ", []),
    ("Hello", []),
    ("", [""]),
])
def test_scalar_confirm_saves_trimmed_value_only_when_changed(typed, expected):
    controller, rec = make_scalar("Hello")
    controller.activate()
    controller.mutate_draft(typed)
    assert controller.confirm() is True
    assert rec.saves == expected
    assert controller.mode is EditMode.VIEWING


def test_scalar_cancel_discards_draft_without_saving():
    controller, rec = make_scalar("Hello")
    controller.activate()
    controller.mutate_draft("Something else")
    assert controller.cancel() is True
    assert rec.saves == []
    assert controller.mode is EditMode.VIEWING
    assert controller.committed_value == "Hello"
    assert controller.draft == "Hello"


def test_cancel_while_viewing_is_a_noop():
    controller, rec = make_scalar()
    assert controller.cancel() is False
    assert rec.modes == []
    assert rec.saves == []


def test_confirm_while_viewing_is_a_noop():
    controller, rec = make_scalar()
    assert controller.confirm() is False
    assert rec.saves == []


def test_disabled_field_never_enters_editing():
    controller, rec = make_scalar("", disabled=True)
    assert controller.activate() is False
    assert controller.mode is EditMode.VIEWING
    assert rec.focuses == 0
    assert controller.is_placeholder_shown()
    assert controller.display_text("Click to edit...") == "Click to edit..."


def test_scalar_display_text_prefers_committed_value():
    controller, _ = make_scalar("Notes")
    assert not controller.is_placeholder_shown()
    assert controller.display_text("Click to edit...") == "Notes"


def test_scalar_none_is_treated_as_empty():
    controller, _ = make_scalar(None)
    assert controller.committed_value == ""
    assert controller.is_placeholder_shown()


def test_scalar_requires_save_callback():
    with pytest.raises(TypeError):
        ScalarEditController("x")


def test_scalar_always_policy_saves_unchanged_value():
    controller, rec = make_scalar("Hello", save_policy=SavePolicy.ALWAYS)
    controller.activate()
    controller.confirm()
    assert rec.saves == ["Hello"]


def test_owner_sync_during_save_callback_is_kept():
    rec = Recorder()
    holder = {}

    def on_save(value):
        rec.on_save(value)
        holder["controller"].sync_committed(value)

    controller = ScalarEditController("old", on_save=on_save)
    holder["controller"] = controller
    controller.activate()
    controller.mutate_draft("new")
    controller.confirm()

    assert controller.committed_value == "new"
    controller.activate()
    assert controller.draft == "new"


# ========== RESYNC ==========

def test_resync_while_viewing_updates_next_draft():
    controller, _ = make_scalar("first")
    controller.activate()
    controller.mutate_draft("stale")
    controller.cancel()

    assert controller.sync_committed("second") is True
    controller.activate()
    assert controller.draft == "second"


def test_resync_while_editing_keeps_draft():
    controller, _ = make_scalar("first")
    controller.activate()
    controller.mutate_draft("in progress")

    assert controller.sync_committed("remote update") is False
    assert controller.draft == "in progress"
    assert controller.committed_value == "remote update"


def test_cancel_after_remote_update_resets_to_new_committed_value():
    controller, _ = make_scalar("first")
    controller.activate()
    controller.mutate_draft("in progress")
    controller.sync_committed("remote update")
    controller.cancel()

    controller.activate()
    assert controller.draft == "remote update"


# ========== LIST ==========

def test_list_activate_copies_items():
    controller, rec = make_list(["a", "b"])
    controller.activate()
    assert controller.draft_items == ["a", "b"]
    assert rec.focuses == 1


def test_list_draft_is_independent_of_committed_value():
    source = ["a", "b"]
    controller, _ = make_list(source)
    controller.activate()
    controller.mutate_item(0, "changed")
    assert controller.committed_value == ["a", "b"]
    assert source == ["a", "b"]


def test_list_add_then_empty_item_is_dropped():
    controller, rec = make_list(["a", "b"])
    controller.activate()
    controller.add_item()
    controller.mutate_item(2, "")
    controller.confirm()
    assert rec.saves == [["a", "b"]]
    assert controller.mode is EditMode.VIEWING


def test_list_confirm_filters_blank_entries_preserving_order():
    controller, rec = make_list(["x", "", "  ", "y", "\t", "z"])
    controller.activate()
    controller.confirm()
    assert rec.saves == [["x", "y", "z"]]


def test_list_confirm_saves_unchanged_items_by_default():
    controller, rec = make_list(["a"])
    controller.activate()
    controller.confirm()
    assert rec.saves == [["a"]]


def test_list_on_change_policy_skips_unchanged_items():
    controller, rec = make_list(["a"], save_policy=SavePolicy.ON_CHANGE)
    controller.activate()
    controller.add_item()
    controller.confirm()
    assert rec.saves == []


def test_list_remove_item_shifts_following_items():
    controller, rec = make_list(["a", "b", "c"])
    controller.activate()
    controller.remove_item(1)
    assert controller.draft_items == ["a", "c"]
    controller.confirm()
    assert rec.saves == [["a", "c"]]


def test_list_mutations_report_copies():
    controller, rec = make_list(["a"])
    controller.activate()
    controller.add_item()
    controller.mutate_item(1, "b")
    controller.remove_item(0)
    assert rec.changes == [["a", ""], ["a", "b"], ["b"]]
    rec.changes[-1].append("tampered")
    assert controller.draft_items == ["b"]


def test_list_index_errors():
    controller, _ = make_list(["a"])
    controller.activate()
    with pytest.raises(IndexError):
        controller.remove_item(1)
    with pytest.raises(IndexError):
        controller.mutate_item(-1, "x")


def test_list_operations_outside_editing_are_ignored():
    controller, rec = make_list(["a"])
    assert controller.add_item() is False
    assert controller.remove_item(0) is False
    assert controller.mutate_item(0, "x") is False
    assert controller.navigate(0) is None
    assert rec.changes == []


def test_list_cancel_restores_committed_items():
    controller, rec = make_list(["a", "b"])
    controller.activate()
    controller.add_item()
    controller.mutate_item(0, "changed")
    controller.cancel()
    assert rec.saves == []
    controller.activate()
    assert controller.draft_items == ["a", "b"]


def test_list_navigate_moves_then_appends():
    controller, rec = make_list(["a", "b"])
    controller.activate()
    assert controller.navigate(0) == MoveTo(1)
    assert controller.draft_items == ["a", "b"]

    assert controller.navigate(1) == Append()
    assert controller.draft_items == ["a", "b", ""]
    assert rec.changes == [["a", "b", ""]]


def test_list_placeholder_shown_for_empty_list():
    controller, _ = make_list([])
    assert controller.is_placeholder_shown()
    assert len(controller) == 0


def test_list_resync_while_editing_keeps_draft():
    controller, _ = make_list(["a"])
    controller.activate()
    controller.add_item()
    controller.sync_committed(["remote"])
    assert controller.draft_items == ["a", ""]
    controller.cancel()
    controller.activate()
    assert controller.draft_items == ["remote"]


# ========== DEFERRED SAVE ==========

def test_deferred_save_waits_in_saving_state():
    controller, rec = make_scalar("old", deferred_save=True)
    controller.activate()
    controller.mutate_draft("new ")
    controller.confirm()

    assert controller.mode is EditMode.SAVING
    assert controller.pending_value == "new"
    assert rec.saves == ["new"]

    # User input is inert while saving
    assert controller.mutate_draft("other") is False
    assert controller.cancel() is False
    assert controller.activate() is False

    assert controller.save_succeeded() is True
    assert controller.mode is EditMode.VIEWING
    assert controller.committed_value == "new"
    assert controller.pending_value is None


def test_deferred_save_failure_reopens_editor_with_error():
    controller, _ = make_scalar("old", deferred_save=True)
    controller.activate()
    controller.mutate_draft("new")
    controller.confirm()

    cause = ConnectionError("backend unavailable")
    assert controller.save_failed(cause) is True
    assert controller.mode is EditMode.EDITING
    assert controller.draft == "new"
    assert controller.committed_value == "old"
    assert isinstance(controller.last_error, SaveFailedError)
    assert controller.last_error.value == "new"
    assert controller.last_error.__cause__ is cause
    assert "backend unavailable" in str(controller.last_error)


def test_deferred_save_error_clears_on_next_activation():
    controller, _ = make_scalar("old", deferred_save=True)
    controller.activate()
    controller.mutate_draft("new")
    controller.confirm()
    controller.save_failed(RuntimeError("boom"))
    controller.cancel()

    controller.activate()
    assert controller.last_error is None


def test_deferred_save_raising_callback_reopens_editor():
    def failing_save(_value):
        raise ValueError("rejected")

    controller = ScalarEditController("old", on_save=failing_save, deferred_save=True)
    controller.activate()
    controller.mutate_draft("new")
    controller.confirm()
    assert controller.mode is EditMode.EDITING
    assert isinstance(controller.last_error.__cause__, ValueError)


def test_deferred_unchanged_value_returns_to_viewing():
    controller, rec = make_scalar("same", deferred_save=True)
    controller.activate()
    controller.confirm()
    assert controller.mode is EditMode.VIEWING
    assert rec.saves == []


def test_save_outcome_outside_saving_is_ignored():
    controller, _ = make_scalar()
    assert controller.save_succeeded() is False
    assert controller.save_failed(RuntimeError("late")) is False
    assert controller.last_error is None


def test_list_deferred_save_commits_filtered_items():
    controller, rec = make_list(["a"], deferred_save=True)
    controller.activate()
    controller.add_item()
    controller.mutate_item(1, "b")
    controller.add_item()
    controller.confirm()
    assert controller.mode is EditMode.SAVING
    controller.save_succeeded()
    assert controller.committed_value == ["a", "b"]
    assert rec.saves == [["a", "b"]]
