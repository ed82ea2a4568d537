"""Tests for widget protocols and configuration."""

import pytest


def test_widgets_implement_protocols(qapp):
    from pyqt_inline_edit.protocols import PlaceholderCapable, ValueGettable, ValueSettable
    from pyqt_inline_edit.widgets import InlineEdit, InlineEditList

    for widget in (InlineEdit(value="x", on_save=lambda v: None),
                   InlineEditList(items=["x"], on_save=lambda v: None)):
        assert isinstance(widget, ValueGettable)
        assert isinstance(widget, ValueSettable)
        assert isinstance(widget, PlaceholderCapable)


def test_value_roundtrip(qapp):
    from pyqt_inline_edit.widgets import InlineEdit

    widget = InlineEdit(on_save=lambda v: None)
    widget.set_value("test")
    assert widget.get_value() == "test"
    widget.set_value(None)
    assert widget.get_value() == ""


def test_default_config():
    from pyqt_inline_edit.protocols import get_edit_config

    config = get_edit_config()
    assert config.placeholder == "Click to edit..."
    assert config.sidebar_breakpoint == 1024


def test_set_config_and_reset(reset_edit_config):
    from pyqt_inline_edit.protocols import InlineEditConfig, get_edit_config, set_edit_config

    custom = InlineEditConfig(placeholder="Add a note")
    set_edit_config(custom)
    assert get_edit_config() is custom
    set_edit_config(None)
    assert get_edit_config().placeholder == "Click to edit..."
