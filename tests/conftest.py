"""pytest configuration and fixtures for pyqt-inline-edit tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication
from PyQt6.QtTest import QTest


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def reset_edit_config():
    """Restore default InlineEditConfig after a test changes it."""
    from pyqt_inline_edit.protocols import set_edit_config
    yield
    set_edit_config(None)


@pytest.fixture
def wait_until(qapp):
    """Process events until predicate() is true or the timeout elapses."""
    def _wait(predicate, timeout_ms=2000, step_ms=10):
        waited = 0
        while not predicate() and waited < timeout_ms:
            QTest.qWait(step_ms)
            waited += step_ms
        return predicate()
    return _wait
