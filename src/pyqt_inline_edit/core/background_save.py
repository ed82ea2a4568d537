"""Run owner save callables off the UI thread."""

import logging
from typing import Any, Callable, List, Optional
from PyQt6.QtCore import QThread, pyqtSignal

logger = logging.getLogger(__name__)

# --- Module-level constants ---
CANCEL_WAIT_MS = 100      # Wait time when a newer save supersedes a running one
CLEANUP_WAIT_MS = 200     # Wait time during widget close cleanup


class SaveTask(QThread):
    """
    Executes one save in a worker thread.

    Usage:
        task = SaveTask(target=api.update_summary, value="New text")
        task.succeeded.connect(on_success)
        task.failed.connect(on_error)  # Receives Exception, not str
        task.start()
    """

    succeeded = pyqtSignal(object)
    failed = pyqtSignal(Exception)

    def __init__(self, target: Callable[[Any], Any], value: Any, parent=None):
        super().__init__(parent)
        self._target = target
        self._value = value
        self.cancelled = False

    def run(self):
        try:
            result = self._target(self._value)
            if not self.cancelled:
                self.succeeded.emit(result)
        except Exception as e:
            if not self.cancelled:
                self.failed.emit(e)

    def cancel(self):
        """Cancel task; signals won't emit after this."""
        self.cancelled = True


class BackgroundSaveRunner:
    """
    Owns the save task of one widget.

    A new save cancels the previous one; cleanup() is called from closeEvent.
    """

    def __init__(self):
        self._current_task: Optional[SaveTask] = None
        self._retired_tasks: List[SaveTask] = []

    @property
    def is_running(self) -> bool:
        return self._current_task is not None and self._current_task.isRunning()

    def run(
        self,
        target: Callable[[Any], Any],
        value: Any,
        on_success: Callable[[Any], None] = None,
        on_error: Callable[[Exception], None] = None,
    ) -> SaveTask:
        if self.is_running:
            self._retire(self._current_task, CANCEL_WAIT_MS)

        task = SaveTask(target=target, value=value)
        if on_success:
            task.succeeded.connect(on_success)
        if on_error:
            task.failed.connect(on_error)

        self._current_task = task
        logger.debug(f"Starting background save via {getattr(target, '__name__', target)!r}")
        task.start()
        return task

    def cleanup(self) -> bool:
        """Cancel the running save, if any. Returns True if one was cancelled."""
        cancelled = self.is_running
        if cancelled:
            self._retire(self._current_task, CLEANUP_WAIT_MS)
        self._current_task = None
        return cancelled

    def _retire(self, task: SaveTask, wait_ms: int):
        task.cancel()
        if task.wait(wait_ms):
            return
        # Thread object must outlive the still-running target
        self._retired_tasks.append(task)
        task.finished.connect(lambda: self._retired_tasks.remove(task))
        logger.debug(f"Save task still running after {wait_ms}ms, result will be ignored")
