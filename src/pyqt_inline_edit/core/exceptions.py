"""Inline edit exceptions."""

from typing import Any


class InlineEditError(Exception):
    """Base class for inline edit errors."""


class SaveFailedError(InlineEditError):
    """Raised (or recorded) when the owner could not persist a confirmed value."""

    def __init__(self, value: Any, cause: BaseException):
        super().__init__(f"Could not save: {cause}")
        self.value = value
        self.__cause__ = cause
