"""
Keyboard focus chaining for list editors.

Enter on a list item either moves focus to the next item or grows the list.
The decision is a pure function of position; the registry maps positions to
whatever focusable handles the rendering layer uses.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Union


@dataclass(frozen=True)
class MoveTo:
    """Move focus to the item at ``index``."""
    index: int


@dataclass(frozen=True)
class Append:
    """Append an empty item after the last one."""


NavigationAction = Union[MoveTo, Append]


def next_navigation(current_index: int, item_count: int) -> NavigationAction:
    """
    Resolve Enter pressed on ``current_index`` of a list with ``item_count`` items.

    Args:
        current_index: Position of the item that had focus
        item_count: Number of items currently in the draft

    Returns:
        Append when on the last item, otherwise MoveTo the following index

    Raises:
        IndexError: If current_index does not address an existing item
    """
    if not 0 <= current_index < item_count:
        raise IndexError(f"Item index {current_index} out of range for {item_count} items")
    if current_index == item_count - 1:
        return Append()
    return MoveTo(current_index + 1)


class FocusRegistry:
    """
    Ordered registry of focusable handles addressed by position.

    Usage:
        registry = FocusRegistry(focus_fn=lambda edit: edit.setFocus())
        for item in items:
            registry.register(make_line_edit(item))
        registry.focus(0)
    """

    def __init__(self, focus_fn: Callable[[Any], None]):
        self._focus_fn = focus_fn
        self._handles: List[Any] = []

    def register(self, handle: Any) -> int:
        """Register handle at the next position and return that position."""
        self._handles.append(handle)
        return len(self._handles) - 1

    def clear(self) -> None:
        self._handles.clear()

    def get(self, index: int) -> Optional[Any]:
        if 0 <= index < len(self._handles):
            return self._handles[index]
        return None

    def index_of(self, handle: Any) -> int:
        """Position of handle, or -1 if it is not registered."""
        for index, registered in enumerate(self._handles):
            if registered is handle:
                return index
        return -1

    def focus(self, index: int) -> bool:
        """Focus the handle at index. Returns False when nothing is registered there."""
        handle = self.get(index)
        if handle is None:
            return False
        self._focus_fn(handle)
        return True

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._handles)
