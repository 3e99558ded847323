"""An ordered collection with a current selection, as edited in the template editors."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class ItemList(Generic[T]):
    """A list of items with one optionally selected row.

    The selected row is ``-1`` when nothing is selected.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        self._current = 0 if self._items else -1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, index):
        return self._items[index]

    @property
    def current_index(self) -> int:
        """Index of the selected row, or ``-1``."""
        return self._current

    def current(self) -> Optional[T]:
        """Return the selected item, or None when nothing is selected."""
        if self._current < 0:
            return None
        return self._items[self._current]

    def select(self, index: int) -> None:
        """Select row ``index``; ``-1`` clears the selection."""
        if index == -1 or 0 <= index < len(self._items):
            self._current = index
            return
        raise IndexError(f"row {index} is out of range")

    def insert_after_current(self, item: T) -> int:
        """Insert ``item`` after the selected row, select it and return its row."""
        position = self._current + 1
        self._items.insert(position, item)
        self._current = position
        return position

    def remove_current(self) -> Optional[T]:
        """Remove the selected item and return it; None when nothing is selected.

        The selection moves to the item that took the removed one's place,
        or to the new last item.
        """
        if self._current < 0:
            return None
        removed = self._items.pop(self._current)
        self._current = min(self._current, len(self._items) - 1)
        return removed

    def replace_current(self, item: T) -> None:
        """Replace the selected item with ``item``."""
        if self._current < 0:
            raise LookupError("no item is selected")
        self._items[self._current] = item

    def can_move_up(self) -> bool:
        return len(self._items) > 1 and self._current > 0

    def can_move_down(self) -> bool:
        return len(self._items) > 1 and 0 <= self._current < len(self._items) - 1

    def move_up(self) -> None:
        """Swap the selected item with the one above it and keep it selected."""
        if not self.can_move_up():
            raise IndexError("the selected item cannot move up")
        self._swap(self._current, self._current - 1)

    def move_down(self) -> None:
        """Swap the selected item with the one below it and keep it selected."""
        if not self.can_move_down():
            raise IndexError("the selected item cannot move down")
        self._swap(self._current, self._current + 1)

    def _swap(self, index: int, target: int) -> None:
        items = self._items
        items[index], items[target] = items[target], items[index]
        self._current = target