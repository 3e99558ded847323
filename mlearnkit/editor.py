"""A collection editor: author, collection name and an ordered list of items."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Mapping, Optional, TypeVar

from mlearnkit.bundle import BundleHeader, parse_bundle, render_bundle
from mlearnkit.itemlist import ItemList
from mlearnkit.status import FieldStatus, Status, check_required, fits_length

T = TypeVar("T")

AUTHOR_LIMIT = 50
NAME_LIMIT = 100


class CollectionEditor(Generic[T]):
    """Holds what a template's editor edits and turns it into bundle data.

    Items are stored in order with one selected row. Subclasses describe how
    one item maps to the fields of a bundle ``item`` element by overriding
    ``_item_fields`` and ``_item_from_fields``; by default items are mappings.
    """

    item_noun = "item"
    name_missing_message = "No collection title is specified."
    name_ok_message = "Collection title is specified."

    def __init__(self, type_identifier: str) -> None:
        self.type_identifier = type_identifier
        self._author = ""
        self._name = ""
        self._items: ItemList[T] = ItemList()
        self.listeners: list[Callable[[], None]] = []

    # Change notification.

    def _notify(self) -> None:
        for listener in list(self.listeners):
            listener()

    # Field states.

    def author_status(self) -> FieldStatus:
        return check_required(
            self._author, "Author is specified.", "No author is specified."
        )

    def name_status(self) -> FieldStatus:
        return check_required(
            self._name, self.name_ok_message, self.name_missing_message
        )

    def count_status(self) -> FieldStatus:
        noun = self.item_noun
        if len(self._items) > 0:
            return FieldStatus(
                Status.OK, f"Collection contains at least one {noun}."
            )
        return FieldStatus(
            Status.ERROR, f"Collection does not contain any {noun}s."
        )

    @property
    def editors_enabled(self) -> bool:
        """Whether the per-item fields can be edited."""
        return len(self._items) > 0

    @property
    def can_move_selected_up(self) -> bool:
        return self._items.can_move_up()

    @property
    def can_move_selected_down(self) -> bool:
        return self._items.can_move_down()

    @property
    def selected_index(self) -> int:
        """Row of the selected item, or ``-1``."""
        return self._items.current_index

    def can_generate_applications(self) -> bool:
        """True when the collection has a name, an author and at least one item."""
        return (
            bool(self._name.split())
            and bool(self._author.split())
            and len(self._items) > 0
        )

    # Items.

    def active_items(self) -> list[T]:
        return list(self._items)

    def add_item(self, item: T) -> int:
        """Insert ``item`` after the selected one, select it and return its row."""
        row = self._items.insert_after_current(item)
        self._notify()
        return row

    def remove_selected(self) -> Optional[T]:
        """Remove the selected item; return it, or None when nothing is selected."""
        removed = self._items.remove_current()
        self._notify()
        return removed

    def move_up(self) -> None:
        self._items.move_up()
        self._notify()

    def move_down(self) -> None:
        self._items.move_down()
        self._notify()

    def select(self, index: int) -> Optional[T]:
        """Select row ``index`` (``-1`` clears) and return the selected item."""
        self._items.select(index)
        return self._items.current()

    def _selected(self) -> Optional[T]:
        return self._items.current()

    def _replace_selected(self, item: T) -> None:
        self._items.replace_current(item)
        self._notify()

    # Author and name.

    def set_author(self, author: str) -> None:
        if not fits_length(author, AUTHOR_LIMIT):
            raise ValueError(f"author must have at most {AUTHOR_LIMIT} characters")
        self._author = author
        self._notify()

    def set_name(self, name: str) -> None:
        if not fits_length(name, NAME_LIMIT):
            raise ValueError(f"name must have at most {NAME_LIMIT} characters")
        self._name = name
        self._notify()

    def project_name(self) -> str:
        return self._name

    def author_name(self) -> str:
        return self._author

    # Bundle data.

    def _item_fields(self, item: T) -> Mapping[str, str]:
        return dict(item)  # type: ignore[call-overload]

    def _item_from_fields(self, fields: Mapping[str, str], index: int) -> Optional[T]:
        if not fields:
            return None
        return dict(fields)  # type: ignore[return-value]

    def _bundle_items(self) -> Iterable[Mapping[str, str]]:
        return [self._item_fields(item) for item in self._items]

    def generate_bundle_data(self) -> str:
        """Render the collection as a bundle document."""
        header = BundleHeader(
            type_identifier=self.type_identifier,
            author_name=self._author,
            title=self._name,
            version="1",
        )
        return render_bundle(header, self._bundle_items())

    def load_bundle_data(self, bundle_data: str) -> None:
        """Add the items of a bundle document and take over its author and title.

        Items that do not carry the required fields are skipped. A malformed
        document raises ``BundleError``.
        """
        bundle = parse_bundle(bundle_data)
        for index, fields in enumerate(bundle.items):
            item = self._item_from_fields(fields, index)
            if item is not None:
                self.add_item(item)
        self.set_author(bundle.header.author_name)
        self.set_name(bundle.header.title)