"""The basic mLearning template: a list of titled items with descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from mlearnkit.editor import CollectionEditor
from mlearnkit.status import FieldStatus, check_not_blank
from mlearnkit.template import TemplateCore, TemplateEntryPoint, TemplateSimulator

SAMPLE_TITLE = "Prague"
SAMPLE_DESCRIPTION = "Prague is the city which lies in the heart of Europe."

DETAILS_PAGE = 2
LIST_PAGE = 1


@dataclass(frozen=True)
class BasicmLearningItem:
    """One entry of the collection: a title and its description."""

    title: str = ""
    description: str = ""


class BasicmLearningEditor(CollectionEditor[BasicmLearningItem]):
    """Editor of a basic mLearning collection."""

    item_noun = "item"

    def __init__(self) -> None:
        super().__init__(BasicmLearningEntryPoint.TYPE_IDENTIFIER)

    def add_new_item(self, title: str, description: str) -> int:
        """Insert an item after the selected one and return its row."""
        return self.add_item(BasicmLearningItem(title, description))

    def add_sample_item(self) -> int:
        """Insert the sample item."""
        return self.add_new_item(SAMPLE_TITLE, SAMPLE_DESCRIPTION)

    def save_item(self, title: str, description: str) -> None:
        """Replace the selected item; with nothing selected only listeners hear of it."""
        if self._selected() is None:
            self._notify()
            return
        self._replace_selected(BasicmLearningItem(title, description))

    def title_status(self) -> FieldStatus:
        selected = self._selected()
        title = selected.title if selected is not None else ""
        return check_not_blank(
            title, "Title seems to be okay.", "Please, enter some title."
        )

    def _item_fields(self, item: BasicmLearningItem) -> Mapping[str, str]:
        return {"item_title": item.title, "item_description": item.description}

    def _item_from_fields(
        self, fields: Mapping[str, str], index: int
    ) -> Optional[BasicmLearningItem]:
        title = fields.get("item_title", "")
        description = fields.get("item_description", "")
        if not title or not description:
            return None
        return BasicmLearningItem(title, description)


class BasicmLearningSimulator(TemplateSimulator):
    """Shows the list of item titles and, on a click, one item's description.

    Page 1 is the list, page 2 the details of one item.
    """

    def __init__(self, editor: BasicmLearningEditor) -> None:
        super().__init__(editor)
        self.items: list[BasicmLearningItem] = []
        self.selected_row = -1
        self.details = ""

    @property
    def titles(self) -> list[str]:
        return [item.title for item in self.items]

    def start_simulation(self) -> bool:
        if not self.editor.can_generate_applications():
            return False
        self.items = list(self.editor.active_items())
        self.selected_row = -1
        self.page = LIST_PAGE
        return True

    def go_back(self) -> bool:
        if self.page != DETAILS_PAGE:
            return False
        self.page = LIST_PAGE
        self.selected_row = -1
        self._set_can_go_back(False)
        return True

    def display_description(self, index: int) -> str:
        """Show the description of the item in row ``index`` and return it."""
        if not 0 <= index < len(self.items):
            raise IndexError(f"row {index} is out of range")
        self.selected_row = index
        self.details = self.items[index].description
        self.page = DETAILS_PAGE
        self._set_can_go_back(True)
        return self.details


class BasicmLearningEntryPoint(TemplateEntryPoint):
    """Entry point of the basic mLearning template."""

    BASE_FOLDER = "mlearning"
    TYPE_IDENTIFIER = "InfoTemplate"

    def __init__(self) -> None:
        super().__init__(
            name="mlearning",
            human_name="Basic mLearning",
            description=(
                "Choose this template to create applications displaying "
                "clickable lists of textual information."
            ),
            base_folder=self.BASE_FOLDER,
            type_identifier=self.TYPE_IDENTIFIER,
            mobile_application_apk_file="BasicmLearningApp.apk",
            thumbnail_image="thumbnail.png",
        )

    def _create_editor(self) -> BasicmLearningEditor:
        return BasicmLearningEditor()

    def _create_simulator(self, editor) -> BasicmLearningSimulator:
        return BasicmLearningSimulator(editor)

    def create_new_core(self) -> TemplateCore:
        return super().create_new_core()