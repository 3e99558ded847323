"""The parts every template has: an entry point, a core and a simulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from mlearnkit.editor import CollectionEditor


class TemplateSimulator:
    """Plays a collection the way the mobile application would.

    Page 0 is the idle page; page 1 is the start page of a simulation.
    """

    def __init__(self, editor: CollectionEditor) -> None:
        self.editor = editor
        self.page = 0
        self.can_go_back = False
        self.can_go_back_listeners: list[Callable[[bool], None]] = []
        self.stop_listeners: list[Callable[[], None]] = []

    def _set_can_go_back(self, value: bool) -> None:
        self.can_go_back = value
        for listener in list(self.can_go_back_listeners):
            listener(value)

    def _request_stop(self) -> None:
        for listener in list(self.stop_listeners):
            listener()

    def start_simulation(self) -> bool:
        """Show the start page; False when the collection is not complete."""
        if not self.editor.can_generate_applications():
            return False
        self.page = 1
        return True

    def stop_simulation(self) -> bool:
        self.page = 0
        self._set_can_go_back(False)
        return True

    def go_back(self) -> bool:
        """Step back one page; False when there is nowhere to go."""
        return False


@dataclass
class TemplateCore:
    """One open collection: its editor and simulator, made by an entry point."""

    entry_point: "TemplateEntryPoint"
    editor: CollectionEditor
    simulator: TemplateSimulator


@dataclass(eq=False)
class TemplateEntryPoint:
    """Describes a template and creates cores for it."""

    name: str
    human_name: str
    description: str
    base_folder: str
    type_identifier: str
    mobile_application_apk_file: str
    thumbnail_image: str = field(default="thumbnail.png")

    def _create_editor(self) -> CollectionEditor:
        return CollectionEditor(self.type_identifier)

    def _create_simulator(self, editor: CollectionEditor) -> TemplateSimulator:
        return TemplateSimulator(editor)

    def create_new_core(self) -> TemplateCore:
        editor = self._create_editor()
        return TemplateCore(self, editor, self._create_simulator(editor))

    def load_core_from_bundle_data(self, raw_data: str) -> TemplateCore:
        """Create a core whose editor holds the content of ``raw_data``.

        Raises ``BundleError`` when the data cannot be read.
        """
        core = self.create_new_core()
        core.editor.load_bundle_data(raw_data)
        return core