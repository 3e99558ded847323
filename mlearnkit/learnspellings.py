"""The learn spellings template: words to spell, each with its meaning."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional

from mlearnkit.editor import CollectionEditor
from mlearnkit.status import FieldStatus, check_not_blank
from mlearnkit.template import TemplateCore, TemplateEntryPoint, TemplateSimulator

SAMPLE_WORD = "cat"
SAMPLE_MEANING = "Cats are animals which are hated by dogs."


@dataclass
class LearnSpellingsItem:
    """One word of the collection, its meaning and, once fetched, its sound file."""

    word: str = ""
    meaning: str = ""
    audio_file_path: str = ""


class LearnSpellingsEditor(CollectionEditor[LearnSpellingsItem]):
    """Editor of a collection of words to spell."""

    item_noun = "word"

    def __init__(self) -> None:
        super().__init__(LearnSpellingsEntryPoint.TYPE_IDENTIFIER)

    # Items.

    def add_word(self, word: str, meaning: str) -> int:
        """Insert a word after the selected one, select it and return its row."""
        return self.add_item(LearnSpellingsItem(word, meaning))

    def add_sample_word(self) -> int:
        """Insert the sample word."""
        return self.add_word(SAMPLE_WORD, SAMPLE_MEANING)

    def save_word(self, word: str, meaning: str) -> None:
        """Replace the selected word; raises LookupError when nothing is selected."""
        self._replace_selected(LearnSpellingsItem(word, meaning))

    # Field states of the selected word.

    def _shown(self) -> LearnSpellingsItem:
        selected = self._selected()
        return selected if selected is not None else LearnSpellingsItem()

    def word_status(self) -> FieldStatus:
        return check_not_blank(
            self._shown().word, "Word seems to be okay.", "Please, enter some word."
        )

    def meaning_status(self) -> FieldStatus:
        return check_not_blank(
            self._shown().meaning,
            "Meaning seems to be okay.",
            "Please, enter some meaning.",
        )

    # Bundle data.

    def _item_fields(self, item: LearnSpellingsItem) -> Mapping[str, str]:
        return {"word": item.word, "meaning": item.meaning}

    def _item_from_fields(
        self, fields: Mapping[str, str], index: int
    ) -> Optional[LearnSpellingsItem]:
        word = fields.get("word", "")
        if not word:
            return None
        return LearnSpellingsItem(word, fields.get("meaning", ""))


class LearnSpellingsEntryPoint(TemplateEntryPoint):
    """Entry point of the learn spellings template.

    ``audio_fetcher`` turns a word into the bytes of a wave file, ``player``
    plays the wave file at a path, and fetched sounds are stored in
    ``sound_directory``.
    """

    BASE_FOLDER = "learnspellings"
    TYPE_IDENTIFIER = "SpellingTemplate"

    def __init__(
        self,
        audio_fetcher: Callable[[str], bytes],
        player: Callable[[str], None],
        sound_directory,
    ) -> None:
        super().__init__(
            name="learnspellings",
            human_name="Learn Spellings",
            description=(
                "Choose this template to create application for learning "
                "to spell words."
            ),
            base_folder=self.BASE_FOLDER,
            type_identifier=self.TYPE_IDENTIFIER,
            mobile_application_apk_file="LearnSpellingsApp.apk",
            thumbnail_image="thumbnail.png",
        )
        self.audio_fetcher = audio_fetcher
        self.player = player
        self.sound_directory = Path(sound_directory)

    def _create_editor(self) -> LearnSpellingsEditor:
        return LearnSpellingsEditor()

    def _create_simulator(self, editor) -> TemplateSimulator:
        # Imported here: the simulator module builds on this one.
        from mlearnkit.spellingsimulator import LearnSpellingsSimulator

        return LearnSpellingsSimulator(
            editor, self.audio_fetcher, self.player, self.sound_directory
        )

    def create_new_core(self) -> TemplateCore:
        return super().create_new_core()