"""Simulator of the learn spellings template: listen to a word, then spell it."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from mlearnkit.learnspellings import LearnSpellingsEditor, LearnSpellingsItem
from mlearnkit.template import TemplateSimulator

CORRECT_CAPTION = "This is correct spelling"
INCORRECT_CAPTION = "This is not the correct spelling"
EMPTY_GUESS_MESSAGE = "You must enter some word"


class SpellingPage(enum.IntEnum):
    """Pages of the simulated phone."""

    IDLE = 0
    START = 1
    LISTENING = 2
    SUMMARY = 3


@dataclass(frozen=True)
class SpellingResult:
    """How many words were spelled correctly, wrongly or skipped."""

    correct: int = 0
    incorrect: int = 0
    skipped: int = 0

    def lines(self) -> list[str]:
        """The texts of the summary page."""
        return [
            f"Correct spelled {self.correct}",
            f"Unanswered {self.skipped}",
            f"Wrong spelled {self.incorrect}",
        ]


class LearnSpellingsSimulator(TemplateSimulator):
    """Plays the words of a collection one after another.

    ``audio_fetcher`` receives the word with spaces replaced by ``+`` and
    returns the bytes of a wave file; ``player`` plays the wave file at a path.
    Fetched sounds are stored in ``sound_directory`` and reused while the
    simulation lasts.
    """

    def __init__(
        self,
        editor: LearnSpellingsEditor,
        audio_fetcher: Callable[[str], bytes],
        player: Callable[[str], None],
        sound_directory,
    ) -> None:
        super().__init__(editor)
        self.audio_fetcher = audio_fetcher
        self.player = player
        self.sound_directory = Path(sound_directory)
        self.words: list[LearnSpellingsItem] = []
        self.active_word = -1
        self._correct = 0
        self._incorrect = 0
        self._skipped = 0
        self.author = ""
        self.heading = ""
        self.start_enabled = False
        self.skip_enabled = False
        self.spell_enabled = False
        self.question_caption = ""
        self.showing_result = False
        self.result_caption = ""
        self.entered_text = ""
        self.correct_word = ""
        self.correct_meaning = ""

    def start_simulation(self) -> bool:
        """Load the words and show the start page; False when incomplete."""
        if not self.editor.can_generate_applications():
            return False
        self.words = [dataclasses.replace(item) for item in self.editor.active_items()]
        if not self.words:
            return False
        self.start_enabled = True
        self.author = self.editor.author_name()
        self.heading = self.editor.project_name()
        self.page = SpellingPage.START
        return True

    def start(self) -> None:
        """Reset the score and show the first word."""
        self.active_word = -1
        self._correct = self._incorrect = self._skipped = 0
        self.load_next_word()

    def restart(self) -> None:
        self.page = SpellingPage.START

    def exit(self) -> None:
        """Stop the simulation and ask whoever listens to close it."""
        self.stop_simulation()
        self._request_stop()

    def _current_word(self) -> LearnSpellingsItem:
        if not 0 <= self.active_word < len(self.words):
            raise IndexError("no word is being played")
        return self.words[self.active_word]

    def play_word(self) -> str:
        """Play the current word, fetching its sound first if needed.

        Returns the path of the sound file. Errors of the fetcher propagate.
        """
        item = self._current_word()
        path = item.audio_file_path
        if not path or not Path(path).exists():
            data = self.audio_fetcher(item.word.replace(" ", "+"))
            stamp = datetime.now().strftime("%Y-%m-%d-%H%M%S")
            target = self.sound_directory / f"sound_{stamp}.wav"
            target.write_bytes(data)
            item.audio_file_path = path = str(target)
        self.player(path)
        self.skip_enabled = True
        self.spell_enabled = True
        return path

    def skip_this_word(self) -> None:
        self._skipped += 1
        self.load_next_word()

    def spell_this_word(self, guess: str) -> bool:
        """Check ``guess`` against the current word, ignoring case and extra spaces.

        Raises ValueError when the guess is empty.
        """
        guessed = " ".join(guess.split())
        if not guessed:
            raise ValueError(EMPTY_GUESS_MESSAGE)
        item = self._current_word()
        correct = guessed.casefold() == item.word.casefold()
        if correct:
            self._correct += 1
            self.result_caption = CORRECT_CAPTION
        else:
            self._incorrect += 1
            self.result_caption = INCORRECT_CAPTION
        self.entered_text = f"You entered {guessed}"
        self.correct_word = item.word
        self.correct_meaning = item.meaning
        self.showing_result = True
        return correct

    def load_next_word(self) -> Optional[LearnSpellingsItem]:
        """Move to the next word, or to the summary page after the last one."""
        self.active_word += 1
        self.question_caption = f"Word #{self.active_word + 1} of {len(self.words)}"
        if self.active_word < len(self.words):
            self.skip_enabled = False
            self.spell_enabled = False
            self.showing_result = False
            self.page = SpellingPage.LISTENING
            return self.words[self.active_word]
        self.page = SpellingPage.SUMMARY
        return None

    def summary(self) -> SpellingResult:
        return SpellingResult(self._correct, self._incorrect, self._skipped)