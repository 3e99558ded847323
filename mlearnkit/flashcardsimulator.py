"""Simulator of the flash card template: cards that flip to show the answer."""

from __future__ import annotations

import enum
from typing import Optional

from mlearnkit.flashcard import FlashCardEditor, FlashCardQuestion
from mlearnkit.template import TemplateSimulator

START_PAGE = 1
FIRST_CARD_PAGE = 2


class CardSide(enum.IntEnum):
    """The side of a flash card that is shown."""

    QUESTION = 0
    ANSWER = 1


class FlashCardItem:
    """One card of a running simulation."""

    def __init__(self, question: FlashCardQuestion, number: int, total: int) -> None:
        self.question = question
        self.number = number
        self.total = total
        self.side = CardSide.QUESTION

    @property
    def previous_enabled(self) -> bool:
        return self.number != 1

    @property
    def answer_html(self) -> str:
        return f'<span style=" font-size:14pt;">{self.question.answer}</span>'

    @property
    def hint_visible(self) -> bool:
        return self.side == CardSide.QUESTION

    @property
    def question_visible(self) -> bool:
        return self.side == CardSide.QUESTION

    def caption(self) -> str:
        return f"Question number {self.number} of {self.total}"

    def flip(self, target_side: Optional[CardSide] = None) -> CardSide:
        """Show ``target_side``, or turn the card over when it is None."""
        if target_side is None:
            target_side = (
                CardSide.ANSWER if self.side == CardSide.QUESTION else CardSide.QUESTION
            )
        self.side = CardSide(target_side)
        return self.side

    def reset(self) -> None:
        self.flip(CardSide.QUESTION)


class FlashCardSimulator(TemplateSimulator):
    """Shows the cards one after another.

    Page 0 is idle, page 1 the start page, pages 2 onwards the cards, and the
    page after the last card is the end page.
    """

    def __init__(self, editor: FlashCardEditor) -> None:
        super().__init__(editor)
        self.cards: list[FlashCardItem] = []
        self.author = ""
        self.heading = ""
        self.start_enabled = False

    @property
    def page_count(self) -> int:
        return len(self.cards) + 3

    @property
    def end_page(self) -> int:
        return len(self.cards) + FIRST_CARD_PAGE

    def _card_at(self, page: int) -> Optional[FlashCardItem]:
        index = page - FIRST_CARD_PAGE
        if 0 <= index < len(self.cards):
            return self.cards[index]
        return None

    def start_simulation(self) -> bool:
        """Build a card per question and show the start page; False when incomplete."""
        if not self.editor.can_generate_applications():
            return False
        questions = self.editor.active_items()
        self.start_enabled = True
        self.author = self.editor.author_name()
        self.heading = self.editor.project_name()
        self.cards = [
            FlashCardItem(question, number, len(questions))
            for number, question in enumerate(questions, start=1)
        ]
        self.page = START_PAGE
        return True

    def start(self) -> None:
        self.move_to_next_card()

    def restart(self) -> None:
        self.page = START_PAGE

    def move_to_next_card(self) -> None:
        """Go to the next page, showing the question side of the next card."""
        target = self.page + 1
        if target >= self.page_count:
            return
        card = self._card_at(target)
        if card is not None:
            card.reset()
        self.page = target

    def move_to_previous_card(self) -> None:
        """Go to the previous page, showing the question side of the card there."""
        target = self.page - 1
        if target < 0:
            return
        card = self._card_at(target)
        if card is not None:
            card.reset()
        self.page = target

    def current_card(self) -> Optional[FlashCardItem]:
        """The card on the current page, or None on other pages."""
        return self._card_at(self.page)