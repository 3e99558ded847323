"""The flash card template: questions with a picture, an answer and a hint."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from mlearnkit.bundle import BundleError, base64_to_file, file_to_base64
from mlearnkit.editor import CollectionEditor
from mlearnkit.status import FieldStatus, Status, check_required, fits_length
from mlearnkit.template import TemplateCore, TemplateEntryPoint

QUESTION_LIMIT = 100
HINT_LIMIT = 30

SAMPLE_QUESTION = "What animal do you see on the picture?"
SAMPLE_ANSWER = "cat"
SAMPLE_HINT = "This animal is hated by dog."
SAMPLE_PICTURE = "cat.png"


@dataclass(frozen=True)
class FlashCardQuestion:
    """One flash card."""

    question: str = ""
    answer: str = ""
    hint: str = ""
    picture_path: str = ""


class FlashCardEditor(CollectionEditor[FlashCardQuestion]):
    """Editor of a flash card collection.

    Pictures are embedded into bundles as base64; pictures read back from a
    bundle are written into ``image_directory``.
    """

    item_noun = "question"
    name_missing_message = "No collection name is specified."
    name_ok_message = "Collection name is specified."

    def __init__(self, image_directory) -> None:
        super().__init__(FlashCardEntryPoint.TYPE_IDENTIFIER)
        self.image_directory = Path(image_directory)

    # Items.

    def add_question(
        self, question: str, answer: str, hint: str, picture_path: str
    ) -> int:
        """Insert a question after the selected one and return its row."""
        return self.add_item(
            FlashCardQuestion(question, answer, hint, str(picture_path))
        )

    def add_sample_question(self, templates_dir) -> int:
        """Insert the sample question whose picture ships with the template."""
        picture = Path(templates_dir) / FlashCardEntryPoint.BASE_FOLDER / SAMPLE_PICTURE
        return self.add_question(SAMPLE_QUESTION, SAMPLE_ANSWER, SAMPLE_HINT, str(picture))

    def save_question(
        self, question: str, answer: str, hint: str, picture_path: str
    ) -> None:
        """Replace the selected question with the given values."""
        if not fits_length(question, QUESTION_LIMIT):
            raise ValueError(f"question must have at most {QUESTION_LIMIT} characters")
        if not fits_length(hint, HINT_LIMIT):
            raise ValueError(f"hint must have at most {HINT_LIMIT} characters")
        self._replace_selected(
            FlashCardQuestion(question, answer, hint, str(picture_path))
        )

    # Field states of the selected question.

    def _shown(self) -> FlashCardQuestion:
        selected = self._selected()
        return selected if selected is not None else FlashCardQuestion()

    def question_status(self) -> FieldStatus:
        return check_required(
            self._shown().question,
            "Question is specified.",
            "Question is not specified.",
            Status.WARNING,
        )

    def answer_status(self) -> FieldStatus:
        return check_required(
            self._shown().answer,
            "Answer is specified.",
            "Answer is not specified.",
        )

    def hint_status(self) -> FieldStatus:
        return check_required(
            self._shown().hint,
            "Hint is specified.",
            "Hint is not specified.",
            Status.WARNING,
        )

    def picture_status(self) -> FieldStatus:
        return check_required(
            self._shown().picture_path,
            "Picture is selected.",
            "Picture is not selected.",
        )

    # Bundle data.

    def _item_fields(self, item: FlashCardQuestion) -> Mapping[str, str]:
        try:
            encoded = file_to_base64(item.picture_path) if item.picture_path else ""
        except OSError as exc:
            raise BundleError(f"cannot read picture {item.picture_path!r}: {exc}") from exc
        if not encoded:
            raise BundleError(f"picture {item.picture_path!r} is missing or empty")
        return {
            "question": item.question,
            "answer": item.answer,
            "hint": item.hint,
            "image": encoded,
        }

    def _item_from_fields(
        self, fields: Mapping[str, str], index: int
    ) -> Optional[FlashCardQuestion]:
        question = fields.get("question", "")
        answer = fields.get("answer", "")
        hint = fields.get("hint", "")
        image_data = fields.get("image", "")
        if not question or not answer or not image_data:
            return None
        target = self.image_directory / f"image_{index}.png"
        try:
            base64_to_file(image_data, target)
        except (BundleError, OSError):
            return None
        return FlashCardQuestion(question, answer, hint, str(target))


class FlashCardEntryPoint(TemplateEntryPoint):
    """Entry point of the flash card template."""

    BASE_FOLDER = "flashcard"
    TYPE_IDENTIFIER = "FlashCardsTemplate"

    def __init__(self, image_directory) -> None:
        super().__init__(
            name="flashcard",
            human_name="Flash cards",
            description="Choose this template to create flash card applications.",
            base_folder=self.BASE_FOLDER,
            type_identifier=self.TYPE_IDENTIFIER,
            mobile_application_apk_file="FlashCardTemplateApp.apk",
            thumbnail_image="thumbnail.png",
        )
        self.image_directory = Path(image_directory)

    def _create_editor(self) -> FlashCardEditor:
        return FlashCardEditor(self.image_directory)

    def create_new_core(self) -> TemplateCore:
        return super().create_new_core()