import logging
from typing import List, Optional

from studious.core.config import DEFAULT_SET_NAME
from studious.models.flashcard import Flashcard, StoreSnapshot, StudySet
from studious.models.validation import OperationResult, Reason
from studious.services.text_filter import InputValidator

logger = logging.getLogger(__name__)


class CollectionStore:
    """Study sets, the flashcards they own, and the current set/card pointers.

    Free text is validated before anything changes; a rejected operation
    leaves every field, pointers included, exactly as it was. Pointer repair
    happens inside each mutation so the indices are always in range:

    * ``0 <= current_set_index < len(sets)`` and ``sets`` is never empty
    * ``0 <= current_card_index < max(1, len(current_set.flashcards))``
    """

    def __init__(self, validator: InputValidator, default_set_name: str = DEFAULT_SET_NAME):
        self.validator = validator
        self.sets: List[StudySet] = [StudySet(name=default_set_name, flashcards=[])]
        self.current_set_index = 0
        self.current_card_index = 0
        self.show_answer = False
        self.editing = False
        self.edit_question = ""
        self.edit_answer = ""

    # ---- Readers ----
    @property
    def current_set(self) -> StudySet:
        return self.sets[self.current_set_index]

    @property
    def current_card(self) -> Optional[Flashcard]:
        cards = self.current_set.flashcards
        if not cards:
            return None
        return cards[self.current_card_index]

    def snapshot(self) -> StoreSnapshot:
        current = self.current_set
        return StoreSnapshot(
            set_names=[s.name for s in self.sets],
            current_set_index=self.current_set_index,
            current_set_name=current.name,
            card_count=len(current.flashcards),
            current_card_index=self.current_card_index,
            current_card=self.current_card,
            show_answer=self.show_answer,
            editing=self.editing,
            edit_question=self.edit_question if self.editing else "",
            edit_answer=self.edit_answer if self.editing else "",
        )

    # ---- Internal state resets ----
    def _leave_editing(self):
        self.editing = False
        self.edit_question = ""
        self.edit_answer = ""

    def _reset_view(self):
        self.current_card_index = 0
        self.show_answer = False
        self._leave_editing()

    # ---- Study sets ----
    def add_study_set(self, name: str) -> OperationResult:
        result = self.validator.validate(name, field="name")
        if not result.ok:
            return OperationResult.from_validation(result)

        self.sets.append(StudySet(name=name, flashcards=[]))
        self.current_set_index = len(self.sets) - 1
        self._reset_view()
        logger.info(f"Added study set '{name}' (total={len(self.sets)})")
        return OperationResult.success()

    def delete_current_set(self) -> OperationResult:
        if len(self.sets) == 1:
            logger.warning("Refusing to delete the last study set")
            return OperationResult.rejected(Reason.CANNOT_DELETE_LAST)

        removed = self.sets.pop(self.current_set_index)
        self.current_set_index = max(0, self.current_set_index - 1)
        self._reset_view()
        logger.info(f"Deleted study set '{removed.name}' (total={len(self.sets)})")
        return OperationResult.success()

    def next_set(self) -> OperationResult:
        if len(self.sets) <= 1:
            return OperationResult.success()
        self.current_set_index = (self.current_set_index + 1) % len(self.sets)
        self._reset_view()
        return OperationResult.success()

    def prev_set(self) -> OperationResult:
        if len(self.sets) <= 1:
            return OperationResult.success()
        self.current_set_index = (self.current_set_index - 1) % len(self.sets)
        self._reset_view()
        return OperationResult.success()

    # ---- Flashcards ----
    def add_flashcard(self, question: str, answer: str) -> OperationResult:
        result = self.validator.validate_fields(question=question, answer=answer)
        if not result.ok:
            return OperationResult.from_validation(result)

        cards = self.current_set.flashcards
        cards.append(Flashcard(question=question, answer=answer))
        self.current_card_index = len(cards) - 1
        self.show_answer = False
        # The card pointer moved, so any open edit no longer refers to it.
        self._leave_editing()
        logger.info(f"Added flashcard to '{self.current_set.name}' (count={len(cards)})")
        return OperationResult.success()

    def next_card(self) -> OperationResult:
        cards = self.current_set.flashcards
        if not cards:
            return OperationResult.success()
        self.current_card_index = (self.current_card_index + 1) % len(cards)
        self.show_answer = False
        self._leave_editing()
        return OperationResult.success()

    def toggle_answer(self) -> OperationResult:
        if self.current_card is None:
            return OperationResult.success()
        self.show_answer = not self.show_answer
        return OperationResult.success()

    def delete_current_flashcard(self) -> OperationResult:
        if self.current_card is None:
            return OperationResult.success()

        cards = self.current_set.flashcards
        del cards[self.current_card_index]
        self._reset_view()
        logger.info(f"Deleted flashcard from '{self.current_set.name}' (count={len(cards)})")
        return OperationResult.success()

    # ---- Edit transaction ----
    def start_editing(self) -> OperationResult:
        card = self.current_card
        if card is None:
            return OperationResult.success()
        self.edit_question = card.question
        self.edit_answer = card.answer
        self.editing = True
        return OperationResult.success()

    def save_edit(self, question: str, answer: str) -> OperationResult:
        if not self.editing or self.current_card is None:
            return OperationResult.success()

        result = self.validator.validate_fields(question=question, answer=answer)
        if not result.ok:
            return OperationResult.from_validation(result)

        self.current_set.flashcards[self.current_card_index] = Flashcard(question=question, answer=answer)
        self._leave_editing()
        self.show_answer = False
        return OperationResult.success()

    def cancel_edit(self) -> OperationResult:
        self._leave_editing()
        return OperationResult.success()
