from pydantic import BaseModel, ConfigDict
from typing import List, Optional

from studious.models.validation import Reason


class Flashcard(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str


class StudySet(BaseModel):
    name: str
    flashcards: List[Flashcard] = []


class StoreSnapshot(BaseModel):
    set_names: List[str]
    current_set_index: int
    current_set_name: str
    card_count: int
    current_card_index: int
    current_card: Optional[Flashcard] = None
    show_answer: bool = False
    editing: bool = False
    edit_question: str = ""
    edit_answer: str = ""


# Request bodies
class StudySetCreate(BaseModel):
    name: str


class FlashcardCreate(BaseModel):
    question: str
    answer: str


# Responses
class StoreResponse(BaseModel):
    success: bool
    reason: Optional[Reason] = None
    field: Optional[str] = None
    message: Optional[str] = None
    state: StoreSnapshot
