from pydantic import BaseModel
from typing import List, Optional

from studious.models.validation import Reason


class Note(BaseModel):
    id: int
    title: str = "Untitled"
    content: str = ""


class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class NoteResponse(BaseModel):
    success: bool
    reason: Optional[Reason] = None
    field: Optional[str] = None
    message: Optional[str] = None
    note: Note


class NoteListResponse(BaseModel):
    success: bool
    data: List[Note]
    count: int
