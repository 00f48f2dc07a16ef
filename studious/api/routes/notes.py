from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from studious.api.dependencies import get_notebook
from studious.models.note import Note, NoteListResponse, NoteResponse, NoteUpdate
from studious.models.validation import Reason
from studious.services.notebook import TEMPLATES, NoteBook, NoteNotFound

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=NoteListResponse)
async def list_notes(notebook: NoteBook = Depends(get_notebook)):
    notes = notebook.list_notes()
    return NoteListResponse(success=True, data=notes, count=len(notes))


@router.post("", response_model=Note, status_code=status.HTTP_201_CREATED)
async def create_note(notebook: NoteBook = Depends(get_notebook)):
    """Create an empty 'Untitled' note"""
    return notebook.create_note()


@router.get("/templates", response_model=List[str])
async def list_templates():
    return sorted(TEMPLATES)


@router.get("/{note_id}", response_model=Note)
async def get_note(note_id: int, notebook: NoteBook = Depends(get_notebook)):
    try:
        return notebook.get_note(note_id)
    except NoteNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.patch("/{note_id}", response_model=NoteResponse)
async def update_note(note_id: int, body: NoteUpdate, notebook: NoteBook = Depends(get_notebook)):
    try:
        result = notebook.update_note(note_id, title=body.title, content=body.content)
        if not result.ok and result.reason != Reason.EMPTY:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.message)

        return NoteResponse(
            success=result.ok,
            reason=result.reason,
            field=result.field,
            message=result.message,
            note=notebook.get_note(note_id),
        )
    except HTTPException:
        raise
    except NoteNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{note_id}/template/{kind}", response_model=Note)
async def apply_template(note_id: int, kind: str, notebook: NoteBook = Depends(get_notebook)):
    """Replace a note's content with a starter template"""
    try:
        return notebook.apply_template(note_id, kind)
    except NoteNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{note_id}")
async def delete_note(note_id: int, notebook: NoteBook = Depends(get_notebook)):
    try:
        notebook.delete_note(note_id)
        return {
            "success": True,
            "message": "Note deleted successfully"
        }
    except NoteNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
