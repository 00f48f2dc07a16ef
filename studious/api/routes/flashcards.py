from fastapi import APIRouter, Depends

from studious.api.dependencies import get_store
from studious.api.routes.study_sets import store_response
from studious.models.flashcard import FlashcardCreate, StoreResponse
from studious.services.collection_store import CollectionStore

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.post("", response_model=StoreResponse, summary="Add a flashcard to the current study set")
async def create_flashcard(card: FlashcardCreate, store: CollectionStore = Depends(get_store)):
    return store_response(store, store.add_flashcard(card.question, card.answer))


@router.post("/next", response_model=StoreResponse, summary="Show the next flashcard")
async def next_flashcard(store: CollectionStore = Depends(get_store)):
    return store_response(store, store.next_card())


@router.post("/toggle-answer", response_model=StoreResponse, summary="Show or hide the answer")
async def toggle_answer(store: CollectionStore = Depends(get_store)):
    return store_response(store, store.toggle_answer())


@router.delete("/current", response_model=StoreResponse, summary="Delete the current flashcard")
async def delete_current_flashcard(store: CollectionStore = Depends(get_store)):
    return store_response(store, store.delete_current_flashcard())


@router.post("/edit", response_model=StoreResponse, summary="Start editing the current flashcard")
async def start_editing(store: CollectionStore = Depends(get_store)):
    return store_response(store, store.start_editing())


@router.put("/edit", response_model=StoreResponse, summary="Save the flashcard being edited")
async def save_edit(card: FlashcardCreate, store: CollectionStore = Depends(get_store)):
    return store_response(store, store.save_edit(card.question, card.answer))


@router.delete("/edit", response_model=StoreResponse, summary="Discard the current edit")
async def cancel_edit(store: CollectionStore = Depends(get_store)):
    return store_response(store, store.cancel_edit())
