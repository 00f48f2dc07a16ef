from fastapi import APIRouter, Depends, HTTPException, status

from studious.api.dependencies import get_store
from studious.models.flashcard import StoreResponse, StudySetCreate
from studious.models.validation import OperationResult, Reason
from studious.services.collection_store import CollectionStore

router = APIRouter(prefix="/study-sets", tags=["Study Sets"])

# Rejections that are shown to the user as an alert
_REJECTION_STATUS = {
    Reason.PROFANITY: status.HTTP_400_BAD_REQUEST,
    Reason.INJECTION: status.HTTP_400_BAD_REQUEST,
    Reason.CANNOT_DELETE_LAST: status.HTTP_409_CONFLICT,
}


def store_response(store: CollectionStore, result: OperationResult) -> StoreResponse:
    """Map an operation result to a response, raising for alert-worthy rejections.

    An empty field is a quiet no-op: it comes back as ``success: false`` with
    no message so the client can simply ignore it.
    """
    if not result.ok and result.reason in _REJECTION_STATUS:
        raise HTTPException(
            status_code=_REJECTION_STATUS[result.reason],
            detail=result.message,
        )

    return StoreResponse(
        success=result.ok,
        reason=result.reason,
        field=result.field,
        message=result.message,
        state=store.snapshot(),
    )


@router.get("", response_model=StoreResponse)
async def get_study_sets(store: CollectionStore = Depends(get_store)):
    """Current store snapshot: set names, current set and current card"""
    return store_response(store, OperationResult.success())


@router.post("", response_model=StoreResponse)
async def create_study_set(body: StudySetCreate, store: CollectionStore = Depends(get_store)):
    """Create a new study set and make it current"""
    return store_response(store, store.add_study_set(body.name))


@router.delete("/current", response_model=StoreResponse)
async def delete_current_study_set(store: CollectionStore = Depends(get_store)):
    """Delete the current study set (the last one cannot be deleted)"""
    return store_response(store, store.delete_current_set())


@router.post("/next", response_model=StoreResponse)
async def next_study_set(store: CollectionStore = Depends(get_store)):
    return store_response(store, store.next_set())


@router.post("/prev", response_model=StoreResponse)
async def prev_study_set(store: CollectionStore = Depends(get_store)):
    return store_response(store, store.prev_set())
