from fastapi import APIRouter, Depends

from studious.api.dependencies import get_validator
from studious.models.validation import REJECTION_MESSAGES, ValidateRequest, ValidateResponse
from studious.services.text_filter import InputValidator

router = APIRouter(tags=["validation"])


@router.post("/validate", response_model=ValidateResponse)
async def validate_text(body: ValidateRequest, validator: InputValidator = Depends(get_validator)):
    """Pre-check a piece of text without changing any state"""
    result = validator.validate(body.text)
    return ValidateResponse(
        ok=result.ok,
        reason=result.reason,
        message=REJECTION_MESSAGES.get(result.reason) if result.reason else None,
    )
