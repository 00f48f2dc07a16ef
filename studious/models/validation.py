from enum import Enum
from typing import Optional

from pydantic import BaseModel


class Reason(str, Enum):
    EMPTY = "empty"
    PROFANITY = "profanity"
    INJECTION = "injection"
    CANNOT_DELETE_LAST = "cannot_delete_last"


# User-facing alert text. EMPTY is ignored quietly, so it has no message.
REJECTION_MESSAGES = {
    Reason.PROFANITY: "Your input contains inappropriate content.",
    Reason.INJECTION: "Invalid input: markup or code is not allowed.",
    Reason.CANNOT_DELETE_LAST: "You must keep at least one study set.",
}


class ValidationResult(BaseModel):
    reason: Optional[Reason] = None
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reason is None


class OperationResult(BaseModel):
    """Outcome of a store or notebook operation.

    A failed operation never mutates state; `field` names the input that was
    rejected when the operation took more than one.
    """
    ok: bool = True
    reason: Optional[Reason] = None
    field: Optional[str] = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls()

    @classmethod
    def rejected(cls, reason: Reason, field: Optional[str] = None) -> "OperationResult":
        return cls(ok=False, reason=reason, field=field)

    @classmethod
    def from_validation(cls, result: ValidationResult) -> "OperationResult":
        if result.ok:
            return cls()
        return cls(ok=False, reason=result.reason, field=result.field)

    @property
    def message(self) -> Optional[str]:
        if self.reason is None:
            return None
        return REJECTION_MESSAGES.get(self.reason)


class ValidateRequest(BaseModel):
    text: str


class ValidateResponse(BaseModel):
    ok: bool
    reason: Optional[Reason] = None
    message: Optional[str] = None
