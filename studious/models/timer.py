from pydantic import BaseModel, Field


class TimerDuration(BaseModel):
    hours: int = Field(0, ge=0)
    minutes: int = Field(0, ge=0)
    seconds: int = Field(0, ge=0)


class TimerState(BaseModel):
    hours: int
    minutes: int
    seconds: int
    remaining: int
    running: bool
    display: str
