from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .config import settings

DEFAULT_PRIORITY = 4
TITLE_MAX_LENGTH = 280


class ParseIn(BaseModel):
    text: str = Field(..., max_length=settings.max_input_length)


class DetectedKeywordsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    priority: str | None = None
    date: str | None = None
    labels: list[str] = []


class ChipOut(BaseModel):
    kind: Literal["priority", "date", "label"]
    text: str  # what the chip shows, e.g. "Priority 1", "Tomorrow", "@work"
    value: str  # what to send back in a dismissal
    keyword: str | None = None
    color: str | None = None


class ParsedInputOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    clean_title: str
    priority: int | None = Field(None, ge=1, le=4)
    due_date: date | None = None  # YYYY-MM-DD
    labels: list[str] = []
    detected_keywords: DetectedKeywordsOut
    chips: list[ChipOut] = []


class IngestIn(BaseModel):
    text: str = Field(..., max_length=settings.max_input_length)
    # explicit values win over anything detected in the text
    priority: int | None = Field(None, ge=1, le=4)
    due: date | None = None
    labels: list[str] | None = None
    # chips the user removed
    dismiss_priority: bool = False
    dismiss_due: bool = False
    dismiss_labels: list[str] = []


class TaskDraftOut(BaseModel):
    title: str = Field(..., max_length=TITLE_MAX_LENGTH)
    priority: int = Field(DEFAULT_PRIORITY, ge=1, le=4)
    due: date | None = None
    labels: list[str] = []
    label_color: str
    detected_keywords: DetectedKeywordsOut
