"""
Pydantic models used across the backend.

`RecognitionEvent` is both the input shape at the FastAPI boundary and
the entity handed to the repository. `DayAggregate` is derived data and
is only ever produced by reading the store.

Guidelines:
- Models are frozen: an event never changes after creation.
- Store encoding lives in `codec.py`, not here.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    return str(uuid.uuid4())


class RecognitionEvent(BaseModel):
    """A single document recognition attempt.

    Fields:
    - `id`: opaque unique id, generated when omitted.
    - `time`: timezone-aware instant. Service normalizes it to UTC.
    - `amount`: integer business value (e.g. cents).
    - `user_id` / `app_id`: subject user and submitting application.
    - `document_id` / `document_type`: the submitted document.
    - `verified`: outcome of the recognition.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    time: datetime
    amount: int
    user_id: str = Field(default_factory=new_id)
    app_id: str
    document_id: str = Field(default_factory=new_id)
    document_type: str
    verified: bool = False


class DayAggregate(BaseModel):
    """Per-owner running totals for one UTC calendar day."""

    model_config = ConfigDict(frozen=True)

    day: datetime
    amount: int = 0
    success: int = 0
    failed: int = 0

    @property
    def count(self) -> int:
        return self.success + self.failed
