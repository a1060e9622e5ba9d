from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, field_validator


class ActionKind(str, Enum):
    MESSAGE = "message"
    UPLOAD = "upload"


class ActionStatus(str, Enum):
    PENDING = "pending"
    COMPLETE = "complete"


class Sequence(str, Enum):
    CHAT = "chat"
    REPORTS = "reports"
    SCANS = "scans"


class InvalidTransition(ValueError):
    """Raised when a record would leave the complete state."""


class UploadedFile(BaseModel):
    filename: str
    content_type: str
    size_bytes: int = Field(ge=0)


class ActionRecord(BaseModel):
    id: str
    kind: ActionKind
    sequence: Sequence
    payload: Union[str, UploadedFile]
    status: ActionStatus = ActionStatus.PENDING
    created_at_iso: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    completed_at_iso: str | None = None
    result: str | None = None

    # chat
    sender: Literal["user", "ai"] | None = None
    language: str | None = None
    reply_to: str | None = None

    # reports / scans
    title: str | None = None
    report_type: str | None = None
    scan_type: Literal["MRI", "CT"] | None = None
    date: str | None = None
    confidence: float | None = None

    @property
    def is_complete(self) -> bool:
        return self.status == ActionStatus.COMPLETE

    def completed(self, result: str | None = None, **updates: Any) -> "ActionRecord":
        if self.is_complete:
            raise InvalidTransition(f"record {self.id} is already complete")
        return self.model_copy(
            update={
                **updates,
                "status": ActionStatus.COMPLETE,
                "result": result if result is not None else self.result,
                "completed_at_iso": datetime.now(timezone.utc).isoformat(),
            }
        )


class MessageRequest(BaseModel):
    text: str
    language: str = "en"

    @field_validator("text")
    @classmethod
    def validate_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value
