from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class FeedbackKind(str, Enum):
    OUTAGE = "outage"
    COMMENT = "comment"
    SERVICE_CONDITION = "service_condition"


class FeedbackValue(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


VALID_KINDS = frozenset(kind.value for kind in FeedbackKind)
VALID_VALUES = frozenset(value.value for value in FeedbackValue)


class AuthenticatedCaller(BaseModel):
    """Identity forwarded by the upstream gateway."""

    session_id: str = ""
    role: str = ""

    model_config = ConfigDict(frozen=True)


class SaveFeedbackRequest(BaseModel):
    kind: Optional[str] = None
    value: Optional[str] = None
    message: Optional[str] = None
    email: Optional[str] = None


class FeedbackRecord(BaseModel):
    id: Optional[UUID] = None
    session_id: str
    role: str
    kind: FeedbackKind
    value: Optional[FeedbackValue] = None
    message: Optional[str] = None
    email: Optional[str] = None
    received_at: Optional[datetime] = None
    silenced: bool = False

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    status: int
    message: str
