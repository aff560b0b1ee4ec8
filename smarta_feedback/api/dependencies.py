from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from ..config.settings import settings
from ..models.database import get_db
from ..schemas.feedback import VALID_KINDS, VALID_VALUES, AuthenticatedCaller
from ..services.health import HealthService
from ..services.store import FeedbackStore, SQLAlchemyFeedbackStore
from ..services.validation import FeedbackValidator

feedback_validator = FeedbackValidator(valid_kinds=VALID_KINDS, valid_values=VALID_VALUES)


def get_caller(
    session_id: str = Header(default="", alias="X-Smarta-Auth-Session"),
    role: str = Header(default="", alias="X-Smarta-Auth-Role"),
) -> AuthenticatedCaller:
    return AuthenticatedCaller(session_id=session_id, role=role)


async def get_request_body(request: Request) -> bytes:
    return await request.body()


def get_feedback_validator() -> FeedbackValidator:
    return feedback_validator


def get_feedback_store(db: Session = Depends(get_db)) -> FeedbackStore:
    return SQLAlchemyFeedbackStore(db)


def get_health_service(store: FeedbackStore = Depends(get_feedback_store)) -> HealthService:
    return HealthService(store, lookback_hours=settings.OUTAGE_REPORT_ALERT_TTL_HOURS)
