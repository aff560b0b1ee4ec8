import abc
from datetime import datetime
from typing import List

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import PersistenceFailure
from ..models.database import Base
from ..models.feedback import Feedback
from ..schemas.feedback import FeedbackKind, FeedbackRecord


class FeedbackStore(abc.ABC):
    """Persistence operations the HTTP handlers depend on."""

    @abc.abstractmethod
    def migrate(self) -> None:
        ...

    @abc.abstractmethod
    def save_feedback(self, record: FeedbackRecord) -> None:
        ...

    @abc.abstractmethod
    def get_recent_outages(self, since: datetime) -> List[FeedbackRecord]:
        ...

    @abc.abstractmethod
    def test_connection(self) -> None:
        ...


class SQLAlchemyFeedbackStore(FeedbackStore):
    def __init__(self, db: Session):
        self.db = db

    def migrate(self) -> None:
        """
        Creates the feedbacks table, its kind enum and index when missing.

        Existing tables are left untouched.
        """
        try:
            Base.metadata.create_all(bind=self.db.get_bind())
        except SQLAlchemyError as e:
            raise PersistenceFailure("migrating database", e) from e

    def save_feedback(self, record: FeedbackRecord) -> None:
        """
        Inserts a single new feedback record.

        The id, received_at and silenced columns are filled in by the
        database defaults.
        """
        db_feedback = Feedback(
            session_id=record.session_id,
            role=record.role,
            kind=record.kind,
            value=record.value.value if record.value else None,
            message=record.message,
            email=record.email,
        )
        try:
            self.db.add(db_feedback)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceFailure("saving feedback", e) from e

    def get_recent_outages(self, since: datetime) -> List[FeedbackRecord]:
        """
        Returns the unsilenced outage reports received after `since`,
        oldest first.
        """
        try:
            rows = self.db.query(Feedback).filter(
                Feedback.kind == FeedbackKind.OUTAGE,
                Feedback.received_at > since,
                Feedback.silenced.is_(False),
            ).order_by(Feedback.received_at).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceFailure("querying recent outages", e) from e

        return [FeedbackRecord.model_validate(row) for row in rows]

    def test_connection(self) -> None:
        try:
            self.db.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceFailure("testing connection", e) from e
