import uuid

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    Index,
    String,
    Uuid,
    false,
    func,
)

from ..schemas.feedback import FeedbackKind
from .database import Base


class Feedback(Base):
    """SQLAlchemy ORM model for user feedback records"""

    __tablename__ = 'feedbacks'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(String, nullable=False)
    role = Column(String, nullable=False)
    kind = Column(
        Enum(
            FeedbackKind,
            name="kind",
            values_callable=lambda kinds: [k.value for k in kinds],
        ),
        nullable=False,
    )
    value = Column(String, nullable=True)
    message = Column(String, nullable=True)
    email = Column(String, nullable=True)

    received_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    silenced = Column(Boolean, nullable=False, default=False, server_default=false())

    __table_args__ = (
        Index("feedbacks_kind_received_idx", "kind", "received_at"),
    )

    def __repr__(self):
        return f"<Feedback(id={self.id}, kind={self.kind}, session_id={self.session_id})>"
