"""Quiz attempt model."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Uuid
from quizhub.db.base import Base


class QuizAttempt(Base):
    """One submitted quiz. Ids are plain values so attempts outlive deletions."""

    __tablename__ = "quiz_attempts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    course_id = Column(Uuid(as_uuid=True), nullable=False, index=True)
    course = Column(String(200))  # course title at submission time
    score = Column(Integer, nullable=False)
    duration = Column(Integer, nullable=False, default=0)  # minutes
    date = Column(DateTime, default=datetime.utcnow, index=True)
