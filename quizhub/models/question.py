"""Question model."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, Integer, JSON, Uuid
from quizhub.db.base import Base


class Question(Base):
    """Multiple-choice past exam question.

    Linked to its course by ``course_code`` value rather than by foreign key,
    so deleting a course leaves its questions in place.
    """

    __tablename__ = "questions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    course_code = Column(String(20), nullable=False, index=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False, default=list)
    correct_answer = Column(Integer, nullable=False)  # index into options
    explanation = Column(Text)
    difficulty = Column(String(20))
    year = Column(Integer)
    semester = Column(String(20))
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
