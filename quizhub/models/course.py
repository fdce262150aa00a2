"""Course model."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text, Integer, Uuid
from quizhub.db.base import Base


class Course(Base):
    """Course whose past exam questions make up a quiz."""

    __tablename__ = "courses"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    code = Column(String(20), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    department = Column(String(150))
    level = Column(String(20))
    difficulty = Column(String(20))  # Easy / Medium / Hard
    instructor = Column(String(150))
    description = Column(Text)
    time_limit = Column(Integer, nullable=False, default=0)  # minutes
    questions = Column(Integer, nullable=False, default=0)
    students = Column(Integer, nullable=False, default=0)
    status = Column(String(20), default="active")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
