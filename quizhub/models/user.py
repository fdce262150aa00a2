"""User model."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Float, JSON, Uuid
from quizhub.db.base import Base


class User(Base):
    """Student or administrator account together with its quiz statistics."""

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    department = Column(String(150))
    level = Column(String(20))
    role = Column(String(20), nullable=False, default="student")  # student / admin
    status = Column(String(20), default="active")
    phone = Column(String(40))
    join_date = Column(DateTime, default=datetime.utcnow)
    last_active = Column(DateTime, default=datetime.utcnow)

    # Quiz statistics
    total_score = Column(Integer, nullable=False, default=0)
    quizzes_completed = Column(Integer, nullable=False, default=0)
    average_score = Column(Float, nullable=False, default=0.0)
    badges = Column(JSON, nullable=False, default=list)
    recent_activity = Column(JSON, nullable=False, default=list)  # [{course, score, date, duration}]

    created_at = Column(DateTime, default=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
