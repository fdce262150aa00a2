"""Event model."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Time, Text, Integer, Boolean, JSON, Uuid
from quizhub.db.base import Base


class Event(Base):
    """Competition, workshop or other campus quiz event."""

    __tablename__ = "events"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    type = Column(String(40))
    department = Column(String(150))
    start_date = Column(Date)
    end_date = Column(Date)
    start_time = Column(Time)
    end_time = Column(Time)
    max_participants = Column(Integer, nullable=False, default=0)
    current_participants = Column(Integer, nullable=False, default=0)
    courses = Column(JSON, nullable=False, default=list)
    prizes = Column(JSON, nullable=False, default=list)
    is_public = Column(Boolean, nullable=False, default=True)
    requires_registration = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), default="upcoming")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
