"""Admin event management routes."""
import logging
import uuid
from datetime import date, datetime, time
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field, model_validator

from quizhub.db.sessions import get_db
from quizhub.models.user import User
from quizhub.models.event import Event
from quizhub.core.security import require_admin
from quizhub.schemas import SuccessResponse


router = APIRouter(prefix="/admin/events", tags=["Admin: Events"])

logger = logging.getLogger(__name__)

EVENT_NOT_FOUND = "Event not found"


class EventRequest(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: Optional[str] = None
    department: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    max_participants: int = Field(default=0, ge=0)
    courses: List[str] = []
    prizes: List[str] = []
    is_public: bool = True
    requires_registration: bool = False
    status: Optional[str] = "upcoming"

    @model_validator(mode="after")
    def check_date_range(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class UpdateEventRequest(EventRequest):
    current_participants: int = Field(default=0, ge=0)


class EventResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: Optional[str]
    type: Optional[str]
    department: Optional[str]
    start_date: Optional[date]
    end_date: Optional[date]
    start_time: Optional[time]
    end_time: Optional[time]
    max_participants: int
    current_participants: int
    courses: List[str]
    prizes: List[str]
    is_public: bool
    requires_registration: bool
    status: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


def _get_event_or_404(db: Session, event_id: uuid.UUID) -> Event:
    event = db.query(Event).filter(Event.id == event_id).first()
    if not event:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EVENT_NOT_FOUND)
    return event


@router.get("", response_model=List[EventResponse])
def list_events(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return db.query(Event).order_by(Event.start_date, Event.created_at).all()


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    request: EventRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """Create an event. Nobody is registered yet."""
    event = Event(**request.model_dump(), current_participants=0)
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info("Admin %s created event %s", admin.id, event.id)
    return event


@router.get("/{event_id}", response_model=EventResponse)
def get_event(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    return _get_event_or_404(db, event_id)


@router.put("/{event_id}", response_model=SuccessResponse)
def update_event(
    event_id: uuid.UUID,
    request: UpdateEventRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    event = _get_event_or_404(db, event_id)
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(event, field, value)
    event.updated_at = datetime.utcnow()
    db.commit()
    logger.info("Admin %s updated event %s", admin.id, event_id)
    return SuccessResponse()


@router.delete("/{event_id}", response_model=SuccessResponse)
def delete_event(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    event = _get_event_or_404(db, event_id)
    db.delete(event)
    db.commit()
    logger.info("Admin %s deleted event %s", admin.id, event_id)
    return SuccessResponse()
