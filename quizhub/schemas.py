"""Response schemas shared by several routers."""
import uuid
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class ActivityRecord(BaseModel):
    course: Optional[str] = None
    score: int
    date: str
    duration: int = 0


class UserResponse(BaseModel):
    """Public user record. The password hash is never part of it."""
    id: uuid.UUID
    name: str
    email: str
    department: Optional[str] = None
    level: Optional[str] = None
    role: str
    status: Optional[str] = None
    phone: Optional[str] = None
    join_date: Optional[datetime] = None
    last_active: Optional[datetime] = None
    total_score: int = 0
    quizzes_completed: int = 0
    average_score: float = 0.0
    badges: List[str] = []
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProfileResponse(UserResponse):
    recent_activity: List[ActivityRecord] = []


class SuccessResponse(BaseModel):
    success: bool = True
