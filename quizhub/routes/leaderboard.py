"""Leaderboard and profile routes."""
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from pydantic import BaseModel

from quizhub.db.sessions import get_db
from quizhub.models.user import User
from quizhub.core.config import settings
from quizhub.core.security import get_current_user
from quizhub.schemas import ProfileResponse


router = APIRouter(tags=["Leaderboard"])


class LeaderboardEntry(BaseModel):
    id: uuid.UUID
    name: str
    email: str
    total_score: int
    quizzes_completed: int
    average_score: float
    badges: List[str]
    last_active: Optional[datetime]

    class Config:
        from_attributes = True


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
def leaderboard(db: Session = Depends(get_db)):
    """Top users by total score, most recently active first on ties."""
    return db.query(User).order_by(
        User.total_score.desc(),
        User.last_active.desc()
    ).limit(settings.LEADERBOARD_LIMIT).all()


@router.get("/profile", response_model=ProfileResponse)
def profile(current_user: User = Depends(get_current_user)):
    """
    The caller's full record including recent activity.

    Protected endpoint - requires JWT authentication.
    """
    return current_user
