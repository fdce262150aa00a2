"""Admin user management and overview routes."""
import logging
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, EmailStr, Field

from quizhub.db.sessions import get_db
from quizhub.models.user import User
from quizhub.core.config import settings
from quizhub.core.security import require_admin, get_password_hash
from quizhub.schemas import UserResponse, SuccessResponse
from quizhub.services.stats_service import build_overview


router = APIRouter(prefix="/admin", tags=["Admin: Users"])

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
ROLE_PATTERN = "^(student|admin)$"


class CreateUserRequest(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)
    department: Optional[str] = None
    level: Optional[str] = None
    role: str = Field(default="student", pattern=ROLE_PATTERN)
    status: Optional[str] = "active"
    phone: Optional[str] = None


class UpdateUserRequest(BaseModel):
    name: str = Field(min_length=1)
    department: Optional[str] = None
    level: Optional[str] = None
    role: Optional[str] = Field(default=None, pattern=ROLE_PATTERN)
    status: Optional[str] = None
    phone: Optional[str] = None
    last_active: Optional[datetime] = None


class OverviewResponse(BaseModel):
    total_users: int
    total_questions: int
    total_courses: int
    total_events: int
    quizzes_today: int
    active_users_today: int
    new_users_today: int
    average_score: float


def _get_user_or_404(db: Session, user_id: uuid.UUID) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND)
    return user


@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    """Newest accounts first."""
    return db.query(User).order_by(User.created_at.desc()).limit(settings.ADMIN_USER_LIST_LIMIT).all()


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    request: CreateUserRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """Create an account on someone's behalf, with empty quiz statistics."""
    if db.query(User).filter(User.email == request.email).first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    now = datetime.utcnow()
    user = User(
        name=request.name,
        email=request.email,
        password_hash=get_password_hash(request.password),
        department=request.department,
        level=request.level,
        role=request.role,
        status=request.status,
        phone=request.phone,
        join_date=now,
        last_active=now,
        total_score=0,
        quizzes_completed=0,
        average_score=0.0,
        badges=[],
        recent_activity=[],
        created_at=now
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Admin %s created user %s with role %s", admin.id, user.id, user.role)
    return user


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    return _get_user_or_404(db, user_id)


@router.put("/users/{user_id}", response_model=SuccessResponse)
def update_user(
    user_id: uuid.UUID,
    request: UpdateUserRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """Edit the profile fields the caller sent; anything left out is kept."""
    user = _get_user_or_404(db, user_id)
    changes = request.model_dump(exclude_unset=True, exclude={"last_active"})
    if changes.get("role") is None:
        changes.pop("role", None)
    for field, value in changes.items():
        setattr(user, field, value)
    if request.last_active:
        user.last_active = request.last_active
    db.commit()
    logger.info("Admin %s updated user %s", admin.id, user_id)
    return SuccessResponse()


@router.delete("/users/{user_id}", response_model=SuccessResponse)
def delete_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    user = _get_user_or_404(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("Admin %s deleted user %s", admin.id, user_id)
    return SuccessResponse()


@router.get("/stats", response_model=OverviewResponse)
def overview(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    """Totals and today's activity for the admin dashboard."""
    return build_overview(db)
