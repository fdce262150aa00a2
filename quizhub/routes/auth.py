"""Authentication routes."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, EmailStr

from quizhub.db.sessions import get_db
from quizhub.models.user import User
from quizhub.core.security import (
    get_password_hash,
    verify_password,
    create_user_token,
    get_current_user
)
from quizhub.core.config import settings
from quizhub.schemas import UserResponse


router = APIRouter(prefix="/auth", tags=["Authentication"])

logger = logging.getLogger(__name__)


# Request/Response schemas
class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str
    department: Optional[str] = None
    level: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new student.

    - Creates the account with a hashed password, zeroed quiz statistics and
      the welcome badge
    - Returns JWT access token
    """
    existing_user = db.query(User).filter(User.email == request.email).first()
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    user = User(
        name=request.name,
        email=request.email,
        password_hash=get_password_hash(request.password),
        department=request.department,
        level=request.level,
        role="student",
        badges=[settings.WELCOME_BADGE],
        total_score=0,
        quizzes_completed=0,
        average_score=0.0,
        recent_activity=[]
    )

    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered user_id=%s", user.id)

    return TokenResponse(
        access_token=create_user_token(user),
        user=UserResponse.model_validate(user)
    )


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Login with email and password.

    - Validates credentials
    - Returns JWT access token and the user's public record
    """
    user = db.query(User).filter(User.email == request.email).first()
    if not user or not verify_password(request.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password"
        )

    return TokenResponse(
        access_token=create_user_token(user),
        user=UserResponse.model_validate(user)
    )


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    """
    Get current authenticated user information.

    Protected endpoint - requires valid JWT token.
    """
    return current_user
