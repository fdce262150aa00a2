"""Quiz submission routes."""
import uuid
from datetime import datetime
from typing import Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field, model_validator

from quizhub.db.sessions import get_db
from quizhub.models.user import User
from quizhub.models.course import Course
from quizhub.models.quiz_attempt import QuizAttempt
from quizhub.core.security import get_current_user
from quizhub.services.quiz_service import QuizSubmissionService


router = APIRouter(prefix="/quizzes", tags=["Quiz"])


# Request/Response schemas
class SubmitQuizRequest(BaseModel):
    course_id: uuid.UUID
    score: Optional[int] = Field(default=None, ge=0, le=100)
    answers: Optional[Dict[uuid.UUID, int]] = None  # question id -> chosen option index
    badges: List[str] = []
    duration: int = Field(default=0, ge=0)  # minutes

    @model_validator(mode="after")
    def check_score_or_answers(self):
        if self.score is None and self.answers is None:
            raise ValueError("Either score or answers must be provided")
        return self


class UpdatedStats(BaseModel):
    total_score: int
    quizzes_completed: int
    average_score: float
    badges: List[str]


class QuestionResult(BaseModel):
    question_id: uuid.UUID
    selected: Optional[int]
    correct_answer: int
    is_correct: bool
    explanation: Optional[str]


class SubmitQuizResponse(BaseModel):
    ok: bool = True
    score: int
    updated: UpdatedStats
    results: Optional[List[QuestionResult]] = None


class QuizAttemptResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    course_id: uuid.UUID
    course: Optional[str]
    score: int
    duration: int
    date: datetime

    class Config:
        from_attributes = True


@router.post("", response_model=SubmitQuizResponse)
def submit_quiz(
    request: SubmitQuizRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Submit a finished quiz.

    Accepts either a precomputed percentage ``score`` or raw ``answers``
    which are graded here. Updates the caller's total/average score, merges
    badges (including the medal the score earns), appends an activity record,
    stores the attempt and bumps the course's student count.

    Raises:
        HTTPException 404: Course not found
        HTTPException 400: Answers reference questions outside the course
    """
    course = db.query(Course).filter(Course.id == request.course_id).first()
    if not course:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Course not found"
        )

    try:
        outcome = QuizSubmissionService(db).submit(
            current_user,
            course,
            score=request.score,
            badges=request.badges,
            duration=request.duration,
            answers=request.answers,
        )
    except ValueError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return SubmitQuizResponse(
        score=outcome["score"],
        updated=UpdatedStats(**outcome["updated"]),
        results=outcome["results"]
    )


@router.get("", response_model=List[QuizAttemptResponse])
def list_my_attempts(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's quiz attempts, newest first."""
    return db.query(QuizAttempt).filter(
        QuizAttempt.user_id == current_user.id
    ).order_by(QuizAttempt.date.desc()).all()
