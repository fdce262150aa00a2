"""Admin question management routes."""
import logging
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field, model_validator

from quizhub.db.sessions import get_db
from quizhub.models.user import User
from quizhub.models.course import Course
from quizhub.models.question import Question
from quizhub.core.security import require_admin
from quizhub.routes.questions import QuestionResponse
from quizhub.schemas import SuccessResponse


router = APIRouter(prefix="/admin/questions", tags=["Admin: Questions"])

logger = logging.getLogger(__name__)

QUESTION_NOT_FOUND = "Question not found"


class QuestionRequest(BaseModel):
    course_code: str = Field(min_length=1)
    question: str = Field(min_length=1)
    options: List[str] = Field(min_length=2)
    correct_answer: int = Field(ge=0)
    explanation: Optional[str] = None
    difficulty: Optional[str] = None
    year: Optional[int] = None
    semester: Optional[str] = None

    @model_validator(mode="after")
    def check_correct_answer(self):
        if self.correct_answer >= len(self.options):
            raise ValueError("correct_answer must be the index of one of the options")
        return self


class CreateQuestionRequest(QuestionRequest):
    # Preferred over course_code when locating the course to count against
    course_id: Optional[uuid.UUID] = None


def _get_question_or_404(db: Session, question_id: uuid.UUID) -> Question:
    question = db.query(Question).filter(Question.id == question_id).first()
    if not question:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=QUESTION_NOT_FOUND)
    return question


def _adjust_question_count(db: Session, delta: int, course_code: Optional[str] = None,
                           course_id: Optional[uuid.UUID] = None) -> None:
    """Move a course's question counter by ``delta``, never below zero."""
    query = db.query(Course)
    if course_id is not None:
        query = query.filter(Course.id == course_id)
    else:
        query = query.filter(Course.code == course_code)

    course = query.first()
    if course is None:
        logger.warning("No course for code=%s id=%s; question count unchanged", course_code, course_id)
        return
    course.questions = max((course.questions or 0) + delta, 0)


@router.get("", response_model=List[QuestionResponse])
def list_questions(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return db.query(Question).order_by(Question.created_at).all()


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
def create_question(
    request: CreateQuestionRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """Create a question and count it against its course."""
    question = Question(**request.model_dump(exclude={"course_id"}))
    db.add(question)
    _adjust_question_count(db, 1, course_code=request.course_code, course_id=request.course_id)
    db.commit()
    db.refresh(question)
    logger.info("Admin %s created question %s for %s", admin.id, question.id, question.course_code)
    return question


@router.get("/{question_id}", response_model=QuestionResponse)
def get_question(
    question_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    return _get_question_or_404(db, question_id)


@router.put("/{question_id}", response_model=SuccessResponse)
def update_question(
    question_id: uuid.UUID,
    request: QuestionRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Apply the fields the caller sent to a question.

    Moving the question to another course code shifts one count from the old
    course to the new one.
    """
    question = _get_question_or_404(db, question_id)
    previous_code = question.course_code

    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(question, field, value)
    question.updated_at = datetime.utcnow()

    if previous_code != request.course_code:
        _adjust_question_count(db, -1, course_code=previous_code)
        _adjust_question_count(db, 1, course_code=request.course_code)

    db.commit()
    logger.info("Admin %s updated question %s", admin.id, question_id)
    return SuccessResponse()


@router.delete("/{question_id}", response_model=SuccessResponse)
def delete_question(
    question_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    question = _get_question_or_404(db, question_id)
    _adjust_question_count(db, -1, course_code=question.course_code)
    db.delete(question)
    db.commit()
    logger.info("Admin %s deleted question %s", admin.id, question_id)
    return SuccessResponse()
