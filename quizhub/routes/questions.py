"""Public question routes."""
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from pydantic import BaseModel

from quizhub.db.sessions import get_db
from quizhub.models.question import Question


router = APIRouter(prefix="/questions", tags=["Questions"])


class QuestionResponse(BaseModel):
    id: uuid.UUID
    course_code: str
    question: str
    options: List[str]
    correct_answer: int
    explanation: Optional[str]
    difficulty: Optional[str]
    year: Optional[int]
    semester: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


@router.get("", response_model=List[QuestionResponse])
def list_questions(
    course_code: Optional[str] = Query(default=None),
    db: Session = Depends(get_db)
):
    """
    List questions, optionally only those of one course.

    Public endpoint used to build a quiz for a course.
    """
    query = db.query(Question)
    if course_code:
        query = query.filter(Question.course_code == course_code)
    return query.order_by(Question.created_at).all()
