"""Public course routes."""
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session
from pydantic import BaseModel

from quizhub.db.sessions import get_db
from quizhub.models.course import Course
from quizhub.models.quiz_attempt import QuizAttempt
from quizhub.core.config import settings
from quizhub.services.quiz_service import round_half_up


router = APIRouter(prefix="/courses", tags=["Courses"])


class CourseResponse(BaseModel):
    id: uuid.UUID
    code: str
    title: str
    department: Optional[str]
    level: Optional[str]
    difficulty: Optional[str]
    instructor: Optional[str]
    description: Optional[str]
    time_limit: int
    questions: int
    students: int
    status: Optional[str]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class PopularCourseResponse(BaseModel):
    course: str
    department: Optional[str]
    questions: int
    attempts: int
    average_score: float


@router.get("", response_model=List[CourseResponse])
def list_courses(db: Session = Depends(get_db)):
    """List every course. Public endpoint."""
    return db.query(Course).order_by(Course.code).all()


@router.get("/popular", response_model=List[PopularCourseResponse])
def popular_courses(db: Session = Depends(get_db)):
    """
    Courses with the most quiz attempts.

    Attempts whose course has since been deleted are not counted.
    """
    attempts = func.count(QuizAttempt.id).label("attempts")
    rows = (
        db.query(
            Course.title,
            Course.department,
            Course.questions,
            attempts,
            func.avg(QuizAttempt.score).label("average_score"),
        )
        .join(QuizAttempt, QuizAttempt.course_id == Course.id)
        .group_by(Course.id, Course.title, Course.department, Course.questions)
        .order_by(attempts.desc(), Course.title)
        .limit(settings.POPULAR_COURSES_LIMIT)
        .all()
    )

    return [
        PopularCourseResponse(
            course=row.title,
            department=row.department,
            questions=row.questions or 0,
            attempts=row.attempts,
            average_score=round_half_up(float(row.average_score or 0), 1)
        )
        for row in rows
    ]
