"""Admin course management routes."""
import logging
import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field

from quizhub.db.sessions import get_db
from quizhub.models.user import User
from quizhub.models.course import Course
from quizhub.core.security import require_admin
from quizhub.routes.courses import CourseResponse
from quizhub.schemas import SuccessResponse


router = APIRouter(prefix="/admin/courses", tags=["Admin: Courses"])

logger = logging.getLogger(__name__)

COURSE_NOT_FOUND = "Course not found"


class CourseRequest(BaseModel):
    code: str = Field(min_length=1)
    title: str = Field(min_length=1)
    department: Optional[str] = None
    level: Optional[str] = None
    difficulty: Optional[str] = None
    instructor: Optional[str] = None
    description: Optional[str] = None
    time_limit: int = Field(default=0, ge=0)


def _get_course_or_404(db: Session, course_id: uuid.UUID) -> Course:
    course = db.query(Course).filter(Course.id == course_id).first()
    if not course:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=COURSE_NOT_FOUND)
    return course


@router.get("", response_model=List[CourseResponse])
def list_courses(db: Session = Depends(get_db), admin: User = Depends(require_admin)):
    return db.query(Course).order_by(Course.code).all()


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    request: CourseRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """Create a course with zeroed question/student counters."""
    course = Course(
        **request.model_dump(),
        questions=0,
        students=0,
        status="active"
    )
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info("Admin %s created course %s (%s)", admin.id, course.id, course.code)
    return course


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(
    course_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    return _get_course_or_404(db, course_id)


@router.put("/{course_id}", response_model=SuccessResponse)
def update_course(
    course_id: uuid.UUID,
    request: CourseRequest,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """Apply the fields the caller sent. Counters are left alone."""
    course = _get_course_or_404(db, course_id)
    for field, value in request.model_dump(exclude_unset=True).items():
        setattr(course, field, value)
    course.updated_at = datetime.utcnow()
    db.commit()
    logger.info("Admin %s updated course %s", admin.id, course_id)
    return SuccessResponse()


@router.delete("/{course_id}", response_model=SuccessResponse)
def delete_course(
    course_id: uuid.UUID,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """Delete a course. Its questions and attempts are kept."""
    course = _get_course_or_404(db, course_id)
    db.delete(course)
    db.commit()
    logger.info("Admin %s deleted course %s", admin.id, course_id)
    return SuccessResponse()
