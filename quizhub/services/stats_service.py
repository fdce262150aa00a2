"""Overview counters for the admin dashboard."""
from datetime import date, datetime, time, timedelta
from typing import Dict, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from quizhub.models import Course, Event, Question, QuizAttempt, User
from quizhub.services.quiz_service import round_half_up


def _day_bounds(day: date):
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def build_overview(db: Session, today: Optional[date] = None) -> Dict:
    """Collect totals plus today's activity (UTC calendar day)."""
    today = today or datetime.utcnow().date()
    start, end = _day_bounds(today)

    average = db.query(func.avg(User.average_score)).scalar()

    return {
        "total_users": db.query(func.count(User.id)).scalar(),
        "total_questions": db.query(func.count(Question.id)).scalar(),
        "total_courses": db.query(func.count(Course.id)).scalar(),
        "total_events": db.query(func.count(Event.id)).scalar(),
        "quizzes_today": db.query(func.count(QuizAttempt.id)).filter(
            QuizAttempt.date >= start, QuizAttempt.date < end
        ).scalar(),
        "active_users_today": db.query(func.count(User.id)).filter(
            User.last_active >= start, User.last_active < end
        ).scalar(),
        "new_users_today": db.query(func.count(User.id)).filter(
            User.join_date >= start, User.join_date < end
        ).scalar(),
        "average_score": round_half_up(float(average), 1) if average is not None else 0.0,
    }
