"""Database models."""
from quizhub.models.user import User
from quizhub.models.course import Course
from quizhub.models.question import Question
from quizhub.models.event import Event
from quizhub.models.quiz_attempt import QuizAttempt

__all__ = [
    "User",
    "Course",
    "Question",
    "Event",
    "QuizAttempt",
]
