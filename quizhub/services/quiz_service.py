"""Quiz submission service.

Grades an attempt (when raw answers are sent), folds the result into the
student's running statistics and records the attempt.
"""
from typing import Dict, Iterable, List, Optional, Tuple
import logging
import uuid
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from sqlalchemy.orm import Session

from quizhub.models import Course, Question, QuizAttempt, User

logger = logging.getLogger(__name__)

# Highest threshold first; a score earns at most one medal.
MEDALS = (
    (80, "Gold Medal"),
    (60, "Silver Medal"),
    (40, "Bronze Medal"),
)


def round_half_up(value: float, digits: int = 0) -> float:
    exp = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(exp, rounding=ROUND_HALF_UP))


def medal_for_score(score: int) -> Optional[str]:
    for threshold, medal in MEDALS:
        if score >= threshold:
            return medal
    return None


def merge_badges(existing: Optional[Iterable[str]], *extra: Iterable[str]) -> List[str]:
    """Union of badge collections, keeping first-seen order."""
    merged: List[str] = []
    for group in (existing or [], *extra):
        for badge in group:
            if badge and badge not in merged:
                merged.append(badge)
    return merged


def grade_answers(questions: List[Question], answers: Dict[uuid.UUID, int]) -> Tuple[int, List[Dict]]:
    """Grade submitted option indexes against the course questions.

    Unanswered questions count as wrong. Returns the percentage score and a
    per-question breakdown.
    """
    if not questions:
        raise ValueError("Course has no questions")

    known = {q.id for q in questions}
    unknown = [str(qid) for qid in answers if qid not in known]
    if unknown:
        raise ValueError(f"Invalid question id: {', '.join(unknown)}")

    correct = 0
    results = []
    for q in questions:
        selected = answers.get(q.id)
        is_correct = selected is not None and selected == q.correct_answer
        if is_correct:
            correct += 1
        results.append({
            "question_id": q.id,
            "selected": selected,
            "correct_answer": q.correct_answer,
            "is_correct": is_correct,
            "explanation": q.explanation,
        })

    score = int(round_half_up(correct / len(questions) * 100))
    return score, results


class QuizSubmissionService:
    """Apply a finished quiz to the student's record.

    Usage:
        service = QuizSubmissionService(db)
        outcome = service.submit(user, course, score=75, badges=[], duration=12)
    """

    def __init__(self, db: Session):
        self.db = db

    def submit(
        self,
        user: User,
        course: Course,
        score: Optional[int] = None,
        badges: Optional[List[str]] = None,
        duration: int = 0,
        answers: Optional[Dict[uuid.UUID, int]] = None,
    ) -> Dict:
        results = None
        if answers is not None:
            questions = self.db.query(Question).filter(Question.course_code == course.code).all()
            score, results = grade_answers(questions, answers)
        if score is None:
            raise ValueError("Either score or answers must be provided")

        # Re-read the row under a lock so concurrent submissions don't lose updates
        user = (
            self.db.query(User)
            .filter(User.id == user.id)
            .with_for_update()
            .populate_existing()
            .one()
        )

        now = datetime.utcnow()
        medal = medal_for_score(score)

        total_score = (user.total_score or 0) + score
        quizzes_completed = (user.quizzes_completed or 0) + 1
        average_score = round_half_up(total_score / quizzes_completed, 1)
        updated_badges = merge_badges(user.badges, badges or [], [medal] if medal else [])

        user.total_score = total_score
        user.quizzes_completed = quizzes_completed
        user.average_score = average_score
        user.badges = updated_badges
        # JSON columns only notice reassignment, not in-place appends
        user.recent_activity = list(user.recent_activity or []) + [{
            "course": course.title,
            "score": score,
            "date": now.isoformat(),
            "duration": duration,
        }]
        user.last_active = now

        self.db.add(QuizAttempt(
            user_id=user.id,
            course_id=course.id,
            course=course.title,
            score=score,
            duration=duration,
            date=now,
        ))

        self.db.query(Course).filter(Course.id == course.id).update(
            {Course.students: Course.students + 1},
            synchronize_session=False,
        )

        self.db.commit()
        logger.info(
            "Recorded quiz for user_id=%s course_id=%s score=%d (total=%d, completed=%d)",
            user.id, course.id, score, total_score, quizzes_completed,
        )

        return {
            "score": score,
            "updated": {
                "total_score": total_score,
                "quizzes_completed": quizzes_completed,
                "average_score": average_score,
                "badges": updated_badges,
            },
            "results": results,
        }
