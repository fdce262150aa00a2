"""Unit tests for the scoring helpers and the admin bootstrap command."""

import uuid
from types import SimpleNamespace

import pytest

from quizhub.create_admin import ensure_admin
from quizhub.core.security import verify_password
from quizhub.services.quiz_service import grade_answers, medal_for_score, merge_badges, round_half_up


class TestMedals:
    @pytest.mark.parametrize("score,medal", [
        (100, "Gold Medal"),
        (80, "Gold Medal"),
        (79, "Silver Medal"),
        (60, "Silver Medal"),
        (40, "Bronze Medal"),
        (39, None),
        (0, None),
    ])
    def test_thresholds(self, score, medal):
        assert medal_for_score(score) == medal


class TestMergeBadges:
    def test_keeps_first_seen_order(self):
        assert merge_badges(["A", "B"], ["B", "C"], ["A", "D"]) == ["A", "B", "C", "D"]

    def test_handles_missing_existing(self):
        assert merge_badges(None, ["Gold Medal"]) == ["Gold Medal"]

    def test_skips_empty_names(self):
        assert merge_badges([], ["", "X"]) == ["X"]


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(12.5) == 13
        assert round_half_up(67.25, 1) == 67.3
        assert round_half_up(77.666, 1) == 77.7


class TestGradeAnswers:
    def _question(self, correct):
        return SimpleNamespace(id=uuid.uuid4(), correct_answer=correct, explanation=None)

    def test_one_in_eight_rounds_half_up(self):
        questions = [self._question(0) for _ in range(8)]
        score, results = grade_answers(questions, {questions[0].id: 0})
        assert score == 13
        assert sum(r["is_correct"] for r in results) == 1

    def test_unknown_question(self):
        questions = [self._question(0)]
        with pytest.raises(ValueError):
            grade_answers(questions, {uuid.uuid4(): 0})

    def test_no_questions(self):
        with pytest.raises(ValueError):
            grade_answers([], {})


class TestCreateAdmin:
    def test_creates_admin(self, db):
        user = ensure_admin(db, "Root", "root@ndu.edu.ng", "R00t#pass")
        assert user.role == "admin"
        assert verify_password("R00t#pass", user.password_hash)

    def test_promotes_existing_user(self, db, student):
        user = ensure_admin(db, "Ignored", student.email, "unused")
        assert user.id == student.id
        assert user.role == "admin"
        assert user.name == "Ada Obi"
