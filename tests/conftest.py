"""
Test fixtures for Quiz Hub.

Points the app at a throwaway SQLite file before anything from quizhub is
imported, rebuilds the schema for every test and provides anonymous,
student and admin clients plus small record factories.
"""

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="quizhub-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient

from quizhub.main import app as quizhub_app
from quizhub.db.base import Base
from quizhub.db.sessions import SessionLocal, engine
from quizhub.core.security import create_user_token, get_password_hash
from quizhub.models import Course, Question, User

STUDENT_PASSWORD = "Student#123"
ADMIN_PASSWORD = "Admin#123"


@pytest.fixture
def app():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield quizhub_app
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db(app):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(app):
    """Unauthenticated test client."""
    return TestClient(app)


def _make_user(db, name, email, password, role, **extra):
    user = User(
        name=name,
        email=email,
        password_hash=get_password_hash(password),
        role=role,
        badges=extra.pop("badges", []),
        recent_activity=[],
        **extra,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _auth_client(app, user):
    client = TestClient(app)
    client.headers.update({"Authorization": f"Bearer {create_user_token(user)}"})
    return client


@pytest.fixture
def student(db):
    return _make_user(
        db, "Ada Obi", "ada@ndu.edu.ng", STUDENT_PASSWORD, "student",
        department="Computer Science", level="200",
    )


@pytest.fixture
def admin(db):
    return _make_user(db, "Site Admin", "admin@ndu.edu.ng", ADMIN_PASSWORD, "admin")


@pytest.fixture
def student_client(app, student):
    """Test client carrying a student's bearer token."""
    return _auth_client(app, student)


@pytest.fixture
def admin_client(app, admin):
    """Test client carrying an administrator's bearer token."""
    return _auth_client(app, admin)


@pytest.fixture
def make_user(db):
    def factory(name="Student", email="student@ndu.edu.ng", password=STUDENT_PASSWORD, role="student", **extra):
        return _make_user(db, name, email, password, role, **extra)
    return factory


@pytest.fixture
def make_course(db):
    def factory(code="CSC201", title="Computer Programming", **extra):
        course = Course(
            code=code,
            title=title,
            department=extra.pop("department", "Computer Science"),
            time_limit=extra.pop("time_limit", 30),
            questions=extra.pop("questions", 0),
            students=extra.pop("students", 0),
            **extra,
        )
        db.add(course)
        db.commit()
        db.refresh(course)
        return course
    return factory


@pytest.fixture
def make_question(db):
    def factory(course_code="CSC201", correct_answer=0, options=None, **extra):
        question = Question(
            course_code=course_code,
            question=extra.pop("question", "What does CPU stand for?"),
            options=options or ["Central Processing Unit", "Core Power Unit", "Central Print Utility", "Control Panel Unit"],
            correct_answer=correct_answer,
            **extra,
        )
        db.add(question)
        db.commit()
        db.refresh(question)
        return question
    return factory
