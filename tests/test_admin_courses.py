"""Tests for admin course CRUD and the public course listing."""

import uuid

from quizhub.models import Course, Question


COURSE_PAYLOAD = {
    "code": "CSC301",
    "title": "Data Structures",
    "department": "Computer Science",
    "level": "300",
    "difficulty": "Hard",
    "instructor": "Dr. Eze",
    "description": "Lists, trees and graphs",
    "time_limit": 45,
}


class TestCreateCourse:
    def test_create_sets_counters(self, admin_client):
        resp = admin_client.post("/admin/courses", json=COURSE_PAYLOAD)
        assert resp.status_code == 201
        body = resp.json()
        assert body["code"] == "CSC301"
        assert body["time_limit"] == 45
        assert body["questions"] == 0
        assert body["students"] == 0
        assert body["status"] == "active"

    def test_create_requires_title(self, admin_client):
        payload = dict(COURSE_PAYLOAD, title="")
        resp = admin_client.post("/admin/courses", json=payload)
        assert resp.status_code == 422

    def test_create_visible_publicly(self, admin_client, client):
        admin_client.post("/admin/courses", json=COURSE_PAYLOAD)
        resp = client.get("/courses")
        assert resp.status_code == 200
        assert [c["code"] for c in resp.json()] == ["CSC301"]


class TestReadUpdateDelete:
    def test_get_course(self, admin_client, make_course):
        course = make_course()
        resp = admin_client.get(f"/admin/courses/{course.id}")
        assert resp.status_code == 200
        assert resp.json()["title"] == "Computer Programming"

    def test_get_missing_course(self, admin_client):
        resp = admin_client.get(f"/admin/courses/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Course not found"

    def test_malformed_id(self, admin_client):
        resp = admin_client.get("/admin/courses/not-an-id")
        assert resp.status_code == 422

    def test_update_keeps_counters(self, admin_client, make_course, db):
        course = make_course(questions=4, students=9)
        resp = admin_client.put(f"/admin/courses/{course.id}", json=COURSE_PAYLOAD)
        assert resp.status_code == 200
        assert resp.json() == {"success": True}

        db.expire_all()
        updated = db.get(Course, course.id)
        assert updated.code == "CSC301"
        assert updated.time_limit == 45
        assert updated.questions == 4
        assert updated.students == 9

    def test_update_missing_course(self, admin_client):
        resp = admin_client.put(f"/admin/courses/{uuid.uuid4()}", json=COURSE_PAYLOAD)
        assert resp.status_code == 404

    def test_delete_does_not_cascade(self, admin_client, make_course, make_question, db):
        course = make_course()
        question = make_question(course_code=course.code)
        course_id, question_id = course.id, question.id

        resp = admin_client.delete(f"/admin/courses/{course_id}")
        assert resp.status_code == 200

        db.expire_all()
        assert db.get(Course, course_id) is None
        assert db.get(Question, question_id) is not None

    def test_delete_missing_course(self, admin_client):
        resp = admin_client.delete(f"/admin/courses/{uuid.uuid4()}")
        assert resp.status_code == 404
