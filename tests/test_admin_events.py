"""Tests for admin event CRUD."""

import uuid

from quizhub.models import Event


EVENT_PAYLOAD = {
    "title": "Inter-faculty Quiz Bowl",
    "description": "Annual knockout competition",
    "type": "competition",
    "department": "All",
    "start_date": "2026-11-02",
    "end_date": "2026-11-03",
    "start_time": "09:00",
    "end_time": "15:30",
    "max_participants": 120,
    "courses": ["CSC201", "ENG201"],
    "prizes": ["Laptop", "Book voucher"],
    "is_public": True,
    "requires_registration": True,
    "status": "upcoming",
}


def test_create_event(admin_client):
    resp = admin_client.post("/admin/events", json=EVENT_PAYLOAD)
    assert resp.status_code == 201
    body = resp.json()
    assert body["current_participants"] == 0
    assert body["max_participants"] == 120
    assert body["courses"] == ["CSC201", "ENG201"]
    assert body["start_date"] == "2026-11-02"
    assert body["requires_registration"] is True


def test_end_before_start_rejected(admin_client):
    payload = dict(EVENT_PAYLOAD, start_date="2026-11-05", end_date="2026-11-01")
    resp = admin_client.post("/admin/events", json=payload)
    assert resp.status_code == 422


def test_update_event(admin_client, db):
    created = admin_client.post("/admin/events", json=EVENT_PAYLOAD).json()
    payload = dict(EVENT_PAYLOAD, title="Quiz Bowl Finals", current_participants=37, prizes=[])

    resp = admin_client.put(f"/admin/events/{created['id']}", json=payload)
    assert resp.status_code == 200

    fetched = admin_client.get(f"/admin/events/{created['id']}").json()
    assert fetched["title"] == "Quiz Bowl Finals"
    assert fetched["current_participants"] == 37
    assert fetched["prizes"] == []


def test_partial_update_keeps_unsent_fields(admin_client):
    created = admin_client.post("/admin/events", json=EVENT_PAYLOAD).json()
    admin_client.put(f"/admin/events/{created['id']}", json=dict(EVENT_PAYLOAD, current_participants=37))

    resp = admin_client.put(f"/admin/events/{created['id']}", json={"title": "Bowl Finals"})
    assert resp.status_code == 200

    fetched = admin_client.get(f"/admin/events/{created['id']}").json()
    assert fetched["title"] == "Bowl Finals"
    assert fetched["current_participants"] == 37
    assert fetched["max_participants"] == 120
    assert fetched["prizes"] == ["Laptop", "Book voucher"]


def test_delete_event(admin_client, db):
    created = admin_client.post("/admin/events", json=EVENT_PAYLOAD).json()
    resp = admin_client.delete(f"/admin/events/{created['id']}")
    assert resp.status_code == 200
    assert db.query(Event).count() == 0

    again = admin_client.delete(f"/admin/events/{created['id']}")
    assert again.status_code == 404


def test_missing_event(admin_client):
    resp = admin_client.get(f"/admin/events/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Event not found"


def test_list_events(admin_client):
    admin_client.post("/admin/events", json=EVENT_PAYLOAD)
    admin_client.post("/admin/events", json=dict(EVENT_PAYLOAD, title="Hackathon"))
    resp = admin_client.get("/admin/events")
    assert resp.status_code == 200
    assert len(resp.json()) == 2
