import pytest
from fastapi.testclient import TestClient

from database.db import get_db
from main import app


@pytest.fixture
def cookie_client(db):
    """Client without the user override, so the signed session cookie is used."""
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_session_login_and_rate(cookie_client, users, course):
    assert cookie_client.post("/api/ratings", json={"value": 3, "courseId": course}).status_code == 401

    res = cookie_client.post("/api/auth/session", json={"user_id": users["alice"]})
    assert res.status_code == 200
    assert res.json()["user_type"] == "STUDENT"

    res = cookie_client.post("/api/ratings", json={"value": 3, "courseId": course})
    assert res.status_code == 200
    assert res.json()["averageRating"] == 3.0

    cookie_client.delete("/api/auth/session")
    assert cookie_client.post("/api/ratings", json={"value": 3, "courseId": course}).status_code == 401


def test_session_for_unknown_user(cookie_client, users):
    assert cookie_client.post("/api/auth/session", json={"user_id": 999}).status_code == 404
