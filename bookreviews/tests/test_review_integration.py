from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from bookreviews.app import create_app
from bookreviews.domain.catalog.entities import Book
from bookreviews.infrastructure.container import Container
from bookreviews.shared.config import AppConfig, SecurityConfig


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def app(clock: FakeClock) -> Flask:
    config = AppConfig(
        SECRET_KEY="test-secret",
        SESSION_TTL_SECONDS=3600,
        security=SecurityConfig(ENABLE_RATE_LIMIT=False),
    )
    container = Container(
        config,
        books=[
            Book(isbn="001", author="Chinua Achebe", title="Things Fall Apart"),
            Book(isbn="002", author="Jane Austen", title="Pride and Prejudice"),
        ],
        clock=clock,
    )
    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def _login(client: FlaskClient, username: str = "alice", password: str = "pw1") -> str:
    assert client.post("/register", json={"username": username, "password": password}).status_code == 201
    response = client.post("/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.get_json()["token"]


def test_register_login_review_flow(client: FlaskClient) -> None:
    _login(client)

    put = client.put("/auth/review/001?review=Great")
    assert put.status_code == 200
    assert put.get_json() == {"ok": True, "isbn": "001", "username": "alice"}
    assert client.get("/review/001").get_json() == {"alice": "Great"}

    delete = client.delete("/auth/review/001")
    assert delete.status_code == 200
    assert client.get("/review/001").get_json() == {}


def test_register_twice_conflicts(client: FlaskClient) -> None:
    assert client.post("/register", json={"username": "alice", "password": "pw1"}).status_code == 201
    again = client.post("/register", json={"username": "alice", "password": "other"})

    assert again.status_code == 409
    assert client.post("/login", json={"username": "alice", "password": "pw1"}).status_code == 200
    assert client.post("/login", json={"username": "alice", "password": "other"}).status_code == 401


def test_review_unknown_isbn_with_session(client: FlaskClient) -> None:
    _login(client)

    response = client.put("/auth/review/999?review=X")

    assert response.status_code == 404
    assert response.get_json()["error"] == "book_not_found"


def test_review_without_session_is_unauthorized(client: FlaskClient) -> None:
    assert client.put("/auth/review/999?review=X").status_code == 401
    assert client.put("/auth/review/001?review=X").status_code == 401
    assert client.put("/auth/review/001").status_code == 401
    assert client.delete("/auth/review/001").status_code == 401
    assert client.get("/review/001").get_json() == {}


def test_review_without_text_is_rejected(client: FlaskClient) -> None:
    _login(client)

    response = client.put("/auth/review/001")

    assert response.status_code == 400
    assert response.get_json()["context"]["fields"] == ["review"]


def test_delete_missing_review_is_not_found(client: FlaskClient) -> None:
    _login(client)

    first = client.delete("/auth/review/001")
    second = client.delete("/auth/review/001")

    assert first.status_code == second.status_code == 404
    assert first.get_json()["error"] == "review_not_found"
    assert client.delete("/auth/review/999").get_json()["error"] == "book_not_found"


def test_reviews_are_kept_per_user(app: Flask) -> None:
    alice = app.test_client()
    bob = app.test_client()
    _login(alice, "alice", "pw1")
    _login(bob, "bob", "pw2")

    alice.put("/auth/review/001?review=Great")
    bob.put("/auth/review/001?review=Meh")
    alice.put("/auth/review/001?review=Greater")
    bob.delete("/auth/review/001")

    assert alice.get("/review/001").get_json() == {"alice": "Greater"}


def test_bearer_token_is_accepted(app: Flask) -> None:
    token = _login(app.test_client())
    other = app.test_client()

    response = other.put(
        "/auth/review/002?review=Witty", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 200
    assert other.get("/review/002").get_json() == {"alice": "Witty"}


def test_expired_session_is_unauthorized(client: FlaskClient, clock: FakeClock) -> None:
    _login(client)
    clock.now += timedelta(seconds=3600)

    response = client.put("/auth/review/001?review=Late")

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthorized"


def test_forged_cookie_is_unauthorized(client: FlaskClient) -> None:
    client.set_cookie("session_token", "forged.value")

    assert client.put("/auth/review/001?review=X").status_code == 401
