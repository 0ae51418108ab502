"""Tests for user registration and API-key sessions."""

from __future__ import annotations


def test_register_returns_api_key(client) -> None:
    response = client.post("/api/users", json={"email": "carol@example.com"})

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "carol@example.com"
    assert body["api_key"].startswith("dv_")


def test_duplicate_email_rejected(client, auth_headers) -> None:
    response = client.post("/api/users", json={"email": "alice@example.com"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Email already registered"}


def test_me(client, auth_headers) -> None:
    response = client.get("/api/users/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "alice@example.com"
    assert "api_key" not in response.json()


def test_me_with_unknown_key(client) -> None:
    response = client.get("/api/users/me", headers={"X-API-Key": "dv_unknown"})

    assert response.status_code == 401


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok", "app": "DataVault API"}


def test_email_uniqueness_ignores_case(client) -> None:
    assert client.post("/api/users", json={"email": "Dave@Example.com"}).status_code == 201

    response = client.post("/api/users", json={"email": "dave@example.com"})

    assert response.status_code == 400
