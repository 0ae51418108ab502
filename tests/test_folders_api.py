"""Tests for the owner-scoped folder endpoints."""

from __future__ import annotations

from datetime import datetime

from datavault.models import Folder


def _create_folder(client, headers, **payload):
    payload.setdefault("name", "Recipes")
    response = client.post("/api/folders", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_uses_defaults(client, auth_headers) -> None:
    folder = _create_folder(client, auth_headers)

    assert folder["color"] == "#6366f1"
    assert folder["icon"] == "folder"
    assert folder["item_count"] == 0


def test_create_rejects_bad_color(client, auth_headers) -> None:
    response = client.post(
        "/api/folders", json={"name": "x", "color": "red"}, headers=auth_headers
    )
    assert response.status_code == 422


def test_list_counts_items(client, auth_headers) -> None:
    folder = _create_folder(client, auth_headers)
    for n in range(2):
        client.post(
            "/api/items",
            json={
                "title": f"Note {n}",
                "type": "note",
                "content": "text",
                "folder_id": folder["id"],
            },
            headers=auth_headers,
        )

    response = client.get("/api/folders", headers=auth_headers)

    assert response.status_code == 200
    assert [(f["id"], f["item_count"]) for f in response.json()] == [(folder["id"], 2)]


def test_rename(client, auth_headers) -> None:
    folder = _create_folder(client, auth_headers)

    response = client.patch(
        f"/api/folders/{folder['id']}",
        json={"name": "Cooking", "color": "#22c55e"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["name"] == "Cooking"
    assert response.json()["color"] == "#22c55e"
    assert response.json()["icon"] == "folder"


def test_delete_moves_items_to_root(client, auth_headers) -> None:
    folder = _create_folder(client, auth_headers)
    item = client.post(
        "/api/items",
        json={
            "title": "Pasta",
            "type": "note",
            "content": "boil water",
            "folder_id": folder["id"],
        },
        headers=auth_headers,
    ).json()

    response = client.delete(f"/api/folders/{folder['id']}", headers=auth_headers)

    assert response.status_code == 204
    assert client.get("/api/folders", headers=auth_headers).json() == []
    kept = client.get(f"/api/items/{item['id']}", headers=auth_headers)
    assert kept.status_code == 200
    assert kept.json()["folder_id"] is None


def test_other_users_folder_is_not_found(client, auth_headers, other_auth_headers) -> None:
    folder = _create_folder(client, auth_headers)

    response = client.patch(
        f"/api/folders/{folder['id']}", json={"name": "Mine now"}, headers=other_auth_headers
    )
    assert response.status_code == 404
    assert (
        client.delete(f"/api/folders/{folder['id']}", headers=other_auth_headers).status_code
        == 404
    )


def test_list_is_newest_first(client, auth_headers, set_created_at) -> None:
    older = _create_folder(client, auth_headers, name="Older")
    newer = _create_folder(client, auth_headers, name="Newer")
    set_created_at(Folder, older["id"], datetime(2024, 1, 1, 9, 0, 0))
    set_created_at(Folder, newer["id"], datetime(2024, 1, 1, 10, 0, 0))

    response = client.get("/api/folders", headers=auth_headers)

    assert [folder["name"] for folder in response.json()] == ["Newer", "Older"]
