"""Tests for POST /api/link-preview."""

from __future__ import annotations

from unittest.mock import AsyncMock

from datavault.api.deps import get_link_preview_service
from datavault.main import app

PAGE_URL = "https://example.com/post"
PAGE_HTML = """
<head>
  <meta property="og:title" content="A post">
  <meta property="og:image" content="//cdn.example.com/x.png">
</head>
"""


def test_returns_preview(client, fake_web) -> None:
    fake_web.add_html(PAGE_URL, PAGE_HTML)

    response = client.post("/api/link-preview", json={"url": "example.com/post"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {
            "title": "A post",
            "image": "https://cdn.example.com/x.png",
            "domain": "example.com",
            "url": PAGE_URL,
        },
    }


def test_unreachable_host_is_a_successful_partial_result(client) -> None:
    response = client.post("/api/link-preview", json={"url": "https://www.nowhere.invalid/x"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] == {
        "domain": "nowhere.invalid",
        "url": "https://www.nowhere.invalid/x",
    }


def test_pdf_is_domain_only(client, fake_web) -> None:
    fake_web.add_html(PAGE_URL, PAGE_HTML, content_type="application/pdf")

    response = client.post("/api/link-preview", json={"url": PAGE_URL})

    assert response.status_code == 200
    assert response.json()["data"] == {"domain": "example.com", "url": PAGE_URL}


def test_missing_url_is_client_error(client) -> None:
    for payload in ({}, {"url": ""}, {"url": "   "}, {"url": None}, {"url": 42}, []):
        response = client.post("/api/link-preview", json=payload)

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "URL is required"}


def test_malformed_body_is_client_error(client) -> None:
    response = client.post(
        "/api/link-preview",
        content=b"not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400
    assert "data" not in response.json()


def test_internal_failure_is_server_error(client) -> None:
    broken = AsyncMock()
    broken.fetch = AsyncMock(side_effect=RuntimeError("stream exploded"))
    app.dependency_overrides[get_link_preview_service] = lambda: broken

    response = client.post("/api/link-preview", json={"url": PAGE_URL})

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "stream exploded"}


def test_internal_failure_without_message(client) -> None:
    broken = AsyncMock()
    broken.fetch = AsyncMock(side_effect=RuntimeError())
    app.dependency_overrides[get_link_preview_service] = lambda: broken

    response = client.post("/api/link-preview", json={"url": PAGE_URL})

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to fetch preview"



def test_unencodable_host_is_a_successful_partial_result(client) -> None:
    response = client.post("/api/link-preview", json={"url": "xn--.com"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": {"domain": "xn--.com", "url": "https://xn--.com"},
    }
