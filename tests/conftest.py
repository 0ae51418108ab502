"""Shared pytest fixtures for the DataVault API test suite."""

from __future__ import annotations

import os

# Settings are read at import time; point the app at an in-memory database
# before anything from datavault is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

from collections.abc import Iterator
from datetime import datetime
from typing import Any
from uuid import UUID

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import update

from datavault.api.deps import get_link_preview_service
from datavault.config import Settings
from datavault.database import get_session_factory
from datavault.main import app
from datavault.services.link_preview import LinkPreviewService


class FakeWeb:
    """Serves canned pages to an ``httpx.MockTransport``; unknown URLs are unreachable."""

    def __init__(self) -> None:
        self._pages: dict[str, tuple[int, dict[str, str], Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        url: str,
        content: Any,
        *,
        status_code: int = 200,
        content_type: str = "text/html; charset=utf-8",
    ) -> None:
        self._pages[str(httpx.URL(url))] = (
            status_code,
            {"content-type": content_type},
            content,
        )

    def add_html(self, url: str, markup: str, **kwargs: Any) -> None:
        self.add(url, markup.encode("utf-8"), **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        page = self._pages.get(str(request.url))
        if page is None:
            raise httpx.ConnectError("Name or service not known", request=request)
        status_code, headers, content = page
        if callable(content):
            content = content()
        return httpx.Response(status_code, headers=headers, content=content)


@pytest.fixture
def settings() -> Settings:
    return Settings(preview_timeout_seconds=1.0)


@pytest.fixture
def fake_web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def preview_service(fake_web: FakeWeb, settings: Settings) -> LinkPreviewService:
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_web.handler))
    return LinkPreviewService(client, settings)


@pytest.fixture
def client(preview_service: LinkPreviewService) -> Iterator[TestClient]:
    app.dependency_overrides[get_link_preview_service] = lambda: preview_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _register(client: TestClient, email: str) -> dict[str, str]:
    response = client.post("/api/users", json={"email": email, "full_name": "Test"})
    assert response.status_code == 201, response.text
    return {"X-API-Key": response.json()["api_key"]}


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    return _register(client, "alice@example.com")


@pytest.fixture
def other_auth_headers(client: TestClient) -> dict[str, str]:
    return _register(client, "bob@example.com")


@pytest.fixture
def set_created_at(client: TestClient):
    """Rewrite a record's creation time; SQLite timestamps only have second resolution."""

    def _set(model: type, record_id: str, when: datetime) -> None:
        async def _update() -> None:
            async with get_session_factory()() as session:
                await session.execute(
                    update(model)
                    .where(model.id == UUID(record_id))
                    .values(created_at=when)
                )
                await session.commit()

        client.portal.call(_update)

    return _set
