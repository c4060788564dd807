from __future__ import annotations

import asyncio

import httpx
from asgi_lifespan import LifespanManager
import pytest
from pymongo.errors import ServerSelectionTimeoutError

from backend.app.db.mongo import MongoConnectionManager
from backend.app.main import app


async def _request(method: str, url: str) -> httpx.Response:
    async with LifespanManager(app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver") as client:
            response = await client.request(method, url)
            await response.aread()
            return response


@pytest.mark.smoke
def test_healthcheck_returns_ok() -> None:
    response = asyncio.run(_request("GET", "/api/health"))
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.smoke
def test_root_returns_welcome_message() -> None:
    response = asyncio.run(_request("GET", "/"))
    assert response.status_code == 200
    assert response.json()["message"].startswith("Welcome to the")


@pytest.mark.smoke
def test_openapi_lists_restaurant_paths() -> None:
    paths = app.openapi()["paths"]
    for path in (
        "/api/restaurants",
        "/api/restaurants/{restaurant_id}",
        "/api/restaurants/radius",
        "/api/restaurants/range",
    ):
        assert path in paths


@pytest.mark.smoke
def test_database_healthcheck_pings_mongo() -> None:
    response = asyncio.run(_request("GET", "/api/health/db"))
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.smoke
def test_database_healthcheck_reports_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    async def _failing_ping(cls: type[MongoConnectionManager]) -> bool:
        raise ServerSelectionTimeoutError("no servers")

    monkeypatch.setattr(MongoConnectionManager, "ping", classmethod(_failing_ping))
    response = asyncio.run(_request("GET", "/api/health/db"))
    assert response.status_code == 503
    assert response.json() == {"detail": "Database unavailable"}
