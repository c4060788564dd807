from __future__ import annotations

import sys
from pathlib import Path
from collections.abc import Iterator
from typing import Any

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(PROJECT_ROOT))

from backend.app.core.security import create_access_token  # noqa: E402
from backend.app.db import init  # noqa: E402
from backend.app.db.mongo import MongoConnectionManager  # noqa: E402
from backend.app.dependencies import get_restaurant_repository, get_user_repository  # noqa: E402
from backend.app.main import app  # noqa: E402
from backend.app.services.geolocation import EARTH_RADIUS_KM, calculate_distance_km  # noqa: E402


class _DummyCollection:
    async def create_index(self, *_args: Any, **_kwargs: Any) -> None:
        return None


class _DummyDatabase:
    def __getitem__(self, _name: str) -> _DummyCollection:
        return _DummyCollection()


class _DummyAdmin:
    async def command(self, _name: str) -> dict[str, Any]:
        return {"ok": 1.0}


class _DummyMongoClient:
    def __init__(self) -> None:
        self._db = _DummyDatabase()
        self.admin = _DummyAdmin()

    def __getitem__(self, _name: str) -> _DummyDatabase:
        return self._db

    def close(self) -> None:
        return None


class InMemoryRestaurantRepository:
    """RestaurantRepository 와 같은 인터페이스의 메모리 저장소

    $geoWithin/$centerSphere 는 Haversine 거리 / 지구 반경으로 평가한다.
    """

    def __init__(self) -> None:
        self.docs: dict[ObjectId, dict[str, Any]] = {}
        self.calls: list[str] = []
        self.fail = False

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise PyMongoError("connection refused")

    def seed(self, name: str, latitude: float, longitude: float, ratings: list[float] | None = None) -> dict:
        doc = {
            "_id": ObjectId(),
            "name": name,
            "description": f"{name} description",
            "location": {"type": "Point", "coordinates": [longitude, latitude]},
            "ratings": list(ratings or []),
        }
        self.docs[doc["_id"]] = doc
        return doc

    @staticmethod
    def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
        sphere = query.get("location", {}).get("$geoWithin", {}).get("$centerSphere")
        if sphere is None:
            return True
        (center_lon, center_lat), angle = sphere
        lon, lat = doc["location"]["coordinates"]
        return calculate_distance_km(center_lat, center_lon, lat, lon) / EARTH_RADIUS_KM <= angle

    async def create(self, doc: dict[str, Any]) -> dict[str, Any]:
        self._record("create")
        doc = {**doc, "_id": ObjectId()}
        self.docs[doc["_id"]] = doc
        return {**doc}

    async def find(self, query: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        self._record("find")
        return [{**doc} for doc in self.docs.values() if self._matches(doc, query or {})]

    async def find_by_id(self, restaurant_id: str) -> dict[str, Any] | None:
        self._record("find_by_id")
        if not ObjectId.is_valid(restaurant_id):
            return None
        doc = self.docs.get(ObjectId(restaurant_id))
        return {**doc} if doc else None

    async def save(self, doc: dict[str, Any]) -> dict[str, Any]:
        self._record("save")
        self.docs[doc["_id"]] = {**doc}
        return doc

    async def remove(self, restaurant_id: ObjectId) -> None:
        self._record("remove")
        self.docs.pop(restaurant_id, None)


class InMemoryUserRepository:
    def __init__(self) -> None:
        self.docs: dict[ObjectId, dict[str, Any]] = {}

    def seed(self, email: str) -> dict:
        doc = {"_id": ObjectId(), "email": email, "name": "tester"}
        self.docs[doc["_id"]] = doc
        return doc

    async def find_by_id(self, user_id: str) -> dict[str, Any] | None:
        if not ObjectId.is_valid(user_id):
            return None
        return self.docs.get(ObjectId(user_id))


@pytest.fixture(autouse=True)
def stub_infrastructure(monkeypatch: pytest.MonkeyPatch) -> None:
    """MongoDB 클라이언트를 stub으로 대체하는 fixture"""
    dummy_mongo_client = _DummyMongoClient()

    async def _noop_ensure_indexes(_db: Any) -> None:
        return None

    async def _noop_close_mongo(cls: type[MongoConnectionManager]) -> None:
        return None

    monkeypatch.setattr(
        MongoConnectionManager,
        "get_client",
        classmethod(lambda cls: dummy_mongo_client),
    )
    monkeypatch.setattr(
        MongoConnectionManager,
        "close",
        classmethod(lambda cls: _noop_close_mongo(cls)),
    )
    monkeypatch.setattr(init, "ensure_indexes", _noop_ensure_indexes)


@pytest.fixture
def restaurant_store() -> Iterator[InMemoryRestaurantRepository]:
    store = InMemoryRestaurantRepository()
    app.dependency_overrides[get_restaurant_repository] = lambda: store
    yield store
    app.dependency_overrides.pop(get_restaurant_repository, None)


@pytest.fixture
def user_store() -> Iterator[InMemoryUserRepository]:
    store = InMemoryUserRepository()
    app.dependency_overrides[get_user_repository] = lambda: store
    yield store
    app.dependency_overrides.pop(get_user_repository, None)


@pytest.fixture
def auth_headers(user_store: InMemoryUserRepository) -> dict[str, str]:
    user = user_store.seed("owner@example.com")
    token = create_access_token(str(user["_id"]))
    return {"Authorization": f"Bearer {token}"}
