from __future__ import annotations

from typing import Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection


class RestaurantRepository:
    """restaurants 컬렉션에 대한 create/find/find-by-id/save/remove"""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def create(self, doc: dict[str, Any]) -> dict[str, Any]:
        doc = {**doc}
        result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    async def find(self, query: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        cursor = self.collection.find(query or {})
        items: list[dict[str, Any]] = []
        async for doc in cursor:
            items.append(doc)
        return items

    async def find_by_id(self, restaurant_id: str) -> dict[str, Any] | None:
        # ObjectId 형식이 아니면 존재하지 않는 문서로 취급
        if not ObjectId.is_valid(restaurant_id):
            return None
        return await self.collection.find_one({"_id": ObjectId(restaurant_id)})

    async def save(self, doc: dict[str, Any]) -> dict[str, Any]:
        await self.collection.replace_one({"_id": doc["_id"]}, doc)
        return doc

    async def remove(self, restaurant_id: ObjectId) -> None:
        await self.collection.delete_one({"_id": restaurant_id})
