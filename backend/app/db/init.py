from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..core.config import settings


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    # $geoWithin/$centerSphere 조회용
    await db[settings.restaurants_collection].create_index([("location", "2dsphere")])
