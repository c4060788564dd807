from collections.abc import AsyncGenerator

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from .core.config import settings
from .db.mongo import MongoConnectionManager
from .db.restaurants import RestaurantRepository
from .db.users import UserRepository
from .services.restaurants import RestaurantService


async def get_mongo_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    db = MongoConnectionManager.get_database()
    yield db


def get_restaurant_repository(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> RestaurantRepository:
    return RestaurantRepository(db[settings.restaurants_collection])


def get_user_repository(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> UserRepository:
    return UserRepository(db[settings.users_collection])


def get_restaurant_service(
    repository: RestaurantRepository = Depends(get_restaurant_repository),
) -> RestaurantService:
    return RestaurantService(repository)
