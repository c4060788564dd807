from __future__ import annotations

import logging
from typing import Any

from ..core.errors import RestaurantNotFound, store_errors
from ..db.restaurants import RestaurantRepository
from ..schemas.restaurant import (
    RadiusQuery,
    RangeQuery,
    RestaurantCreate,
    RestaurantOut,
    RestaurantSummary,
    RestaurantUpdate,
    coordinates_to_location,
    location_to_coordinates,
)
from .geo_filters import radius_filter, range_filter, within_range

logger = logging.getLogger(__name__)


def summarize(doc: dict[str, Any]) -> RestaurantSummary:
    ratings = doc.get("ratings") or []
    average = sum(ratings) / len(ratings) if ratings else 0
    return RestaurantSummary(
        name=doc["name"],
        description=doc["description"],
        location=location_to_coordinates(doc["location"]),
        average_rating=average,
        number_of_ratings=len(ratings),
    )


def apply_update(doc: dict[str, Any], payload: RestaurantUpdate) -> dict[str, Any]:
    """부분 수정: 값이 있는 필드만 반영하고 위도/경도는 둘 다 있을 때만 바꾼다"""
    if payload.name:
        doc["name"] = payload.name
    if payload.description:
        doc["description"] = payload.description
    if payload.latitude is not None and payload.longitude is not None:
        doc["location"] = coordinates_to_location(payload.latitude, payload.longitude)
    if payload.ratings is not None:
        doc["ratings"] = list(payload.ratings)
    return doc


class RestaurantService:
    def __init__(self, repository: RestaurantRepository) -> None:
        self.repository = repository

    async def create(self, payload: RestaurantCreate) -> RestaurantOut:
        doc = {
            "name": payload.name,
            "description": payload.description,
            "location": coordinates_to_location(payload.latitude, payload.longitude),
            "ratings": list(payload.ratings),
        }
        async with store_errors("create"):
            created = await self.repository.create(doc)
            restaurant = RestaurantOut.from_mongo(created)
        logger.info("레스토랑 생성: %s", restaurant.id)
        return restaurant

    async def list_all(self) -> list[RestaurantOut]:
        async with store_errors("list"):
            docs = await self.repository.find()
            return [RestaurantOut.from_mongo(doc) for doc in docs]

    async def _load(self, restaurant_id: str) -> dict[str, Any]:
        async with store_errors("find_by_id"):
            doc = await self.repository.find_by_id(restaurant_id)
        if doc is None:
            raise RestaurantNotFound()
        return doc

    async def get(self, restaurant_id: str) -> RestaurantOut:
        doc = await self._load(restaurant_id)
        async with store_errors("get"):
            return RestaurantOut.from_mongo(doc)

    async def update(self, restaurant_id: str, payload: RestaurantUpdate) -> RestaurantOut:
        doc = apply_update(await self._load(restaurant_id), payload)
        async with store_errors("save"):
            saved = await self.repository.save(doc)
            return RestaurantOut.from_mongo(saved)

    async def delete(self, restaurant_id: str) -> dict[str, str]:
        doc = await self._load(restaurant_id)
        async with store_errors("remove"):
            await self.repository.remove(doc["_id"])
        logger.info("레스토랑 삭제: %s", restaurant_id)
        return {"message": "Restaurant removed"}

    async def find_within_radius(self, query: RadiusQuery) -> list[RestaurantSummary]:
        async with store_errors("radius"):
            docs = await self.repository.find(radius_filter(query.latitude, query.longitude, query.radius))
            return [summarize(doc) for doc in docs]

    async def find_within_range(self, query: RangeQuery) -> list[RestaurantSummary]:
        async with store_errors("range"):
            candidates = await self.repository.find(
                range_filter(query.latitude, query.longitude, query.maximum_distance)
            )
            return [
                summarize(doc)
                for doc in candidates
                if within_range(doc, query.latitude, query.longitude, query.minimum_distance, query.maximum_distance)
            ]
