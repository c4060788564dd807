from fastapi import APIRouter

from .routes import health, restaurants

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(restaurants.router, prefix="/restaurants", tags=["restaurants"])
