from .restaurant import (
    Coordinates,
    MessageResponse,
    RadiusQuery,
    RangeQuery,
    RestaurantCreate,
    RestaurantOut,
    RestaurantSummary,
    RestaurantUpdate,
)
from .user import UserPublic

__all__ = [
    "Coordinates",
    "MessageResponse",
    "RadiusQuery",
    "RangeQuery",
    "RestaurantCreate",
    "RestaurantOut",
    "RestaurantSummary",
    "RestaurantUpdate",
    "UserPublic",
]
