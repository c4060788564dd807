from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Coordinates(BaseModel):
    latitude: float = Field(..., ge=-90, le=90, description="위도")
    longitude: float = Field(..., ge=-180, le=180, description="경도")


def location_to_coordinates(location: dict[str, Any]) -> Coordinates:
    """GeoJSON Point([경도, 위도])를 이름 있는 좌표로 변환"""
    longitude, latitude = location["coordinates"][:2]
    return Coordinates(latitude=latitude, longitude=longitude)


def coordinates_to_location(latitude: float, longitude: float) -> dict[str, Any]:
    return {"type": "Point", "coordinates": [longitude, latitude]}


class RestaurantCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    ratings: list[float] = Field(default_factory=list)


class RestaurantUpdate(BaseModel):
    name: str | None = None
    description: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    ratings: list[float] | None = None


class RestaurantOut(BaseModel):
    id: str
    name: str
    description: str
    location: Coordinates
    ratings: list[float] = Field(default_factory=list)

    @classmethod
    def from_mongo(cls, doc: dict[str, Any]) -> "RestaurantOut":
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            description=doc["description"],
            location=location_to_coordinates(doc["location"]),
            ratings=list(doc.get("ratings") or []),
        )


class RadiusQuery(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    radius: float = Field(..., ge=0, allow_inf_nan=False, description="반경 (km)")


class RangeQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    minimum_distance: float = Field(..., ge=0, alias="minimumDistance", allow_inf_nan=False, description="최소 거리 (m)")
    maximum_distance: float = Field(..., ge=0, alias="maximumDistance", allow_inf_nan=False, description="최대 거리 (m)")

    @model_validator(mode="after")
    def check_bounds(self) -> "RangeQuery":
        if self.minimum_distance > self.maximum_distance:
            raise ValueError("minimumDistance must not exceed maximumDistance")
        return self


class RestaurantSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    location: Coordinates
    average_rating: float = Field(..., alias="averageRating")
    number_of_ratings: int = Field(..., alias="numberOfRatings")


class MessageResponse(BaseModel):
    message: str
