"""
반경/범위 조회용 MongoDB 지오스패셜 필터

$centerSphere 는 [[경도, 위도], 각반경(라디안)] 형태이며,
각반경은 거리(km) / 지구 반경(km) 으로 구한다.
"""

from __future__ import annotations

from typing import Any

from .geolocation import EARTH_RADIUS_KM, calculate_distance_km


def center_sphere(latitude: float, longitude: float, radius_km: float) -> dict[str, Any]:
    return {
        "location": {
            "$geoWithin": {
                "$centerSphere": [[longitude, latitude], radius_km / EARTH_RADIUS_KM],
            }
        }
    }


def radius_filter(latitude: float, longitude: float, radius_km: float) -> dict[str, Any]:
    return center_sphere(latitude, longitude, radius_km)


def range_filter(latitude: float, longitude: float, maximum_distance_m: float) -> dict[str, Any]:
    """최대 거리(m)를 km로 바꿔 1차 후보를 거르는 필터"""
    return center_sphere(latitude, longitude, maximum_distance_m / 1000)


def distance_from(doc: dict[str, Any], latitude: float, longitude: float) -> float:
    longitude_2, latitude_2 = doc["location"]["coordinates"][:2]
    return calculate_distance_km(latitude, longitude, latitude_2, longitude_2)


def within_range(
    doc: dict[str, Any],
    latitude: float,
    longitude: float,
    minimum_distance_m: float,
    maximum_distance_m: float,
) -> bool:
    distance = distance_from(doc, latitude, longitude)
    return minimum_distance_m / 1000 <= distance <= maximum_distance_m / 1000
