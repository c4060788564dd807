from fastapi import APIRouter, Depends, Path, status

from ...core.auth import get_current_user
from ...dependencies import get_restaurant_service
from ...schemas import (
    MessageResponse,
    RadiusQuery,
    RangeQuery,
    RestaurantCreate,
    RestaurantOut,
    RestaurantSummary,
    RestaurantUpdate,
    UserPublic,
)
from ...services.restaurants import RestaurantService

router = APIRouter()


@router.post("", response_model=RestaurantOut, status_code=status.HTTP_201_CREATED, summary="레스토랑 등록")
async def create_restaurant(
    payload: RestaurantCreate,
    current_user: UserPublic = Depends(get_current_user),
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantOut:
    return await service.create(payload)


@router.get("", response_model=list[RestaurantOut], summary="전체 레스토랑 조회")
async def list_restaurants(
    service: RestaurantService = Depends(get_restaurant_service),
) -> list[RestaurantOut]:
    return await service.list_all()


@router.post("/radius", response_model=list[RestaurantSummary], summary="반경 내 레스토랑 조회")
async def restaurants_within_radius(
    payload: RadiusQuery,
    service: RestaurantService = Depends(get_restaurant_service),
) -> list[RestaurantSummary]:
    return await service.find_within_radius(payload)


@router.post("/range", response_model=list[RestaurantSummary], summary="거리 범위 내 레스토랑 조회")
async def restaurants_within_range(
    payload: RangeQuery,
    service: RestaurantService = Depends(get_restaurant_service),
) -> list[RestaurantSummary]:
    return await service.find_within_range(payload)


@router.get("/{restaurant_id}", response_model=RestaurantOut, summary="레스토랑 단건 조회")
async def get_restaurant(
    restaurant_id: str = Path(..., description="레스토랑 ID"),
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantOut:
    return await service.get(restaurant_id)


@router.put("/{restaurant_id}", response_model=RestaurantOut, summary="레스토랑 수정")
async def update_restaurant(
    payload: RestaurantUpdate,
    restaurant_id: str = Path(..., description="레스토랑 ID"),
    current_user: UserPublic = Depends(get_current_user),
    service: RestaurantService = Depends(get_restaurant_service),
) -> RestaurantOut:
    return await service.update(restaurant_id, payload)


@router.delete("/{restaurant_id}", response_model=MessageResponse, summary="레스토랑 삭제")
async def delete_restaurant(
    restaurant_id: str = Path(..., description="레스토랑 ID"),
    current_user: UserPublic = Depends(get_current_user),
    service: RestaurantService = Depends(get_restaurant_service),
) -> dict:
    return await service.delete(restaurant_id)
