"""
Restaurant Finder - Restaurant Route Handlers
==============================================

What:  CRUD endpoints under /api/v1/restaurants.
How:   FastAPI validates path ids and bodies, RestaurantService runs the
       query through the storage gateway, handlers wrap the result in the
       response envelope clients expect.

Route Inventory:
    GET    /api/v1/restaurants         list all         200
    GET    /api/v1/restaurants/{id}    get one          200 / 404
    POST   /api/v1/restaurants         create           201
    PUT    /api/v1/restaurants/{id}    full replace     200 / 404
    DELETE /api/v1/restaurants/{id}    hard delete      201 / 404

Malformed ids (non-integer, below 1 or beyond the int4 column) or bodies
→ 400; storage failures → 500.
"""

import logging

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_finder.database import get_db_session
from restaurant_finder.schemas.restaurant import (
    ErrorResponse,
    RestaurantCreatedData,
    RestaurantCreatedResponse,
    RestaurantDetailData,
    RestaurantDetailResponse,
    RestaurantIn,
    RestaurantListData,
    RestaurantListResponse,
    RestaurantUpdatedResponse,
    StatusResponse,
)
from restaurant_finder.services.restaurant_service import restaurant_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/restaurants", tags=["Restaurants"])

_ERRORS = {
    400: {"description": "Malformed id or body", "model": ErrorResponse},
    500: {"description": "Storage error", "model": ErrorResponse},
}
_NOT_FOUND = {404: {"description": "Restaurant not found", "model": ErrorResponse}}

# Upper bound of the int4 id column; larger ids are rejected as malformed
MAX_RESTAURANT_ID = 2_147_483_647


@router.get(
    "",
    response_model=RestaurantListResponse,
    responses=_ERRORS,
    summary="List all restaurants",
)
async def list_restaurants(
    db: AsyncSession = Depends(get_db_session),
) -> RestaurantListResponse:
    restaurants = await restaurant_service.list_restaurants(db)
    return RestaurantListResponse(data=RestaurantListData(restaurants=restaurants))


@router.get(
    "/{restaurant_id}",
    response_model=RestaurantDetailResponse,
    responses={**_ERRORS, **_NOT_FOUND},
    summary="Get a single restaurant",
)
async def get_restaurant(
    restaurant_id: int = Path(ge=1, le=MAX_RESTAURANT_ID),
    db: AsyncSession = Depends(get_db_session),
) -> RestaurantDetailResponse:
    restaurant = await restaurant_service.get_restaurant(db, restaurant_id)
    return RestaurantDetailResponse(data=RestaurantDetailData(restaurant=restaurant))


@router.post(
    "",
    status_code=201,
    response_model=RestaurantCreatedResponse,
    responses=_ERRORS,
    summary="Create a restaurant",
)
async def create_restaurant(
    payload: RestaurantIn,
    db: AsyncSession = Depends(get_db_session),
) -> RestaurantCreatedResponse:
    """
    Create a restaurant. image_url is normally the value returned by a
    prior POST /upload; it is stored as given.
    """
    restaurant = await restaurant_service.create_restaurant(db, payload)
    return RestaurantCreatedResponse(data=RestaurantCreatedData(restaurants=restaurant))


@router.put(
    "/{restaurant_id}",
    response_model=RestaurantUpdatedResponse,
    responses={**_ERRORS, **_NOT_FOUND},
    summary="Replace a restaurant",
)
async def update_restaurant(
    payload: RestaurantIn,
    restaurant_id: int = Path(ge=1, le=MAX_RESTAURANT_ID),
    db: AsyncSession = Depends(get_db_session),
) -> RestaurantUpdatedResponse:
    """Full replace: all four fields are written, none survive from before."""
    restaurant = await restaurant_service.update_restaurant(db, restaurant_id, payload)
    return RestaurantUpdatedResponse(data=restaurant)


@router.delete(
    "/{restaurant_id}",
    status_code=201,
    response_model=StatusResponse,
    responses={**_ERRORS, **_NOT_FOUND},
    summary="Delete a restaurant",
)
async def delete_restaurant(
    restaurant_id: int = Path(ge=1, le=MAX_RESTAURANT_ID),
    db: AsyncSession = Depends(get_db_session),
) -> StatusResponse:
    # 201 is what existing clients check for
    await restaurant_service.delete_restaurant(db, restaurant_id)
    return StatusResponse()
