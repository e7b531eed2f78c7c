"""
Restaurant Finder - Restaurant Service
=======================================

What:  The five restaurant operations (list, get, create, update, delete).
How:   Builds Core statements against the restaurants table, runs them
       through the StorageGateway and converts rows into response models.
Who:   Called by the /api/v1/restaurants route handlers.

Missing ids:
    get, update and delete raise NotFoundError (404) when no row matches.
    Storage failures arrive as DatabaseError from the gateway (500).
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_finder.exceptions import NotFoundError
from restaurant_finder.models.restaurant import restaurants_table
from restaurant_finder.schemas.restaurant import RestaurantIn, RestaurantOut
from restaurant_finder.services.storage_gateway import storage_gateway

logger = logging.getLogger(__name__)


class RestaurantService:
    """
    Stateless business layer over the restaurants table.

    Each call receives the request's session; no state is kept between calls.
    """

    async def list_restaurants(self, db: AsyncSession) -> List[RestaurantOut]:
        stmt = select(restaurants_table).order_by(restaurants_table.c.id)
        rows = await storage_gateway.query(db, stmt, operation="list_restaurants")
        return [RestaurantOut.model_validate(row) for row in rows]

    async def get_restaurant(self, db: AsyncSession, restaurant_id: int) -> RestaurantOut:
        stmt = select(restaurants_table).where(restaurants_table.c.id == restaurant_id)
        row = await storage_gateway.query_one(db, stmt, operation="get_restaurant")
        if row is None:
            raise NotFoundError(resource="restaurant", resource_id=str(restaurant_id))
        return RestaurantOut.model_validate(row)

    async def create_restaurant(self, db: AsyncSession, payload: RestaurantIn) -> RestaurantOut:
        """Insert a new row; the database assigns the id."""
        stmt = (
            insert(restaurants_table)
            .values(**payload.model_dump())
            .returning(*restaurants_table.c)
        )
        row = await storage_gateway.query_one(
            db, stmt, operation="create_restaurant", commit=True
        )
        restaurant = RestaurantOut.model_validate(row)
        logger.info("Restaurant created: id=%d", restaurant.id)
        return restaurant

    async def update_restaurant(
        self, db: AsyncSession, restaurant_id: int, payload: RestaurantIn
    ) -> RestaurantOut:
        """
        Replace all four mutable columns of an existing row.

        Raises:
            NotFoundError: No restaurant has this id
        """
        stmt = (
            update(restaurants_table)
            .where(restaurants_table.c.id == restaurant_id)
            .values(**payload.model_dump())
            .returning(*restaurants_table.c)
        )
        row = await storage_gateway.query_one(
            db, stmt, operation="update_restaurant", commit=True
        )
        if row is None:
            raise NotFoundError(resource="restaurant", resource_id=str(restaurant_id))
        logger.info("Restaurant updated: id=%d", restaurant_id)
        return RestaurantOut.model_validate(row)

    async def delete_restaurant(self, db: AsyncSession, restaurant_id: int) -> None:
        """
        Hard-delete a row. Its uploaded image, if any, stays on disk.

        Raises:
            NotFoundError: No restaurant has this id
        """
        stmt = (
            delete(restaurants_table)
            .where(restaurants_table.c.id == restaurant_id)
            .returning(restaurants_table.c.id)
        )
        row = await storage_gateway.query_one(
            db, stmt, operation="delete_restaurant", commit=True
        )
        if row is None:
            raise NotFoundError(resource="restaurant", resource_id=str(restaurant_id))
        logger.info("Restaurant deleted: id=%d", restaurant_id)


restaurant_service = RestaurantService()
