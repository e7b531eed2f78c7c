"""
Restaurant Finder - Restaurant Service & Storage Gateway Unit Tests
====================================================================

What:  Tests for RestaurantService operations and the StorageGateway
       failure contract.
How:   Uses a mock AsyncSession (no real database).
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from restaurant_finder.exceptions import DatabaseError, NotFoundError
from restaurant_finder.schemas.restaurant import RestaurantIn
from restaurant_finder.services.restaurant_service import RestaurantService
from restaurant_finder.services.storage_gateway import StorageGateway

ROW = {
    "id": 7,
    "rname": "Cafe X",
    "location": "Downtown",
    "price_range": "$$",
    "image_url": None,
}


class TestStorageGateway:

    def setup_method(self):
        self.gateway = StorageGateway()

    @pytest.mark.asyncio
    async def test_returns_rows_as_dicts(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([ROW])

        rows = await self.gateway.query(
            mock_db_session, "SELECT * FROM restaurants WHERE id = :id", {"id": 7}
        )

        assert rows == [ROW]
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_commit_on_write(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([ROW])

        await self.gateway.query(mock_db_session, "DELETE FROM restaurants", commit=True)

        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_statement_without_rows(self, mock_db_session, make_result):
        result = make_result([])
        result.returns_rows = False
        mock_db_session.execute.return_value = result

        assert await self.gateway.query(mock_db_session, "UPDATE restaurants SET rname = 'a'") == []

    @pytest.mark.asyncio
    async def test_driver_error_becomes_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("gone"))

        with pytest.raises(DatabaseError) as exc_info:
            await self.gateway.query(mock_db_session, "SELECT 1", operation="ping")

        assert exc_info.value.context == {"operation": "ping", "error_type": "OperationalError"}

    @pytest.mark.asyncio
    async def test_commit_failure_becomes_database_error(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([ROW])
        mock_db_session.commit.side_effect = IntegrityError("INSERT", {}, Exception("dup"))

        with pytest.raises(DatabaseError):
            await self.gateway.query(mock_db_session, "INSERT ...", commit=True)

    @pytest.mark.asyncio
    async def test_query_one_empty(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([])
        assert await self.gateway.query_one(mock_db_session, "SELECT 1") is None


class TestRestaurantService:

    def setup_method(self):
        self.service = RestaurantService()
        self.payload = RestaurantIn(rname="Cafe X", location="Downtown", price_range="$$")

    @pytest.mark.asyncio
    async def test_list(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([ROW, {**ROW, "id": 8}])

        result = await self.service.list_restaurants(mock_db_session)

        assert [r.id for r in result] == [7, 8]

    @pytest.mark.asyncio
    async def test_get_found(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([ROW])

        result = await self.service.get_restaurant(mock_db_session, 7)

        assert result.rname == "Cafe X"

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([])

        with pytest.raises(NotFoundError):
            await self.service.get_restaurant(mock_db_session, 999999)

    @pytest.mark.asyncio
    async def test_create_commits(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([ROW])

        result = await self.service.create_restaurant(mock_db_session, self.payload)

        assert result.id == 7
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([])

        with pytest.raises(NotFoundError):
            await self.service.update_restaurant(mock_db_session, 999999, self.payload)

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, mock_db_session, make_result):
        mock_db_session.execute.return_value = make_result([])

        with pytest.raises(NotFoundError):
            await self.service.delete_restaurant(mock_db_session, 999999)

    @pytest.mark.asyncio
    async def test_storage_error_propagates(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(DatabaseError):
            await self.service.get_restaurant(mock_db_session, 1)
