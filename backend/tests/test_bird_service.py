"""
Aviary Backend — Bird Service Unit Tests
==========================================

What:  Tests for BirdService (list, count).
How:   Mock DB sessions for result handling and error wrapping; one real
       SQLite session to check ordering against the database.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.exc import OperationalError

from app.exceptions import DatabaseError
from app.models.bird import Bird
from app.services.bird_service import BirdService


class TestBirdServiceList:

    def setup_method(self):
        self.service = BirdService()

    @pytest.mark.asyncio
    async def test_list_birds_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_birds(mock_db_session)

        assert result == []
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_birds_returns_rows(self, mock_db_session, make_bird):
        birds = [make_bird(1), make_bird(2), make_bird(3)]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = birds
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_birds(mock_db_session)

        assert [b.id for b in result] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_list_birds_wraps_database_errors(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("no such table: birds"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_birds(mock_db_session)

        assert exc_info.value.context == {"error_type": "OperationalError"}
        assert "no such table" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_list_birds_orders_by_id(self, db_session):
        """Rows come back ascending by id even when inserted out of order."""
        db_session.add_all([
            Bird(id=3, name="Common Starling", species="Sturnus Vulgaris"),
            Bird(id=1, name="Black-Capped Chickadee", species="Poecile Atricapillus"),
            Bird(id=2, name="Grackle", species="Quiscalus Quiscula"),
        ])
        await db_session.flush()

        result = await self.service.list_birds(db_session)

        assert [b.id for b in result] == [1, 2, 3]
        assert len({b.id for b in result}) == len(result)


class TestBirdServiceCount:

    def setup_method(self):
        self.service = BirdService()

    @pytest.mark.asyncio
    async def test_count_birds(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar.return_value = 4
        mock_db_session.execute.return_value = mock_result

        assert await self.service.count_birds(mock_db_session) == 4

    @pytest.mark.asyncio
    async def test_count_birds_none_is_zero(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar.return_value = None
        mock_db_session.execute.return_value = mock_result

        assert await self.service.count_birds(mock_db_session) == 0

    @pytest.mark.asyncio
    async def test_count_birds_wraps_database_errors(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("database is locked"))
        )

        with pytest.raises(DatabaseError):
            await self.service.count_birds(mock_db_session)
