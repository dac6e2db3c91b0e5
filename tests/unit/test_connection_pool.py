"""
ConnectionPool lifecycle and error wrapping, with asyncpg.create_pool patched out
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from config.settings import DatabaseSettings
from database.connection import ConnectionPool, DatabaseConnectionError

SETTINGS = DatabaseSettings(host="db", port=5432, user="app", password="secret", database="empresa")


def make_driver_pool(conn=None):
    driver_pool = MagicMock()
    driver_pool.acquire = AsyncMock(return_value=conn if conn is not None else MagicMock())
    driver_pool.release = AsyncMock()
    driver_pool.close = AsyncMock()
    return driver_pool


class TestConnectionPool:

    @pytest.mark.asyncio
    async def test_open_passes_settings_to_driver(self):
        driver_pool = make_driver_pool()
        with patch("database.connection.asyncpg.create_pool", AsyncMock(return_value=driver_pool)) as create_pool:
            pool = ConnectionPool(SETTINGS)
            await pool.open()

        create_pool.assert_awaited_once_with(
            host="db", port=5432, user="app", password="secret", database="empresa"
        )
        assert pool.is_open

    @pytest.mark.asyncio
    async def test_unreachable_store_raises_connection_error(self):
        with patch("database.connection.asyncpg.create_pool", AsyncMock(side_effect=ConnectionRefusedError("refused"))):
            pool = ConnectionPool(SETTINGS)
            with pytest.raises(DatabaseConnectionError):
                await pool.acquire()

        assert not pool.is_open

    @pytest.mark.asyncio
    async def test_acquire_opens_lazily_and_release_returns_connection(self):
        conn = MagicMock()
        driver_pool = make_driver_pool(conn)
        with patch("database.connection.asyncpg.create_pool", AsyncMock(return_value=driver_pool)):
            pool = ConnectionPool(SETTINGS)
            handle = await pool.acquire()
            await pool.release(handle)

        assert handle is conn
        driver_pool.release.assert_awaited_once_with(conn)

    @pytest.mark.asyncio
    async def test_connection_context_releases_on_error(self):
        conn = MagicMock()
        driver_pool = make_driver_pool(conn)
        with patch("database.connection.asyncpg.create_pool", AsyncMock(return_value=driver_pool)):
            pool = ConnectionPool(SETTINGS)
            with pytest.raises(RuntimeError):
                async with pool.connection():
                    raise RuntimeError("boom")

        driver_pool.release.assert_awaited_once_with(conn)

    @pytest.mark.asyncio
    async def test_check_runs_trivial_query(self):
        conn = MagicMock()
        conn.fetchval = AsyncMock(return_value=1)
        driver_pool = make_driver_pool(conn)
        with patch("database.connection.asyncpg.create_pool", AsyncMock(return_value=driver_pool)):
            await ConnectionPool(SETTINGS).check()

        conn.fetchval.assert_awaited_once_with("SELECT 1")

    @pytest.mark.asyncio
    async def test_shutdown_closes_and_rejects_acquisition(self):
        driver_pool = make_driver_pool()
        with patch("database.connection.asyncpg.create_pool", AsyncMock(return_value=driver_pool)) as create_pool:
            pool = ConnectionPool(SETTINGS)
            await pool.open()
            await pool.shutdown()

            with pytest.raises(DatabaseConnectionError):
                await pool.acquire()

        driver_pool.close.assert_awaited_once()
        assert create_pool.await_count == 1
        assert not pool.is_open

    @pytest.mark.asyncio
    async def test_concurrent_first_acquisitions_share_one_driver_pool(self):
        created = []

        async def slow_create_pool(**kwargs):
            await asyncio.sleep(0.01)
            driver_pool = make_driver_pool()
            created.append(driver_pool)
            return driver_pool

        with patch("database.connection.asyncpg.create_pool", AsyncMock(side_effect=slow_create_pool)):
            pool = ConnectionPool(SETTINGS)
            await asyncio.gather(pool.acquire(), pool.acquire(), pool.acquire())
            await pool.shutdown()

        assert len(created) == 1
        assert created[0].acquire.await_count == 3
        created[0].close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_shutdown_during_open_closes_the_new_driver_pool(self):
        driver_pool = make_driver_pool()
        pool = ConnectionPool(SETTINGS)

        async def create_then_shut_down(**kwargs):
            await pool.shutdown()
            return driver_pool

        with patch("database.connection.asyncpg.create_pool", AsyncMock(side_effect=create_then_shut_down)):
            with pytest.raises(DatabaseConnectionError):
                await pool.open()

        driver_pool.close.assert_awaited_once()
        assert not pool.is_open

    @pytest.mark.asyncio
    async def test_shutdown_without_open_is_safe(self):
        pool = ConnectionPool(SETTINGS)
        await pool.shutdown()
        with pytest.raises(DatabaseConnectionError):
            await pool.open()


def test_describe_hides_password():
    assert SETTINGS.describe() == "app@db:5432/empresa"
    assert "secret" not in SETTINGS.describe()
