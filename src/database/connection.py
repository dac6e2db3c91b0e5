"""
Database connection and pool management
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import asyncpg

from config.settings import DatabaseSettings

logger = logging.getLogger(__name__)

# Failures that mean the store cannot be reached or refuses our credentials
CONNECTION_FAILURES = (
    OSError,
    asyncio.TimeoutError,
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
)


class DatabaseConnectionError(Exception):
    """Raised when a connection to the store cannot be obtained"""


class ConnectionPool:
    """Explicitly constructed handle around an asyncpg pool.

    Pool size, queueing and timeouts are left to the driver defaults.
    """

    def __init__(self, settings: DatabaseSettings):
        self.settings = settings
        self._pool: Optional[asyncpg.Pool] = None
        self._shut_down = False
        # Serializes pool creation so concurrent first acquisitions share one pool
        self._open_lock = asyncio.Lock()

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    async def open(self) -> None:
        """Create the underlying pool"""
        async with self._open_lock:
            if self._shut_down:
                raise DatabaseConnectionError("Connection pool has been shut down")
            if self._pool is not None:
                return

            try:
                pool = await asyncpg.create_pool(
                    host=self.settings.host,
                    port=self.settings.port,
                    user=self.settings.user,
                    password=self.settings.password,
                    database=self.settings.database,
                )
            except CONNECTION_FAILURES as e:
                raise DatabaseConnectionError(
                    f"Could not connect to {self.settings.describe()}: {e}"
                ) from e

            if self._shut_down:
                await pool.close()
                raise DatabaseConnectionError("Connection pool has been shut down")
            self._pool = pool

        logger.info(f"Database pool opened for {self.settings.describe()}")

    async def acquire(self) -> asyncpg.Connection:
        """Get an active connection, opening the pool on first use"""
        if self._shut_down:
            raise DatabaseConnectionError("Connection pool has been shut down")
        if self._pool is None:
            await self.open()

        try:
            return await self._pool.acquire()
        except CONNECTION_FAILURES as e:
            raise DatabaseConnectionError(f"Could not acquire a connection: {e}") from e

    async def release(self, conn: asyncpg.Connection) -> None:
        """Return a connection to the pool for reuse"""
        if self._pool is not None:
            await self._pool.release(conn)

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[asyncpg.Connection]:
        conn = await self.acquire()
        try:
            yield conn
        finally:
            await self.release(conn)

    async def check(self) -> None:
        """Round-trip a trivial query; raises DatabaseConnectionError on failure"""
        async with self.connection() as conn:
            try:
                await conn.fetchval("SELECT 1")
            except CONNECTION_FAILURES as e:
                raise DatabaseConnectionError(f"Connection check failed: {e}") from e

    async def shutdown(self) -> None:
        """Close all pooled connections and reject further acquisition"""
        self._shut_down = True
        if self._pool is not None:
            pool, self._pool = self._pool, None
            await pool.close()
        logger.info("Database connections closed")
