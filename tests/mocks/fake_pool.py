from contextlib import asynccontextmanager
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

from database.connection import DatabaseConnectionError


def make_connection() -> MagicMock:
    """Stand-in for an asyncpg connection with awaitable query methods"""
    conn = MagicMock()
    conn.fetch = AsyncMock(return_value=[])
    conn.fetchrow = AsyncMock(return_value=None)
    conn.fetchval = AsyncMock(return_value=1)
    conn.execute = AsyncMock(return_value="UPDATE 0")
    return conn


class FakePool:
    """Connection pool double handing out a single mock connection"""

    def __init__(self, conn: Optional[MagicMock] = None, unreachable: bool = False):
        self.conn = conn if conn is not None else make_connection()
        self.unreachable = unreachable
        self.opened = False
        self.shut_down = False
        self.released = 0

    async def open(self) -> None:
        if self.unreachable:
            raise DatabaseConnectionError("connection refused")
        self.opened = True

    @asynccontextmanager
    async def connection(self):
        if self.unreachable or self.shut_down:
            raise DatabaseConnectionError("connection refused")
        try:
            yield self.conn
        finally:
            self.released += 1

    async def check(self) -> None:
        async with self.connection() as conn:
            await conn.fetchval("SELECT 1")

    async def shutdown(self) -> None:
        self.shut_down = True
