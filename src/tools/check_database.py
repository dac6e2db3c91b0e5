#!/usr/bin/env python3
"""
Database connectivity check: opens the pool, runs a trivial query and closes it
"""

import os
import sys
import asyncio
import logging

from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config.settings import DatabaseSettings
from database.connection import ConnectionPool, DatabaseConnectionError

logger = logging.getLogger(__name__)


async def check_database_connection(pool: ConnectionPool) -> bool:
    """Return True when a connection can be acquired; the pool is always shut down"""
    try:
        await pool.check()
        logger.info("Conexão com o banco de dados bem-sucedida!")
        return True
    except DatabaseConnectionError as e:
        logger.error(f"Erro ao conectar com o banco de dados: {e}")
        return False
    finally:
        await pool.shutdown()


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    pool = ConnectionPool(DatabaseSettings.from_env())
    return 0 if asyncio.run(check_database_connection(pool)) else 1


if __name__ == "__main__":
    sys.exit(main())
