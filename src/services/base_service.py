"""
Base service layer for database operations over the connection pool
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

import asyncpg

from database.connection import ConnectionPool, DatabaseConnectionError

logger = logging.getLogger(__name__)

CONNECTION_ERROR = "CONNECTION_ERROR"
STORE_ERROR = "STORE_ERROR"
EXECUTION_ERROR = "EXECUTION_ERROR"


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


def affected_rows(status: str) -> int:
    """Row count from a command tag such as 'UPDATE 1' or 'DELETE 0'"""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0


class BaseService:
    """Base service bound to one table and an injected connection pool"""

    def __init__(self, table_name: str, pool: ConnectionPool):
        self.table_name = table_name
        self.pool = pool
        logger.info(f"BaseService initialized for table: {table_name}")

    def failure(self, operation: str, error: Exception) -> ServiceResult:
        """
        Translate an exception raised during an operation into a failed result

        Args:
            operation: Name of the operation, used in the log line
            error: The exception that was raised

        Returns:
            ServiceResult with error and error_type set
        """
        if isinstance(error, DatabaseConnectionError):
            logger.error(f"{operation} on {self.table_name} failed, store unreachable: {error}")
            return ServiceResult(
                success=False,
                error=str(error),
                error_type=CONNECTION_ERROR
            )

        if isinstance(error, asyncpg.PostgresError):
            logger.error(f"{operation} on {self.table_name} failed: {error}", exc_info=True)
            return ServiceResult(
                success=False,
                error=f"Database operation failed: {error}",
                error_type=STORE_ERROR
            )

        logger.error(f"{operation} on {self.table_name} failed unexpectedly: {error}", exc_info=True)
        return ServiceResult(
            success=False,
            error=str(error),
            error_type=EXECUTION_ERROR
        )
