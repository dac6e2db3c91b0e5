"""
Configuration settings for the Colaboradores Backend
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Server configuration
PORT = int(os.getenv("PORT", 3000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Database configuration
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", 5432))
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

if not DB_NAME:
    logger.warning("DB_NAME not set - database connections will use the driver default")


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parameters handed to the connection pool"""
    host: str = "localhost"
    port: int = 5432
    user: Optional[str] = None
    password: Optional[str] = None
    database: Optional[str] = None

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        """Build settings from the values read at process start"""
        return cls(
            host=DB_HOST,
            port=DB_PORT,
            user=DB_USER,
            password=DB_PASS,
            database=DB_NAME,
        )

    def describe(self) -> str:
        """Connection target without credentials, for logging"""
        return f"{self.user or '<default>'}@{self.host}:{self.port}/{self.database or '<default>'}"
