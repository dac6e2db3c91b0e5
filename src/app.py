"""
Colaboradores Backend API Server
Core functionality: CRUD over the colaboradores table
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, LOG_LEVEL, DatabaseSettings
from database.connection import ConnectionPool, DatabaseConnectionError
from api.routes import health, colaboradores
from services.colaboradores_service import ColaboradoresService
from utils.error_handling import setup_error_handling

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the pool at startup and shut it down on exit"""
    pool = app.state.pool
    try:
        await pool.open()
    except DatabaseConnectionError as e:
        # The server keeps running; requests answer 503 until the store is reachable
        logger.error(f"Erro ao conectar com o banco de dados: {e}")
    yield
    await pool.shutdown()


def create_app(
    pool: Optional[ConnectionPool] = None,
    service: Optional[ColaboradoresService] = None
) -> FastAPI:
    """
    Build the FastAPI application around an explicit connection pool

    Args:
        pool: Connection pool; built from the environment when omitted
        service: Colaboradores service; built on top of the pool when omitted
    """
    if pool is None:
        pool = ConnectionPool(DatabaseSettings.from_env())
    if service is None:
        service = ColaboradoresService(pool)

    app = FastAPI(
        title="Colaboradores Backend",
        description="Backend API for listing, creating, editing and deleting colaboradores",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.pool = pool
    app.state.colaboradores_service = service

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Setup centralized error handling
    setup_error_handling(app)

    # Include API routes
    app.include_router(health.router, tags=["Health"])
    app.include_router(colaboradores.router, prefix="/api/colaboradores", tags=["Colaboradores"])

    return app


# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
app = create_app()
