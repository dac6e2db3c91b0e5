"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Request

from database.connection import DatabaseConnectionError

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Report whether the database answers a trivial query"""
    pool = request.app.state.pool

    try:
        await pool.check()
    except DatabaseConnectionError as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected"
    }
