"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends

from database.connection import get_db_context
from database.context import ApplicationDbContext

router = APIRouter()


@router.get("")
async def health_check(context: ApplicationDbContext = Depends(get_db_context)):
    """
    Health check - reports healthy when the database answers a trivial query
    """
    if not await context.can_connect():
        raise HTTPException(status_code=503, detail="Health check failed: database unavailable")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
    }
