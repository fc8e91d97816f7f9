from fastapi import APIRouter, HTTPException
from typing import Dict, Any
import logging

from app.db.async_session import get_async_db_manager

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=Dict[str, Any])
async def health_check():
    """
    Basic health check endpoint.

    Returns:
        dict: Service status and database connectivity
    """
    try:
        manager = await get_async_db_manager()
        connection_test = await manager.test_connection()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(status_code=503, detail="Service unavailable")

    return {
        "status": "healthy" if connection_test else "unhealthy",
        "database": "connected" if connection_test else "disconnected",
        "service": "fitplan-backend"
    }
