"""
Home API route
"""

import logging
from fastapi import APIRouter, Response

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
async def index() -> Response:
    """Landing endpoint: 200 with an empty body, no persistence access"""
    logger.info("home.index")
    return Response(status_code=200)
