"""
Utility functions and helpers
"""

import logging
from fastapi import HTTPException

from services.base_service import ServiceResult

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    "NOT_FOUND": 404,
    "FOREIGN_KEY_ERROR": 404,
    "CONFLICT_ERROR": 409,
    "INVALID_QUERY": 400,
    "DATABASE_ERROR": 500,
}


def raise_for_result(result: ServiceResult) -> None:
    """Translate a failed ServiceResult into the matching HTTPException"""
    if result.success:
        return

    status_code = ERROR_STATUS_CODES.get(result.error_type, 500)
    if status_code >= 500:
        logger.error(f"Service error ({result.error_type}): {result.error}")
    raise HTTPException(status_code=status_code, detail=result.error)
