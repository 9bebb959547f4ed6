"""
Base service layer for unified data access through the persistence context
"""

import logging
from typing import Any, List, Optional
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from database.context import ApplicationDbContext, EntitySet

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Any]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def first(self) -> Any:
        return self.data[0] if self.data else None


class BaseService:
    """Base service that wraps one entity set of the persistence context"""

    def __init__(self, context: ApplicationDbContext, resource_name: str):
        self.context = context
        self.resource_name = resource_name

        entity_set = getattr(context, resource_name, None)
        if not isinstance(entity_set, EntitySet):
            raise ValueError(f"Resource not found in context: {resource_name}")

        self.entity_set: EntitySet = entity_set
        logger.debug(f"BaseService initialized for resource: {resource_name}")

    async def create(self, entity: Any) -> ServiceResult:
        """
        Add an entity and save the unit of work

        Args:
            entity: Transient entity instance to persist

        Returns:
            ServiceResult with the persisted entity
        """
        self.entity_set.add(entity)

        try:
            await self.context.save_changes()
        except IntegrityError as e:
            await self.context.rollback()
            logger.error(f"Create operation failed for {self.resource_name}: {e.orig}")

            if "foreign key" in str(e.orig).lower():
                return ServiceResult(
                    success=False,
                    error="Referenced record not found",
                    error_type="FOREIGN_KEY_ERROR"
                )
            return ServiceResult(
                success=False,
                error="Record already exists",
                error_type="CONFLICT_ERROR"
            )
        except SQLAlchemyError as e:
            await self.context.rollback()
            logger.error(f"Create operation failed for {self.resource_name}: {e}", exc_info=True)
            return ServiceResult(
                success=False,
                error=f"Database operation failed: {e}",
                error_type="DATABASE_ERROR"
            )

        return ServiceResult(success=True, data=[entity], count=1)

    async def conflict_for(self, key: Any) -> Optional[ServiceResult]:
        """CONFLICT_ERROR result when an entity with this primary key already exists"""
        if key is None or await self.entity_set.find(key) is None:
            return None
        return ServiceResult(
            success=False,
            error="Record already exists",
            error_type="CONFLICT_ERROR"
        )

    async def get_by_id(self, key: Any) -> ServiceResult:
        """
        Get a single entity by primary key

        Args:
            key: Primary key value

        Returns:
            ServiceResult with the entity, or NOT_FOUND
        """
        try:
            entity = await self.entity_set.find(key)
        except SQLAlchemyError as e:
            logger.error(f"Lookup failed for {self.resource_name} {key}: {e}")
            return ServiceResult(
                success=False,
                error=f"Database operation failed: {e}",
                error_type="DATABASE_ERROR"
            )

        if entity is None:
            return ServiceResult(
                success=False,
                error=f"{self.resource_name} record not found: {key}",
                error_type="NOT_FOUND"
            )

        return ServiceResult(success=True, data=[entity], count=1)

    async def list(self, limit: int = 100, offset: int = 0) -> ServiceResult:
        """
        List entities ordered by primary key

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            ServiceResult with matched records and the total count
        """
        try:
            entities = await self.entity_set.to_list(limit=limit, offset=offset)
            total = await self.entity_set.count()
        except SQLAlchemyError as e:
            logger.error(f"Read operation failed for {self.resource_name}: {e}")
            return ServiceResult(
                success=False,
                error=f"Database operation failed: {e}",
                error_type="DATABASE_ERROR"
            )

        return ServiceResult(success=True, data=entities, count=total)
