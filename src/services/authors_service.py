"""
Authors service - business logic for author management
"""

import logging
from typing import Optional

from fastapi import Depends

from database.connection import get_db_context
from database.context import ApplicationDbContext
from models.entities import Author
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class AuthorsService(BaseService):
    """Service for author operations"""

    def __init__(self, context: ApplicationDbContext):
        super().__init__(context, "authors")

    async def create_author(
        self,
        first_name: str,
        last_name: str,
        author_id: Optional[int] = None
    ) -> ServiceResult:
        """
        Create a new author

        Args:
            first_name: Author's first name
            last_name: Author's last name
            author_id: Explicit identity (optional, assigned by the database when omitted)

        Returns:
            ServiceResult with the created author
        """
        conflict = await self.conflict_for(author_id)
        if conflict:
            return conflict

        logger.info(f"Creating new author: {first_name} {last_name}")
        return await self.create(Author(author_id, first_name, last_name))

    async def get_author_by_id(self, author_id: int) -> ServiceResult:
        return await self.get_by_id(author_id)

    async def list_authors(self, limit: int = 100, offset: int = 0) -> ServiceResult:
        return await self.list(limit=limit, offset=offset)

    async def get_books_for_author(self, author_id: int) -> ServiceResult:
        """
        Get every book written by an author

        Args:
            author_id: Identity of the author

        Returns:
            ServiceResult with the author's books, or NOT_FOUND for an unknown author
        """
        result = await self.get_by_id(author_id)
        if not result.success:
            return result

        books = list(result.first.books)
        return ServiceResult(success=True, data=books, count=len(books))


def get_authors_service(
    context: ApplicationDbContext = Depends(get_db_context),
) -> AuthorsService:
    """Build an authors service over the request's context"""
    return AuthorsService(context)
