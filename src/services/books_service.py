"""
Books service - business logic for book management
"""

import logging
from typing import Optional

from fastapi import Depends

from database.connection import get_db_context
from database.context import ApplicationDbContext
from models.entities import Book
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)


class BooksService(BaseService):
    """Service for book operations"""

    def __init__(self, context: ApplicationDbContext):
        super().__init__(context, "books")

    async def create_book(
        self,
        title: str,
        author_id: int,
        book_id: Optional[int] = None
    ) -> ServiceResult:
        """
        Create a new book for an existing author

        Args:
            title: Book title
            author_id: Identity of the owning author
            book_id: Explicit identity (optional, assigned by the database when omitted)

        Returns:
            ServiceResult with the created book, or FOREIGN_KEY_ERROR when the author is unknown
        """
        author = await self.context.authors.find(author_id)
        if author is None:
            return ServiceResult(
                success=False,
                error=f"Author not found: {author_id}",
                error_type="FOREIGN_KEY_ERROR"
            )

        conflict = await self.conflict_for(book_id)
        if conflict:
            return conflict

        logger.info(f"Creating new book '{title}' for author {author_id}")
        return await self.create(Book(book_id, title, author, author_id))

    async def get_book_by_id(self, book_id: int) -> ServiceResult:
        return await self.get_by_id(book_id)

    async def list_books(self, limit: int = 100, offset: int = 0) -> ServiceResult:
        return await self.list(limit=limit, offset=offset)


def get_books_service(
    context: ApplicationDbContext = Depends(get_db_context),
) -> BooksService:
    """Build a books service over the request's context"""
    return BooksService(context)
