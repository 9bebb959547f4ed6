"""
Author and book services over an in-memory context
"""

import pytest

from database.context import ApplicationDbContext
from services.authors_service import AuthorsService
from services.base_service import BaseService, ServiceResult
from services.books_service import BooksService


class TestBaseService:

    @pytest.mark.asyncio
    async def test_unknown_resource(self, db_context):
        with pytest.raises(ValueError, match="Resource not found in context: publishers"):
            BaseService(db_context, "publishers")

    def test_result_first(self):
        assert ServiceResult(success=True, data=["a", "b"]).first == "a"
        assert ServiceResult(success=False).first is None


class TestAuthorsService:

    @pytest.mark.asyncio
    async def test_create_and_get(self, db_options):
        async with ApplicationDbContext(db_options) as context:
            created = await AuthorsService(context).create_author("Ada", "Lovelace", author_id=1)
        async with ApplicationDbContext(db_options) as context:
            fetched = await AuthorsService(context).get_author_by_id(1)

        assert created.success
        assert created.count == 1
        assert fetched.success
        assert fetched.first.last_name == "Lovelace"

    @pytest.mark.asyncio
    async def test_duplicate_id_is_a_conflict(self, db_options):
        async with ApplicationDbContext(db_options) as context:
            await AuthorsService(context).create_author("Ada", "Lovelace", author_id=1)
        async with ApplicationDbContext(db_options) as context:
            result = await AuthorsService(context).create_author("Ada", "Byron", author_id=1)
            remaining = await context.authors.count()

        assert not result.success
        assert result.error_type == "CONFLICT_ERROR"
        assert remaining == 1

    @pytest.mark.asyncio
    @pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")
    async def test_duplicate_id_in_same_context(self, db_context):
        service = AuthorsService(db_context)
        await service.create_author("Ada", "Lovelace", author_id=1)

        result = await service.create_author("Ada", "Byron", author_id=1)

        assert result.error_type == "CONFLICT_ERROR"
        assert (await service.get_author_by_id(1)).first.last_name == "Lovelace"

    @pytest.mark.asyncio
    async def test_missing_author(self, db_context):
        result = await AuthorsService(db_context).get_author_by_id(7)

        assert not result.success
        assert result.error_type == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_reports_total(self, db_context):
        service = AuthorsService(db_context)
        for last_name in ("Lovelace", "Babbage", "Hopper"):
            await service.create_author("First", last_name)

        result = await service.list_authors(limit=2)

        assert result.success
        assert len(result.data) == 2
        assert result.count == 3

    @pytest.mark.asyncio
    async def test_books_for_author(self, db_context):
        await AuthorsService(db_context).create_author("Ada", "Lovelace", author_id=1)
        await BooksService(db_context).create_book("Notes", author_id=1)

        result = await AuthorsService(db_context).get_books_for_author(1)
        missing = await AuthorsService(db_context).get_books_for_author(2)

        assert [book.title for book in result.data] == ["Notes"]
        assert missing.error_type == "NOT_FOUND"


class TestBooksService:

    @pytest.mark.asyncio
    async def test_create_book_for_author(self, db_context):
        await AuthorsService(db_context).create_author("Ada", "Lovelace", author_id=1)

        result = await BooksService(db_context).create_book("Notes", author_id=1, book_id=10)

        assert result.success
        book = result.first
        assert book.book_id == 10
        assert book.author_id == 1
        assert book.author.first_name == "Ada"

    @pytest.mark.asyncio
    async def test_create_book_for_missing_author(self, db_context):
        result = await BooksService(db_context).create_book("Orphan", author_id=99)

        assert not result.success
        assert result.error_type == "FOREIGN_KEY_ERROR"
        assert await db_context.books.count() == 0

    @pytest.mark.asyncio
    @pytest.mark.filterwarnings("error::sqlalchemy.exc.SAWarning")
    async def test_duplicate_book_id(self, db_context):
        await AuthorsService(db_context).create_author("Ada", "Lovelace", author_id=1)
        books = BooksService(db_context)
        await books.create_book("Notes", author_id=1, book_id=3)

        result = await books.create_book("Again", author_id=1, book_id=3)

        assert result.error_type == "CONFLICT_ERROR"
        assert await db_context.books.count() == 1

    @pytest.mark.asyncio
    async def test_get_and_list(self, db_context):
        await AuthorsService(db_context).create_author("Ada", "Lovelace", author_id=1)
        books = BooksService(db_context)
        await books.create_book("Sketch", author_id=1)
        await books.create_book("Notes", author_id=1)

        listed = await books.list_books()
        missing = await books.get_book_by_id(404)

        assert [book.title for book in listed.data] == ["Sketch", "Notes"]
        assert listed.count == 2
        assert missing.error_type == "NOT_FOUND"
