"""
Book API routes
"""

import logging
from fastapi import APIRouter, Depends, Query

from models.book import BookCreateRequest, BookListResponse, BookResponse
from services.books_service import BooksService, get_books_service
from utils.helpers import raise_for_result

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=BookResponse, status_code=201)
async def create_book(
    request: BookCreateRequest,
    books_service: BooksService = Depends(get_books_service)
):
    """Create a new book for an existing author"""
    result = await books_service.create_book(
        title=request.title,
        author_id=request.author_id,
        book_id=request.book_id
    )
    raise_for_result(result)
    return BookResponse.model_validate(result.first)


@router.get("", response_model=BookListResponse)
async def list_books(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    books_service: BooksService = Depends(get_books_service)
):
    """List books"""
    result = await books_service.list_books(limit=limit, offset=offset)
    raise_for_result(result)
    return BookListResponse(
        books=[BookResponse.model_validate(book) for book in result.data],
        count=result.count
    )


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int,
    books_service: BooksService = Depends(get_books_service)
):
    """Get book details"""
    result = await books_service.get_book_by_id(book_id)
    raise_for_result(result)
    return BookResponse.model_validate(result.first)
