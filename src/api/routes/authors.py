"""
Author API routes
All data access goes through the authors service and the request's persistence context.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends, Query

from models.author import AuthorCreateRequest, AuthorListResponse, AuthorResponse, BookSummary
from services.authors_service import AuthorsService, get_authors_service
from utils.helpers import raise_for_result

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=AuthorResponse, status_code=201)
async def create_author(
    request: AuthorCreateRequest,
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """Create a new author"""
    result = await authors_service.create_author(
        first_name=request.first_name,
        last_name=request.last_name,
        author_id=request.author_id
    )
    raise_for_result(result)
    return AuthorResponse.model_validate(result.first)


@router.get("", response_model=AuthorListResponse)
async def list_authors(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """List authors with their books"""
    result = await authors_service.list_authors(limit=limit, offset=offset)
    raise_for_result(result)
    return AuthorListResponse(
        authors=[AuthorResponse.model_validate(author) for author in result.data],
        count=result.count
    )


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(
    author_id: int,
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """Get author details"""
    result = await authors_service.get_author_by_id(author_id)
    raise_for_result(result)
    return AuthorResponse.model_validate(result.first)


@router.get("/{author_id}/books", response_model=List[BookSummary])
async def get_author_books(
    author_id: int,
    authors_service: AuthorsService = Depends(get_authors_service)
):
    """Get every book written by an author"""
    result = await authors_service.get_books_for_author(author_id)
    raise_for_result(result)
    return [BookSummary.model_validate(book) for book in result.data]
