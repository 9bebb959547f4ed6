"""
Author-related Pydantic models
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AuthorCreateRequest(BaseModel):
    author_id: Optional[int] = Field(default=None, gt=0)
    first_name: str = Field(min_length=1, max_length=200)
    last_name: str = Field(min_length=1, max_length=200)


class BookSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    book_id: int
    title: str
    author_id: int


class AuthorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author_id: int
    first_name: str
    last_name: str
    books: List[BookSummary] = []


class AuthorListResponse(BaseModel):
    authors: List[AuthorResponse]
    count: int
