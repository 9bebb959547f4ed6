"""
Book-related Pydantic models
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class BookCreateRequest(BaseModel):
    book_id: Optional[int] = Field(default=None, gt=0)
    title: str = Field(min_length=1, max_length=500)
    author_id: int = Field(gt=0)


class AuthorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    author_id: int
    first_name: str
    last_name: str


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    book_id: int
    title: str
    author_id: int
    author: AuthorSummary


class BookListResponse(BaseModel):
    books: List[BookResponse]
    count: int
