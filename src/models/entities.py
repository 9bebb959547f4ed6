"""
SQLAlchemy entities: authors and their books
"""

import logging
from typing import List, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every mapped entity"""


class Author(Base):
    __tablename__ = "authors"

    author_id: Mapped[int] = mapped_column(primary_key=True)
    first_name: Mapped[str] = mapped_column(String(200))
    last_name: Mapped[str] = mapped_column(String(200))

    books: Mapped[List["Book"]] = relationship(
        back_populates="author",
        order_by="Book.book_id",
        lazy="selectin",
    )

    def __init__(self, author_id: Optional[int], first_name: str, last_name: str):
        self.author_id = author_id
        self.first_name = first_name
        self.last_name = last_name
        self.books = []

    def __repr__(self) -> str:
        return f"Author(author_id={self.author_id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"


class Book(Base):
    __tablename__ = "books"

    book_id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(500))
    author_id: Mapped[int] = mapped_column(ForeignKey("authors.author_id"), index=True)

    author: Mapped["Author"] = relationship(back_populates="books", lazy="selectin")

    def __init__(self, book_id: Optional[int], title: str, author: Author, author_id: int):
        self.book_id = book_id
        self.title = title
        self.author = author
        # author_id is stored as given; a mismatch with author.author_id is not rejected
        self.author_id = author_id

        if author is not None and author.author_id is not None and author.author_id != author_id:
            logger.warning(
                f"Book {book_id!r} constructed with author_id={author_id} "
                f"but author reference has author_id={author.author_id}"
            )

    def __repr__(self) -> str:
        return f"Book(book_id={self.book_id!r}, title={self.title!r}, author_id={self.author_id!r})"
