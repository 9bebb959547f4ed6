"""
Application persistence context: the unit of work over authors and books
"""

import logging
from typing import TYPE_CHECKING, Any, Generic, Iterable, List, Optional, Type, TypeVar

from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from models.entities import Author, Base, Book

if TYPE_CHECKING:
    from database.connection import DbContextOptions

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Base)


class EntitySet(Generic[EntityT]):
    """A named collection of one entity type, bound to a context's session"""

    def __init__(self, session: AsyncSession, entity_type: Type[EntityT]):
        self.session = session
        self.entity_type = entity_type

    def add(self, entity: EntityT) -> None:
        self.session.add(entity)

    def add_range(self, entities: Iterable[EntityT]) -> None:
        self.session.add_all(list(entities))

    async def find(self, key: Any) -> Optional[EntityT]:
        """Look up an entity by primary key, checking the identity map first"""
        return await self.session.get(self.entity_type, key)

    def query(self) -> Select:
        return select(self.entity_type)

    async def to_list(self, limit: Optional[int] = None, offset: int = 0) -> List[EntityT]:
        primary_key = self.entity_type.__mapper__.primary_key
        statement = self.query().order_by(*primary_key).offset(offset)
        if limit is not None:
            statement = statement.limit(limit)
        result = await self.session.scalars(statement)
        return list(result)

    async def count(self) -> int:
        statement = select(func.count()).select_from(self.entity_type)
        return await self.session.scalar(statement)

    async def remove(self, entity: EntityT) -> None:
        await self.session.delete(entity)

    def __repr__(self) -> str:
        return f"EntitySet({self.entity_type.__name__})"


class ApplicationDbContext:
    """
    Persistence context exposing the ``authors`` and ``books`` entity sets.

    Query translation, change tracking and persistence are SQLAlchemy's; this
    class only wires a session to the configured engine.
    """

    def __init__(self, options: "DbContextOptions"):
        self.options = options
        self.session = AsyncSession(options.engine, expire_on_commit=False)
        self.authors: EntitySet[Author] = EntitySet(self.session, Author)
        self.books: EntitySet[Book] = EntitySet(self.session, Book)

    async def save_changes(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def ensure_created(self) -> None:
        """Create the tables for every mapped entity if they do not exist"""
        async with self.options.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Database schema ensured for {self.options.masked_url}")

    async def can_connect(self) -> bool:
        try:
            await self.session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database connectivity check failed: {e}")
            return False
        return True

    async def close(self) -> None:
        await self.session.close()

    async def __aenter__(self) -> "ApplicationDbContext":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
