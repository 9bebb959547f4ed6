"""
pytest configuration and fixtures for the ORM Sample API test suite
"""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from app_factory import InMemoryAppFactory
from database.connection import DbContextOptions
from database.context import ApplicationDbContext


@pytest.fixture
def factory():
    """Application factory backed by a fresh in-memory database"""
    return InMemoryAppFactory()


@pytest_asyncio.fixture
async def client(factory):
    """HTTP client against the running in-memory application"""
    async with factory.client() as http_client:
        yield http_client


@pytest_asyncio.fixture
async def db_options():
    """In-memory persistence options with the schema created"""
    options = DbContextOptions.in_memory()
    async with ApplicationDbContext(options) as context:
        await context.ensure_created()
    yield options
    await options.dispose()


@pytest_asyncio.fixture
async def db_context(db_options):
    """Context over the in-memory database, closed after the test"""
    async with ApplicationDbContext(db_options) as context:
        yield context
