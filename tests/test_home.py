"""
Root endpoint tests through the in-memory application factory
"""

import logging

import httpx
import pytest

from app import create_app
from app_factory import make_settings
from database.connection import DbContextOptions

HOME_LOGGER = "api.routes.home"


class TestHome:
    """GET / answers 200 with an empty body"""

    @pytest.mark.asyncio
    async def test_get_home(self, client):
        response = await client.get("/")

        assert 200 <= response.status_code <= 299
        assert response.status_code == 200
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_get_home_logs_one_line(self, client, caplog):
        caplog.set_level(logging.INFO, logger=HOME_LOGGER)

        response = await client.get("/")

        assert response.status_code == 200
        records = [record for record in caplog.records if record.name == HOME_LOGGER]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].getMessage() == "home.index"

    @pytest.mark.asyncio
    async def test_get_home_carries_trace_id(self, client):
        response = await client.get("/")

        assert len(response.headers["X-Trace-ID"]) == 8

    @pytest.mark.asyncio
    async def test_get_home_ignores_database_state(self, tmp_path):
        unreachable = DbContextOptions.from_url(
            f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'library.db'}"
        )
        app = create_app(make_settings(database_ensure_created=False), db_options=unreachable)

        async with app.router.lifespan_context(app):
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http_client:
                home = await http_client.get("/")
                health = await http_client.get("/health")

        assert home.status_code == 200
        assert home.content == b""
        assert health.status_code == 503
        assert health.json()["error"] == "HTTP 503"
