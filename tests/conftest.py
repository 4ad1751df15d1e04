"""
pytest configuration and fixtures.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.db import Database
from app.core.templates import build_template_store
from app.domains.posts.services import PostService
from app.main import create_app

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url=MEMORY_URL)


@pytest.fixture
def client(settings):
    """Test client with the lifespan running (fresh in-memory database)."""
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def templates():
    return build_template_store()


@pytest_asyncio.fixture
async def database():
    db = Database.from_url(MEMORY_URL)
    await db.init()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def post_service(database, templates) -> PostService:
    return PostService(database, templates)
