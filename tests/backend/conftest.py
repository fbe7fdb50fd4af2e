import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dafurn.config import Settings
from dafurn.core.db import init_db, close_db
from dafurn.main import create_app
from dafurn.repositories.user_repository import UserRepository
from dafurn.seed.users import seed_users


TEST_DB_URL = "sqlite://:memory:"


@pytest_asyncio.fixture
async def db():
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    await close_db()
    await init_db(TEST_DB_URL, generate_schemas=True)
    yield
    await close_db()


@pytest.fixture
def repo() -> UserRepository:
    return UserRepository()


@pytest.fixture
def app():
    return create_app(Settings(database_url=TEST_DB_URL))


@pytest_asyncio.fixture
async def client(db, app):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    Startup/shutdown events are not run; the db fixture owns the connection.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def seeded(db, repo):
    """
    Seed the five sample users and return them keyed by username.
    """
    await seed_users(repo)
    return {u.username: u for u in await repo.list_all()}
