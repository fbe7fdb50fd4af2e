import logging

import pytest
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from dafurn import main as main_module
from dafurn.api.deps import get_user_repository
from dafurn.config import Settings
from dafurn.core.errors import (
    DatabaseConfigError,
    MissingDatabaseURLError,
    StorageUnavailableError,
)
from dafurn.main import create_app
from dafurn.repositories.user_repository import UserRepository


@pytest.mark.asyncio
async def test_health_returns_ok(client):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_landing_is_plain_text(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert resp.text == "Dafurn Exchange Backend Running"


@pytest.mark.asyncio
async def test_storage_unavailable_returns_503(app):
    # Repository bound to a connection alias that was never configured
    app.dependency_overrides[get_user_repository] = lambda: UserRepository(connection_name="missing")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        list_resp = await client.get("/api/users")
        health_resp = await client.get("/api/health")
    assert list_resp.status_code == 503
    assert list_resp.json()["detail"] == "STORAGE_UNAVAILABLE"
    # Routes that do not touch storage keep working
    assert health_resp.status_code == 200


def test_startup_without_database_url_is_fatal():
    app = create_app(Settings(database_url=None))
    with pytest.raises(MissingDatabaseURLError):
        with TestClient(app):
            pass


def test_startup_with_unusable_database_url_is_fatal():
    app = create_app(Settings(database_url="bogus://x"))
    with pytest.raises(DatabaseConfigError):
        with TestClient(app):
            pass


def test_startup_survives_unreachable_database(monkeypatch, caplog):
    async def failing_init_db(db_url, generate_schemas=False):
        raise StorageUnavailableError("connection refused")

    monkeypatch.setattr(main_module, "init_db", failing_init_db)
    app = create_app(Settings(database_url="postgres://u:p@127.0.0.1:1/dafurn"))
    with caplog.at_level(logging.ERROR, logger="uvicorn.error"):
        with TestClient(app) as client:
            resp = client.get("/api/health")
    assert resp.status_code == 200
    assert "connection refused" in caplog.text
