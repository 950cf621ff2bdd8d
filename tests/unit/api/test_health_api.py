import pytest
from sqlalchemy.exc import OperationalError

from sharednotes.database import Database, get_database


class DownDatabase(Database):
    async def ping(self) -> None:
        raise OperationalError("SELECT 1", {}, Exception("db down"))


@pytest.mark.asyncio
async def test_health_reports_store_connectivity(async_client):
    response = await async_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "connected", "mongo": "connected", "db": "sharednotes-test"}


@pytest.mark.asyncio
async def test_health_is_503_when_store_unreachable(async_client, test_app, database):
    test_app.dependency_overrides[get_database] = lambda: DownDatabase(database.engine, name="down")

    response = await async_client.get("/health")
    assert response.status_code == 503
    assert response.json() == {"status": "degraded", "database": "disconnected", "mongo": "disconnected", "db": "down"}


@pytest.mark.asyncio
async def test_cors_allows_configured_origin_with_credentials(async_client):
    response = await async_client.options(
        "/notes/n",
        headers={
            "Origin": "http://localhost:8080",
            "Access-Control-Request-Method": "PUT",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8080"
    assert response.headers["access-control-allow-credentials"] == "true"


@pytest.mark.asyncio
async def test_cors_rejects_unknown_origin(async_client):
    response = await async_client.options(
        "/notes/n",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "PUT",
        },
    )
    assert "access-control-allow-origin" not in response.headers
