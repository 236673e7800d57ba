import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from src.api.app import create_app
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work


class ErrorTestConfig(ApplicationConfig):
    BCRYPT_ROUNDS = 4
    SESSION_SECRET = "test-session-secret"
    SESSION_COOKIE_SECURE = False


class BrokenUnitOfWork(UnitOfWork):
    """Data store that fails on first use"""

    async def __aenter__(self):
        raise RuntimeError("connection refused")

    async def __aexit__(self, *args):
        pass

    async def commit(self):
        pass

    async def rollback(self):
        pass


class HangingUnitOfWork(UnitOfWork):
    """Data store that never answers"""

    async def __aenter__(self):
        await asyncio.sleep(10)
        return self

    async def __aexit__(self, *args):
        pass

    async def commit(self):
        pass

    async def rollback(self):
        pass


@pytest_asyncio.fixture
async def make_client(tmp_path):
    clients = []

    async def _make(unit_of_work: UnitOfWork, **overrides):
        Config = type(
            "Config",
            (ErrorTestConfig,),
            {"DB_URI": f"sqlite+aiosqlite:///{tmp_path / 'unused.db'}", **overrides},
        )
        app = create_app(Config)

        async def override_get_unit_of_work():
            yield unit_of_work

        app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        ac = AsyncClient(transport=transport, base_url="http://test")
        clients.append(ac)
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()


@pytest.mark.asyncio
async def test_unexpected_error_returns_internal_error(make_client, test_data):
    """An exception escaping the store is reported as a generic 500"""
    client = await make_client(BrokenUnitOfWork())

    response = await client.post("/api/register", json=test_data.get_copy("user_alice"))

    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "Internal server error"
    assert data["error"]["code"] == "INTERNAL_ERROR"
    assert "connection refused" not in response.text


@pytest.mark.asyncio
async def test_slow_store_returns_store_timeout(make_client, test_data):
    """A store that does not answer in time fails the request with STORE_TIMEOUT"""
    client = await make_client(HangingUnitOfWork(), STORE_TIMEOUT_SECONDS=0.05)

    response = await client.post("/api/login", json=test_data.credentials("user_alice"))

    assert response.status_code == 500
    data = response.json()
    assert data["message"] == "Internal server error"
    assert data["error"]["code"] == "STORE_TIMEOUT"
    assert "set-cookie" not in response.headers


@pytest.mark.asyncio
async def test_slow_store_on_protected_route(make_client):
    """Session lookup is bounded by the store timeout too"""
    client = await make_client(HangingUnitOfWork(), STORE_TIMEOUT_SECONDS=0.05)
    client.cookies.set(ErrorTestConfig.SESSION_COOKIE_NAME, "some-token")

    response = await client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "STORE_TIMEOUT"
