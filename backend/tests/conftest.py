import os

import bcrypt
import pytest
from httpx import ASGITransport, AsyncClient

from main import app
from shared.config import settings
from shared.dependencies import get_db
from shared.infrastructure.database import Database

import images.infrastructure.models  # noqa: F401
import revisions.infrastructure.models  # noqa: F401

VIEWER_PASSWORD = "viewer-secret"
ADMIN_PASSWORD = "admin-secret"
JWT_SECRET = "test-signing-key-with-enough-length-for-hs256"


@pytest.fixture
async def database(tmp_path):
    url = os.environ.get("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    database = Database(url)
    await database.create_all()
    yield database
    await database.drop_all()
    await database.dispose()


@pytest.fixture
async def db(database):
    async with database.session() as session:
        yield session


@pytest.fixture(autouse=True)
async def override_db(database):
    async def _override():
        async with database.session() as session:
            yield session

    app.dependency_overrides[get_db] = _override
    yield
    app.dependency_overrides.clear()


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def _hash(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=4)).decode()


@pytest.fixture
def access_gate(monkeypatch):
    """Turn the shared-password gate on with known viewer and admin passwords."""
    monkeypatch.setattr(settings, "AUTH_ENABLED", True)
    monkeypatch.setattr(settings, "JWT_SECRET", JWT_SECRET)
    monkeypatch.setattr(settings, "VIEWER_PASSWORD_HASH", _hash(VIEWER_PASSWORD))
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", _hash(ADMIN_PASSWORD))


async def login_headers(client: AsyncClient, password: str) -> dict:
    resp = await client.post("/api/auth/login", json={"password": password})
    token = resp.json()["accessToken"]
    return {"Authorization": f"Bearer {token}"}
