import pydantic
import pytest

from shared.config import Settings


def test_default_settings():
    s = Settings()
    assert "postgresql+asyncpg" in s.DATABASE_URL
    assert s.DATAROOM_PAGE == "main"
    assert s.MAX_UPLOAD_BYTES == 10 * 1024 * 1024
    assert s.AUTH_ENABLED is False
    assert s.JWT_SECRET == ""
    assert s.JWT_ALGORITHM == "HS256"
    assert s.JWT_EXPIRATION_MINUTES == 1440
    assert s.PORT == 8000


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://test:test@db:5432/testdb")
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.setenv("JWT_SECRET", "supersecret")
    monkeypatch.setenv("ADMIN_PASSWORD_HASH", "$2b$12$abc")
    monkeypatch.setenv("CORS_ORIGINS", '["https://dataroom.example.com"]')

    s = Settings()
    assert s.DATABASE_URL == "postgresql+asyncpg://test:test@db:5432/testdb"
    assert s.AUTH_ENABLED is True
    assert s.JWT_SECRET == "supersecret"
    assert s.ADMIN_PASSWORD_HASH == "$2b$12$abc"
    assert s.CORS_ORIGINS == ["https://dataroom.example.com"]


def test_auth_enabled_requires_jwt_secret(monkeypatch):
    monkeypatch.setenv("AUTH_ENABLED", "true")
    monkeypatch.delenv("JWT_SECRET", raising=False)

    with pytest.raises(pydantic.ValidationError, match="JWT_SECRET"):
        Settings()
