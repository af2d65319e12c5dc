import jwt
import pytest

from auth.application.services import authenticate, hash_password, verify_token
from auth.domain.entities import Role
from conftest import ADMIN_PASSWORD, JWT_SECRET, VIEWER_PASSWORD
from shared.config import settings
from shared.exceptions import AuthenticationError


def test_hash_password_is_not_plaintext():
    hashed = hash_password("secret123")
    assert hashed != "secret123"
    assert hashed.startswith("$2")


def test_authenticate_viewer(access_gate):
    grant, token = authenticate(VIEWER_PASSWORD)
    assert grant.role == Role.VIEWER

    payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    assert payload["sub"] == "viewer"
    assert "exp" in payload


def test_authenticate_admin(access_gate):
    grant, _ = authenticate(ADMIN_PASSWORD)
    assert grant.role == Role.ADMIN


def test_authenticate_wrong_password(access_gate):
    with pytest.raises(AuthenticationError, match="Incorrect password"):
        authenticate("wrong")


def test_authenticate_without_configured_hashes(monkeypatch):
    monkeypatch.setattr(settings, "VIEWER_PASSWORD_HASH", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "")
    with pytest.raises(AuthenticationError):
        authenticate("")


def test_authenticate_ignores_malformed_hash(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", JWT_SECRET)
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", "not-a-bcrypt-hash")
    monkeypatch.setattr(settings, "VIEWER_PASSWORD_HASH", "")
    with pytest.raises(AuthenticationError):
        authenticate("anything")


def test_verify_token_roundtrip(access_gate):
    _, token = authenticate(ADMIN_PASSWORD)
    assert verify_token(token).role == Role.ADMIN


def test_verify_invalid_token():
    with pytest.raises(AuthenticationError, match="Invalid or expired token"):
        verify_token("garbage.token.here")


def test_verify_token_with_unknown_role(access_gate):
    token = jwt.encode({"sub": "owner"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    with pytest.raises(AuthenticationError):
        verify_token(token)


def test_authenticate_refuses_without_signing_key(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", "")
    monkeypatch.setattr(settings, "ADMIN_PASSWORD_HASH", hash_password("admin"))
    with pytest.raises(AuthenticationError, match="not configured"):
        authenticate("admin")


def test_verify_token_signed_with_other_key(access_gate):
    token = jwt.encode({"sub": "admin"}, "dev-secret", algorithm=settings.JWT_ALGORITHM)
    with pytest.raises(AuthenticationError):
        verify_token(token)
