import logging
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from auth.domain.entities import AccessGrant, Role
from shared.config import settings
from shared.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def authenticate(password: str) -> tuple[AccessGrant, str]:
    """Match a shared password against the configured hashes, admin first."""
    if not settings.JWT_SECRET:
        raise AuthenticationError("Access gate is not configured")

    candidates = [
        (Role.ADMIN, settings.ADMIN_PASSWORD_HASH),
        (Role.VIEWER, settings.VIEWER_PASSWORD_HASH),
    ]
    for role, password_hash in candidates:
        if password_hash and _check(password, password_hash):
            logger.info("Granted %s access", role)
            return AccessGrant(role=role), _create_token(role)

    raise AuthenticationError("Incorrect password")


def verify_token(token: str) -> AccessGrant:
    if not settings.JWT_SECRET:
        raise AuthenticationError("Invalid or expired token")
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
    except jwt.PyJWTError:
        raise AuthenticationError("Invalid or expired token")

    try:
        role = Role(payload.get("sub"))
    except ValueError:
        raise AuthenticationError("Invalid or expired token")
    return AccessGrant(role=role)


def _check(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        logger.warning("Configured password hash is not a valid bcrypt hash")
        return False


def _create_token(role: Role) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": role.value,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRATION_MINUTES),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
