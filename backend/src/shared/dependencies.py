from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.application.services import verify_token
from auth.domain.entities import AccessGrant, Role
from shared.config import settings
from shared.exceptions import AuthenticationError, AuthorizationError

security = HTTPBearer(auto_error=False)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.database.session() as session:
        yield session


async def get_current_grant(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> AccessGrant:
    if not settings.AUTH_ENABLED:
        return AccessGrant(role=Role.ADMIN)
    if credentials is None:
        raise AuthenticationError("Missing bearer token")
    return verify_token(credentials.credentials)


async def require_viewer(grant: AccessGrant = Depends(get_current_grant)) -> AccessGrant:
    return grant


async def require_admin(grant: AccessGrant = Depends(get_current_grant)) -> AccessGrant:
    if grant.role != Role.ADMIN:
        raise AuthorizationError("Admin access required")
    return grant
