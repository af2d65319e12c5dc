from fastapi import APIRouter, Depends

from auth.application.services import authenticate
from auth.domain.entities import AccessGrant
from auth.interfaces.schemas import GrantResponse, LoginRequest, TokenResponse
from shared.dependencies import get_current_grant

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest):
    grant, token = authenticate(body.password)
    return TokenResponse(access_token=token, role=grant.role)


@router.get("/me", response_model=GrantResponse)
async def me(grant: AccessGrant = Depends(get_current_grant)):
    return grant
