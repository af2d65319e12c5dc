from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from auth.domain.entities import Role


class LoginRequest(BaseModel):
    password: str


class TokenResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    access_token: str
    token_type: str = "bearer"
    role: Role


class GrantResponse(BaseModel):
    role: Role
