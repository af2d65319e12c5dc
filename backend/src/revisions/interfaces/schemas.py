from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from revisions.domain.entities import RevisionStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RevisionDataRequest(BaseModel):
    data: list[Any] = Field(default_factory=list)


class DataroomResponse(BaseModel):
    page: str
    data: list[Any]
    version: int


class RevisionSummaryResponse(CamelModel):
    version: int
    minor: int
    status: RevisionStatus
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RevisionResponse(RevisionSummaryResponse):
    data: list[Any]


class OkResponse(BaseModel):
    ok: bool = True


class CreatedRevisionResponse(OkResponse):
    version: int
    minor: int
