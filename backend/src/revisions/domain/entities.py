from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class RevisionStatus(StrEnum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


@dataclass
class Revision:
    page: str
    version: int
    minor: int = 0
    status: RevisionStatus = RevisionStatus.DRAFT
    data: list[Any] = field(default_factory=list)
    id: int | None = field(default=None)
    created_at: datetime | None = field(default=None)
    updated_at: datetime | None = field(default=None)


@dataclass
class RevisionSummary:
    """Revision metadata without the content payload."""

    version: int
    minor: int
    status: RevisionStatus
    created_at: datetime | None = field(default=None)
    updated_at: datetime | None = field(default=None)


@dataclass
class PublishedSnapshot:
    page: str
    version: int = 0
    data: list[Any] = field(default_factory=list)
