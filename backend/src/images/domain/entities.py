from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class Image:
    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE
    original_name: str | None = None
    id: UUID | None = field(default=None)
    created_at: datetime | None = field(default=None)
