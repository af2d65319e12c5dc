from typing import Any, Protocol

from revisions.domain.entities import Revision, RevisionSummary


class RevisionRepository(Protocol):
    async def count(self, page: str) -> int: ...

    async def get_published(self, page: str) -> Revision | None: ...

    async def list_summaries(self, page: str) -> list[RevisionSummary]: ...

    async def get_exact(self, page: str, version: int, minor: int) -> Revision | None: ...

    async def get_published_at(self, page: str, version: int) -> Revision | None: ...

    async def get_latest_at(self, page: str, version: int) -> Revision | None: ...

    async def get_max_minor(self, page: str, version: int) -> int | None: ...

    async def create(self, revision: Revision) -> Revision: ...

    async def update_draft_data(
        self, page: str, version: int, minor: int | None, data: list[Any]
    ) -> bool: ...

    async def publish(self, page: str, version: int, minor: int | None) -> Revision | None: ...
