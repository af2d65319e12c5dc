import json
import logging
from pathlib import Path
from typing import Any

from revisions.domain.entities import (
    PublishedSnapshot,
    Revision,
    RevisionStatus,
    RevisionSummary,
)
from revisions.domain.repository import RevisionRepository
from shared.exceptions import NotFoundError

logger = logging.getLogger(__name__)


async def get_published(repo: RevisionRepository, page: str) -> PublishedSnapshot:
    revision = await repo.get_published(page)
    if not revision:
        return PublishedSnapshot(page=page)
    return PublishedSnapshot(page=page, version=revision.version, data=revision.data)


async def list_revisions(repo: RevisionRepository, page: str) -> list[RevisionSummary]:
    return await repo.list_summaries(page)


async def get_revision(
    repo: RevisionRepository, page: str, version: int, minor: int | None = None
) -> Revision:
    """Fetch one revision; without a minor, prefer the published copy, then the latest."""
    if minor is not None:
        revision = await repo.get_exact(page, version, minor)
    else:
        revision = await repo.get_published_at(page, version)
        if not revision:
            revision = await repo.get_latest_at(page, version)

    if not revision:
        raise NotFoundError("Revision", _label(version, minor))
    return revision


async def create_draft(repo: RevisionRepository, page: str, data: list[Any]) -> Revision:
    published = await repo.get_published(page)
    version = (published.version if published else 0) + 1

    max_minor = await repo.get_max_minor(page, version)
    minor = max_minor + 1 if max_minor is not None else 1

    revision = await repo.create(
        Revision(page=page, version=version, minor=minor, data=data)
    )
    logger.info("Created draft %s for page %r", _label(version, minor), page)
    return revision


async def update_draft(
    repo: RevisionRepository,
    page: str,
    version: int,
    data: list[Any],
    minor: int | None = None,
) -> None:
    if not await repo.update_draft_data(page, version, minor, data):
        raise NotFoundError("Draft revision", _label(version, minor))


async def publish(
    repo: RevisionRepository, page: str, version: int, minor: int | None = None
) -> Revision:
    revision = await repo.publish(page, version, minor)
    if not revision:
        raise NotFoundError("Revision", _label(version, minor))
    logger.info("Published revision %s for page %r", _label(version, minor), page)
    return revision


async def seed_if_empty(
    repo: RevisionRepository, page: str, data: list[Any] | None = None
) -> Revision | None:
    """Insert the initial v1 draft when the page has no history. Idempotent."""
    if await repo.count(page):
        return None

    revision = await repo.create(
        Revision(
            page=page,
            version=1,
            minor=0,
            status=RevisionStatus.DRAFT,
            data=data if data is not None else [],
        )
    )
    logger.info("Seeded initial draft revision v1 for page %r", page)
    return revision


def load_seed_data(path: str | None) -> list[Any]:
    if not path:
        return []
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Seed data in {path} must be a JSON array")
    return data


def _label(version: int, minor: int | None) -> str:
    return f"v{version}" if minor is None else f"v{version}.{minor}"
