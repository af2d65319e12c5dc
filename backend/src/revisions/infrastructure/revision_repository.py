from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Select, case, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from revisions.domain.entities import Revision, RevisionStatus, RevisionSummary
from revisions.infrastructure.models import RevisionModel
from shared.infrastructure.database import translate_errors

# archived history can share a (version, minor) pair with a live row
_live_first = case((RevisionModel.status == RevisionStatus.ARCHIVED.value, 1), else_=0)


class DbRevisionRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_errors
    async def count(self, page: str) -> int:
        result = await self.session.execute(
            select(func.count()).select_from(RevisionModel).where(RevisionModel.page == page)
        )
        return result.scalar_one()

    @translate_errors
    async def get_published(self, page: str) -> Revision | None:
        model = await self._first(
            select(RevisionModel).where(
                RevisionModel.page == page,
                RevisionModel.status == RevisionStatus.PUBLISHED.value,
            )
        )
        return _to_entity(model) if model else None

    @translate_errors
    async def list_summaries(self, page: str) -> list[RevisionSummary]:
        result = await self.session.execute(
            select(
                RevisionModel.version,
                RevisionModel.minor,
                RevisionModel.status,
                RevisionModel.created_at,
                RevisionModel.updated_at,
            )
            .where(RevisionModel.page == page)
            .order_by(
                RevisionModel.version.desc(),
                RevisionModel.minor.desc(),
                RevisionModel.updated_at.desc(),
            )
        )
        return [
            RevisionSummary(
                version=row.version,
                minor=row.minor,
                status=RevisionStatus(row.status or RevisionStatus.DRAFT),
                created_at=row.created_at,
                updated_at=row.updated_at,
            )
            for row in result.all()
        ]

    @translate_errors
    async def get_exact(self, page: str, version: int, minor: int) -> Revision | None:
        model = await self._first(self._exact(page, version, minor))
        return _to_entity(model) if model else None

    @translate_errors
    async def get_published_at(self, page: str, version: int) -> Revision | None:
        model = await self._first(
            select(RevisionModel).where(
                RevisionModel.page == page,
                RevisionModel.version == version,
                RevisionModel.status == RevisionStatus.PUBLISHED.value,
            )
        )
        return _to_entity(model) if model else None

    @translate_errors
    async def get_latest_at(self, page: str, version: int) -> Revision | None:
        model = await self._first(
            select(RevisionModel)
            .where(RevisionModel.page == page, RevisionModel.version == version)
            .order_by(RevisionModel.minor.desc(), RevisionModel.updated_at.desc())
        )
        return _to_entity(model) if model else None

    @translate_errors
    async def get_max_minor(self, page: str, version: int) -> int | None:
        result = await self.session.execute(
            select(func.max(RevisionModel.minor)).where(
                RevisionModel.page == page, RevisionModel.version == version
            )
        )
        return result.scalar_one()

    @translate_errors
    async def create(self, revision: Revision) -> Revision:
        now = _utcnow()
        model = RevisionModel(
            page=revision.page,
            version=revision.version,
            minor=revision.minor,
            status=revision.status.value,
            data=revision.data,
            created_at=now,
            updated_at=now,
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return _to_entity(model)

    @translate_errors
    async def update_draft_data(
        self, page: str, version: int, minor: int | None, data: list[Any]
    ) -> bool:
        guard = [
            RevisionModel.page == page,
            RevisionModel.version == version,
            RevisionModel.status == RevisionStatus.DRAFT.value,
        ]
        if minor is not None:
            guard.append(RevisionModel.minor == minor)
        else:
            latest = aliased(RevisionModel)
            guard.append(
                RevisionModel.id
                == select(latest.id)
                .where(
                    latest.page == page,
                    latest.version == version,
                    latest.status == RevisionStatus.DRAFT.value,
                )
                .order_by(latest.minor.desc())
                .limit(1)
                .scalar_subquery()
            )

        # draft status is checked by the UPDATE itself, not by an earlier read
        result = await self.session.execute(
            update(RevisionModel)
            .where(*guard)
            .values(data=data, updated_at=_utcnow())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self.session.rollback()
            return False

        await self.session.commit()
        self.session.expire_all()
        return True

    @translate_errors
    async def publish(self, page: str, version: int, minor: int | None) -> Revision | None:
        """Promote a revision to published in a single transaction.

        Returns None, with nothing changed, when no target revision resolves.
        """
        now = _utcnow()
        try:
            # serialize concurrent publishers on this page (no-op on SQLite)
            await self.session.execute(
                select(RevisionModel.id).where(RevisionModel.page == page).with_for_update()
            )

            if minor is not None:
                target = await self._first(self._exact(page, version, minor))
            else:
                target = await self._first(
                    select(RevisionModel)
                    .where(
                        RevisionModel.page == page,
                        RevisionModel.version == version,
                        RevisionModel.status != RevisionStatus.ARCHIVED.value,
                    )
                    .order_by(RevisionModel.minor.desc())
                )
            if target is None:
                await self.session.rollback()
                return None

            if not target.status or target.status == RevisionStatus.PUBLISHED.value:
                target.status = RevisionStatus.DRAFT.value
                target.updated_at = now
                await self.session.flush()

            # the current published copy and anything else holding (version, 0)
            displaced = await self.session.execute(
                select(RevisionModel).where(
                    RevisionModel.page == page,
                    RevisionModel.id != target.id,
                    (RevisionModel.status == RevisionStatus.PUBLISHED.value)
                    | (
                        (RevisionModel.version == version)
                        & (RevisionModel.minor == 0)
                        & (RevisionModel.status != RevisionStatus.ARCHIVED.value)
                    ),
                )
            )
            for model in displaced.scalars().all():
                model.status = RevisionStatus.ARCHIVED.value
                model.updated_at = now
            await self.session.flush()

            target.status = RevisionStatus.PUBLISHED.value
            target.minor = 0
            target.updated_at = now
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        return _to_entity(target)

    def _exact(self, page: str, version: int, minor: int) -> Select:
        return (
            select(RevisionModel)
            .where(
                RevisionModel.page == page,
                RevisionModel.version == version,
                RevisionModel.minor == minor,
            )
            .order_by(_live_first, RevisionModel.updated_at.desc())
        )

    async def _first(self, query: Select) -> RevisionModel | None:
        result = await self.session.execute(query.limit(1))
        return result.scalars().first()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_entity(model: RevisionModel) -> Revision:
    return Revision(
        id=model.id,
        page=model.page,
        version=model.version,
        minor=model.minor,
        status=RevisionStatus(model.status or RevisionStatus.DRAFT),
        data=model.data,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
