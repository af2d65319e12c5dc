from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from auth.domain.entities import AccessGrant
from revisions.application.services import (
    create_draft,
    get_published,
    get_revision,
    list_revisions,
    publish,
    update_draft,
)
from revisions.infrastructure.revision_repository import DbRevisionRepository
from revisions.interfaces.schemas import (
    CreatedRevisionResponse,
    DataroomResponse,
    OkResponse,
    RevisionDataRequest,
    RevisionResponse,
    RevisionSummaryResponse,
)
from shared.config import settings
from shared.dependencies import get_db, require_admin, require_viewer

router = APIRouter(prefix="/api", tags=["revisions"])


@router.get("/dataroom", response_model=DataroomResponse)
async def dataroom(
    _: AccessGrant = Depends(require_viewer),
    db: AsyncSession = Depends(get_db),
):
    repo = DbRevisionRepository(db)
    return await get_published(repo, settings.DATAROOM_PAGE)


@router.get("/revisions", response_model=list[RevisionSummaryResponse])
async def list_all(
    _: AccessGrant = Depends(require_viewer),
    db: AsyncSession = Depends(get_db),
):
    repo = DbRevisionRepository(db)
    return await list_revisions(repo, settings.DATAROOM_PAGE)


@router.get("/revisions/{version}", response_model=RevisionResponse)
async def get_one(
    version: int,
    minor: int | None = None,
    _: AccessGrant = Depends(require_viewer),
    db: AsyncSession = Depends(get_db),
):
    repo = DbRevisionRepository(db)
    return await get_revision(repo, settings.DATAROOM_PAGE, version, minor)


@router.post("/revisions", response_model=CreatedRevisionResponse)
async def create(
    body: RevisionDataRequest,
    _: AccessGrant = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    repo = DbRevisionRepository(db)
    revision = await create_draft(repo, settings.DATAROOM_PAGE, body.data)
    return CreatedRevisionResponse(version=revision.version, minor=revision.minor)


@router.put("/revisions/{version}", response_model=OkResponse)
async def update(
    version: int,
    body: RevisionDataRequest,
    minor: int | None = None,
    _: AccessGrant = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    repo = DbRevisionRepository(db)
    await update_draft(repo, settings.DATAROOM_PAGE, version, body.data, minor=minor)
    return OkResponse()


@router.post("/publish/{version}", response_model=OkResponse)
async def publish_revision(
    version: int,
    minor: int | None = None,
    _: AccessGrant = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    repo = DbRevisionRepository(db)
    await publish(repo, settings.DATAROOM_PAGE, version, minor)
    return OkResponse()
