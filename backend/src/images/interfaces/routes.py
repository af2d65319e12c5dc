from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from auth.domain.entities import AccessGrant
from images.application.services import get_image, upload_image
from images.infrastructure.image_repository import DbImageRepository
from images.interfaces.schemas import ImageUploadResponse
from shared.config import settings
from shared.dependencies import get_db, require_admin

router = APIRouter(prefix="/api/images", tags=["images"])


@router.post("", response_model=ImageUploadResponse)
async def upload(
    file: UploadFile | None = File(None),
    _: AccessGrant = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    data = None
    if file is not None:
        # at most one byte past the limit
        data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    repo = DbImageRepository(db)
    image = await upload_image(
        repo,
        data=data,
        content_type=file.content_type if file else None,
        original_name=file.filename if file else None,
        max_bytes=settings.MAX_UPLOAD_BYTES,
    )
    return ImageUploadResponse(id=image.id)


@router.get("/{image_id}")
async def fetch(
    image_id: str,
    db: AsyncSession = Depends(get_db),
):
    repo = DbImageRepository(db)
    image = await get_image(repo, image_id)
    return Response(content=image.data, media_type=image.content_type)
