from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from images.domain.entities import Image
from images.infrastructure.models import ImageModel
from shared.infrastructure.database import translate_errors


class DbImageRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_errors
    async def get_by_id(self, image_id: UUID) -> Image | None:
        result = await self.session.execute(
            select(ImageModel).where(ImageModel.id == image_id)
        )
        model = result.scalar_one_or_none()
        return _to_entity(model) if model else None

    @translate_errors
    async def create(self, image: Image) -> Image:
        model = ImageModel(
            data=image.data,
            content_type=image.content_type,
            original_name=image.original_name,
            created_at=datetime.now(timezone.utc),
        )
        self.session.add(model)
        await self.session.commit()
        await self.session.refresh(model)
        return _to_entity(model)


def _to_entity(model: ImageModel) -> Image:
    return Image(
        id=model.id,
        data=model.data,
        content_type=model.content_type,
        original_name=model.original_name,
        created_at=model.created_at,
    )
