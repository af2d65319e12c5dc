import logging
from uuid import UUID

from images.domain.entities import DEFAULT_CONTENT_TYPE, Image
from images.domain.repository import ImageRepository
from shared.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


async def upload_image(
    repo: ImageRepository,
    data: bytes | None,
    content_type: str | None,
    original_name: str | None,
    max_bytes: int,
) -> Image:
    if data is None:
        raise ValidationError("No file uploaded")
    if len(data) > max_bytes:
        raise ValidationError(f"File exceeds the upload limit of {max_bytes} bytes")

    image = await repo.create(
        Image(
            data=data,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            original_name=original_name,
        )
    )
    logger.info("Stored image %s (%d bytes, %s)", image.id, len(data), image.content_type)
    return image


async def get_image(repo: ImageRepository, image_id: UUID | str) -> Image:
    if not isinstance(image_id, UUID):
        try:
            image_id = UUID(image_id)
        except ValueError:
            raise NotFoundError("Image", image_id) from None
    image = await repo.get_by_id(image_id)
    if not image:
        raise NotFoundError("Image", str(image_id))
    return image
