from typing import Protocol
from uuid import UUID

from images.domain.entities import Image


class ImageRepository(Protocol):
    async def get_by_id(self, image_id: UUID) -> Image | None: ...

    async def create(self, image: Image) -> Image: ...
