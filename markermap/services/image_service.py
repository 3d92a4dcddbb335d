"""Image service for photos attached to markers."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from markermap.models.image import Image
from markermap.schemas.image import ImageDTO
from markermap.services.base_service import BaseService


class ImageService(BaseService[Image]):
    """Image service for CRUD operations scoped to a marker."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Image)

    async def get_for_marker(self, marker_id: int) -> list[ImageDTO]:
        """Get the images of one marker in insertion order."""
        result = await self.db.execute(
            select(Image).where(Image.marker_id == marker_id).order_by(Image.id)
        )
        return [self._to_dto(i) for i in result.scalars().all()]

    async def create_image(self, marker_id: int, uri: str) -> int:
        """Attach an image URI to a marker."""
        image = await self.create(Image(uri=uri, marker_id=marker_id))
        return image.id

    async def delete_image(self, image_id: int) -> bool:
        """Delete image by ID."""
        return await self.delete_by_id(image_id)

    def _to_dto(self, image: Image) -> ImageDTO:
        """Convert Image model to DTO."""
        return ImageDTO(id=image.id, uri=image.uri, marker_id=image.marker_id)
