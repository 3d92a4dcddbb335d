"""Marker service for map point management."""

from sqlalchemy.ext.asyncio import AsyncSession

from markermap.models.marker import Marker
from markermap.schemas.marker import MarkerDTO
from markermap.services.base_service import BaseService


class MarkerService(BaseService[Marker]):
    """Marker service for CRUD operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Marker)

    async def get_all_dto(self) -> list[MarkerDTO]:
        """Get all markers as DTOs."""
        markers = await self.get_all()
        return [self._to_dto(m) for m in markers]

    async def create_marker(self, latitude: float, longitude: float) -> int:
        """Create new marker and return its generated id."""
        marker = await self.create(Marker(latitude=latitude, longitude=longitude))
        return marker.id

    async def delete_marker(self, marker_id: int) -> bool:
        """Delete marker by ID; its images go with it through the FK cascade."""
        return await self.delete_by_id(marker_id)

    def _to_dto(self, marker: Marker) -> MarkerDTO:
        """Convert Marker model to DTO."""
        return MarkerDTO(
            id=marker.id,
            latitude=marker.latitude,
            longitude=marker.longitude,
        )
