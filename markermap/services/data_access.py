"""Data access layer: the only component that talks to the database.

Each operation opens its own session, delegates to the marker or image
service, and converts any database failure into a ``StorageError``.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from markermap.core.errors import ReferentialIntegrityError, StorageError
from markermap.db.session import DatabaseHandle
from markermap.schemas.image import ImageDTO
from markermap.schemas.marker import MarkerDTO
from markermap.services.image_service import ImageService
from markermap.services.marker_service import MarkerService


class DataAccess:
    """Async CRUD over markers and their images.

    Owns the open database handle for its whole lifetime; call ``close()``
    to release it.
    """

    def __init__(self, handle: DatabaseHandle):
        self._handle = handle

    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncGenerator[AsyncSession, None]:
        """Session for one operation; database errors become StorageError."""
        async with self._handle.session_maker() as db:
            try:
                yield db
            except IntegrityError as e:
                await db.rollback()
                logger.error(f"{operation} violated a constraint: {e}")
                if "FOREIGN KEY" in str(e.orig):
                    raise ReferentialIntegrityError(operation, e) from e
                raise StorageError(operation, e) from e
            except SQLAlchemyError as e:
                await db.rollback()
                logger.error(f"{operation} failed: {e}")
                raise StorageError(operation, e) from e

    async def get_markers(self) -> list[MarkerDTO]:
        """All markers in insertion order."""
        async with self._session("get_markers") as db:
            return await MarkerService(db).get_all_dto()

    async def add_marker(self, latitude: float, longitude: float) -> int:
        """Insert a marker and return its generated id."""
        async with self._session("add_marker") as db:
            marker_id = await MarkerService(db).create_marker(latitude, longitude)
        logger.info(f"Marker {marker_id} added at ({latitude}, {longitude})")
        return marker_id

    async def delete_marker(self, marker_id: int) -> None:
        """Delete a marker together with its images.

        One statement in one transaction; the image rows are removed by the
        ON DELETE CASCADE constraint. Deleting an absent id is a no-op.
        """
        async with self._session("delete_marker") as db:
            deleted = await MarkerService(db).delete_marker(marker_id)
        if deleted:
            logger.info(f"Marker {marker_id} deleted")
        else:
            logger.debug(f"Marker {marker_id} not found, nothing to delete")

    async def add_image(self, marker_id: int, uri: str) -> None:
        """Attach an image URI to an existing marker.

        Raises:
            ReferentialIntegrityError: the marker does not exist.
        """
        async with self._session("add_image") as db:
            image_id = await ImageService(db).create_image(marker_id, uri)
        logger.info(f"Image {image_id} attached to marker {marker_id}")

    async def get_images(self, marker_id: int) -> list[ImageDTO]:
        """Images of one marker in insertion order."""
        async with self._session("get_images") as db:
            return await ImageService(db).get_for_marker(marker_id)

    async def delete_image(self, image_id: int) -> None:
        """Delete one image. Deleting an absent id is a no-op."""
        async with self._session("delete_image") as db:
            deleted = await ImageService(db).delete_image(image_id)
        if deleted:
            logger.info(f"Image {image_id} deleted")
        else:
            logger.debug(f"Image {image_id} not found, nothing to delete")

    async def close(self) -> None:
        """Release the database handle."""
        await self._handle.dispose()
        logger.info("Database connection closed")
