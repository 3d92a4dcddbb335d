"""Render models produced by the views."""

from enum import Enum

from pydantic import BaseModel

from markermap.schemas.image import ImageDTO
from markermap.schemas.map import Coordinate, Region
from markermap.schemas.marker import MarkerDTO


class Pin(BaseModel):
    """One marker drawn on the map."""

    marker_id: int
    coordinate: Coordinate


class MapRender(BaseModel):
    """Everything the map screen draws."""

    region: Region
    pins: list[Pin]
    loading: bool = False
    error: str | None = None


class DetailState(str, Enum):
    """Lifecycle of one detail screen instance."""

    LOADING = "loading"
    READY = "ready"
    CLOSED = "closed"


class Thumbnail(BaseModel):
    """One attached image with its delete action."""

    image_id: int
    uri: str


class DetailRender(BaseModel):
    """Everything the marker detail screen draws."""

    title: str
    marker: MarkerDTO
    thumbnails: list[Thumbnail]
    state: DetailState

    @classmethod
    def thumbnails_for(cls, images: list[ImageDTO]) -> list[Thumbnail]:
        return [Thumbnail(image_id=image.id, uri=image.uri) for image in images]
