"""Pydantic schemas exchanged between the data layer and the views."""

from markermap.schemas.image import ImageDTO
from markermap.schemas.map import Coordinate, MapPressEvent, Region
from markermap.schemas.marker import MarkerDTO
from markermap.schemas.view import (
    DetailRender,
    DetailState,
    MapRender,
    Pin,
    Thumbnail,
)

__all__ = [
    "Coordinate",
    "DetailRender",
    "DetailState",
    "ImageDTO",
    "MapPressEvent",
    "MapRender",
    "MarkerDTO",
    "Pin",
    "Region",
    "Thumbnail",
]
