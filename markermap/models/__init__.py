"""Database models."""

from markermap.models.image import Image
from markermap.models.marker import Marker

__all__ = [
    "Image",
    "Marker",
]
