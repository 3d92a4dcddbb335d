"""
Model registry.

Import all models here to ensure they are registered with SQLAlchemy metadata
before the schema initializer calls ``create_all``.
"""

from markermap.db.base import Base
from markermap.models.image import Image
from markermap.models.marker import Marker

__all__ = [
    "Base",
    "Image",
    "Marker",
]
