"""Data access layer over markers and images."""

from markermap.services.data_access import DataAccess
from markermap.services.image_service import ImageService
from markermap.services.marker_service import MarkerService
from markermap.services.operation import OperationResult, attempt

__all__ = [
    "DataAccess",
    "ImageService",
    "MarkerService",
    "OperationResult",
    "attempt",
]
