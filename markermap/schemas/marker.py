"""Marker schemas handed to the views."""

from pydantic import BaseModel

from markermap.schemas.map import Coordinate


class MarkerDTO(BaseModel):
    """Marker row as seen by the views."""

    id: int
    latitude: float
    longitude: float

    model_config = {"frozen": True}

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)
