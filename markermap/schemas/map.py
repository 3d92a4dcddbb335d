"""Map surface schemas: coordinates, regions and tap events."""

from pydantic import BaseModel, Field


class Coordinate(BaseModel):
    """A (latitude, longitude) pair as reported by the map widget."""

    latitude: float
    longitude: float

    model_config = {"frozen": True}


class Region(BaseModel):
    """Visible map region."""

    latitude: float
    longitude: float
    latitude_delta: float = Field(alias="latitudeDelta")
    longitude_delta: float = Field(alias="longitudeDelta")

    model_config = {"populate_by_name": True, "frozen": True}


class MapPressEvent(BaseModel):
    """Tap on an empty spot of the map."""

    coordinate: Coordinate
