"""Image schemas handed to the views."""

from pydantic import BaseModel, Field


class ImageDTO(BaseModel):
    """Image row as seen by the views."""

    id: int
    uri: str
    marker_id: int = Field(alias="markerId")

    model_config = {"populate_by_name": True, "frozen": True}
