"""Image picker collaborator."""

from typing import Protocol

from pydantic import BaseModel, model_validator


class PickerError(Exception):
    """The picker could not complete."""


class PickerOptions(BaseModel):
    """What the picker is asked for: one image, user-side cropping allowed."""

    media_types: str = "images"
    allows_editing: bool = True
    aspect: tuple[int, int] = (4, 3)
    quality: float = 1.0


class PickerResult(BaseModel):
    """Either a cancelled pick or the URI of the picked image."""

    canceled: bool
    uri: str | None = None

    @model_validator(mode="after")
    def check_uri(self) -> "PickerResult":
        if not self.canceled and self.uri is None:
            raise ValueError("uri is required when the pick was not cancelled")
        return self

    @classmethod
    def cancelled(cls) -> "PickerResult":
        return cls(canceled=True)

    @classmethod
    def picked(cls, uri: str) -> "PickerResult":
        return cls(canceled=False, uri=uri)


class ImagePicker(Protocol):
    """Lets the user choose an image; the result URI is treated as opaque."""

    async def pick(self, options: PickerOptions) -> PickerResult:
        ...
