"""Marker detail screen: attached photos, delete marker, add/remove photos."""

from typing import Callable

from loguru import logger

from markermap.schemas.image import ImageDTO
from markermap.schemas.marker import MarkerDTO
from markermap.schemas.view import DetailRender, DetailState
from markermap.services.data_access import DataAccess
from markermap.services.operation import attempt
from markermap.ui.alerts import Alert, AlertPresenter
from markermap.ui.feed import MarkerFeed
from markermap.ui.navigation import Navigator
from markermap.ui.picker import ImagePicker, PickerError, PickerOptions


class MarkerDetailView:
    """Detail screen for one marker.

    ``marker``, ``markers`` and ``set_markers`` arrive as route params from
    the map screen. The marker list is never re-fetched here: after a
    marker delete the received list is filtered and handed back through
    ``set_markers``.
    """

    route_name = "MarkerDetail"
    title = "Marker details"

    def __init__(
        self,
        data_access: DataAccess,
        navigator: Navigator,
        alerts: AlertPresenter,
        picker: ImagePicker,
        feed: MarkerFeed,
        *,
        marker: MarkerDTO,
        markers: list[MarkerDTO],
        set_markers: Callable[[list[MarkerDTO]], None],
    ):
        self.data_access = data_access
        self.navigator = navigator
        self.alerts = alerts
        self.picker = picker
        self.feed = feed

        self.marker = marker
        self.markers = markers
        self.set_markers = set_markers

        self.images: list[ImageDTO] = []
        self.state = DetailState.LOADING
        self._unsubscribe: Callable[[], None] | None = None

    async def mount(self) -> None:
        """Load the images attached to this marker."""
        self._unsubscribe = self.feed.subscribe(self._on_markers)
        await self._reload_images()
        self.state = DetailState.READY

    async def unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    async def focus(self) -> None:
        pass

    async def delete_marker(self) -> bool:
        """Delete this marker and its images, patch the map list, go back."""
        result = await attempt(
            "delete_marker", self.data_access.delete_marker(self.marker.id)
        )
        if not result.ok:
            self.alerts.show(Alert("Error", "Could not delete marker"))
            return False

        logger.info(f"Marker deleted: {self.marker.id}")
        updated = [m for m in self.markers if m.id != self.marker.id]
        self.set_markers(updated)
        self.state = DetailState.CLOSED
        await self.navigator.go_back()
        return True

    async def add_image(self) -> bool:
        """Pick an image and attach it to this marker.

        Returns False when the user cancelled or something failed.
        """
        try:
            picked = await self.picker.pick(PickerOptions())
        except PickerError as e:
            logger.error(f"Image picker failed: {e}")
            self.alerts.show(Alert("Error", "Could not pick image"))
            return False

        if picked.canceled:
            return False

        result = await attempt(
            "add_image", self.data_access.add_image(self.marker.id, picked.uri)
        )
        if not result.ok:
            self.alerts.show(Alert("Error", "Could not pick image"))
            return False

        return await self._reload_images()

    async def delete_image(self, image_id: int) -> bool:
        """Delete one image and drop it from the local list."""
        result = await attempt("delete_image", self.data_access.delete_image(image_id))
        if not result.ok:
            self.alerts.show(Alert("Error", "Could not delete image"))
            return False

        logger.info(f"Image deleted: {image_id}")
        self.images = [image for image in self.images if image.id != image_id]
        return True

    async def _reload_images(self) -> bool:
        result = await attempt(
            "get_images", self.data_access.get_images(self.marker.id)
        )
        if not result.ok:
            self.alerts.show(Alert("Error", "Could not load images"))
            return False
        self.images = result.value
        return True

    def _on_markers(self, markers: list[MarkerDTO]) -> None:
        self.markers = markers

    def render(self) -> DetailRender:
        return DetailRender(
            title=self.title,
            marker=self.marker,
            thumbnails=DetailRender.thumbnails_for(self.images),
            state=self.state,
        )
